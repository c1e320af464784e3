import io
import sys

from neko import cli


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_help_prints_usage_and_exits_zero(capsys):
    try:
        cli.main(["--help"])
    except SystemExit as exc:
        assert exc.code == 0
    else:
        raise AssertionError("expected SystemExit to be raised")

    out = capsys.readouterr().out
    assert "neko [OPTION]... [FILE]..." in out
    assert "--number-nonblank" in out
    assert "neko f - g" in out


def test_short_help_flag(capsys):
    try:
        cli.main(["-h"])
    except SystemExit as exc:
        assert exc.code == 0
    else:
        raise AssertionError("expected SystemExit to be raised")


def test_combined_short_flags(tmp_path, capsysbinary):
    path = tmp_path / "in.txt"
    path.write_bytes(b"\nhello\n\nworld\tend\n")

    assert cli.main(["-bnt", str(path)]) == 0
    out = capsysbinary.readouterr().out
    assert out == b"\n     1  hello\n\n     2  world^Iend\n"


def test_upper_and_lower_e_both_show_ends(tmp_path, capsysbinary):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\n")

    assert cli.main(["-e", str(path)]) == 0
    assert cli.main(["-E", str(path)]) == 0
    assert capsysbinary.readouterr().out == b"a$\na$\n"


def test_long_flags(tmp_path, capsysbinary):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\x01\tb\n")

    assert cli.main(["--number", "--show-nonprinting", "--show-ends", str(path)]) == 0
    assert capsysbinary.readouterr().out == b"     1  a^A\tb$\n"


def test_defaults_to_stdin(monkeypatch, capsysbinary):
    _stdin(monkeypatch, b"piped\n")
    assert cli.main([]) == 0
    assert capsysbinary.readouterr().out == b"piped\n"


def test_missing_file_sets_exit_status(tmp_path, monkeypatch, capsysbinary):
    _stdin(monkeypatch, b"after\n")
    missing = tmp_path / "missing"

    assert cli.main([str(missing), "-"]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b"after\n"
    assert f"neko: {missing}: No such file or directory".encode() in captured.err


def test_rejects_non_positive_max_line_length(capsys):
    try:
        cli.main(["--max-line-length", "0"])
    except SystemExit as exc:
        assert exc.code == 2
    else:
        raise AssertionError("expected SystemExit to be raised")
    assert "positive integer" in capsys.readouterr().err


def test_keyboard_interrupt_exit_code(monkeypatch):
    _stdin(monkeypatch, b"")

    def fake_run_cat(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr("neko.cli.run_cat", fake_run_cat)
    assert cli.main([]) == 130


def test_config_is_resolved_from_flags(monkeypatch):
    seen = {}

    def fake_run_cat(names, config, **kwargs):
        seen["names"] = names
        seen["config"] = config
        return 0

    monkeypatch.setattr("neko.cli.run_cat", fake_run_cat)
    monkeypatch.setattr(
        "neko.cli.configure_logging", lambda verbosity: seen.setdefault("verbosity", verbosity)
    )
    assert cli.main(["-n", "-b", "--verbose", "--verbose", "a", "-"]) == 0

    config = seen["config"]
    assert seen["names"] == ["a", "-"]
    assert config.number_nonblank is True
    assert config.number_all is False
    assert config.verbosity == 2
    assert seen["verbosity"] == 2
    assert config.max_line_length is None
