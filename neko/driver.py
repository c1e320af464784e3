"""
Stream driver for neko.

The driver opens each source in turn, splits it into lines, keeps the
per-source StreamSession counters and writes every transformed line to
the output sink. A failing source is reported and skipped; the rest of
the run carries on and only the final exit status reflects the failure.

Sources are read as bytes and decoded as latin-1, so each byte maps to
exactly one code point in the 0-255 range the escaper works on. Output
is encoded back the same way, which keeps untransformed text byte-exact.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Sequence, TextIO

from .config import Config
from .domain import StreamSession
from .errors import SourceError, SourceOpenError, SourceReadError, describe_os_error
from .transform import transform_line

LOG = logging.getLogger(__name__)

STDIN_NAME = "-"
ENCODING = "latin-1"


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def iter_lines(
    stream: BinaryIO,
    name: str,
    max_line_length: Optional[int] = None,
) -> Iterator[str]:
    """
    Yield the lines of stream without their terminators.

    A trailing "\\r" before the newline is dropped along with it. The last
    line is yielded even when the stream does not end with a newline.
    Raises SourceReadError on I/O faults and on lines longer than
    max_line_length bytes.
    """

    while True:
        try:
            raw = stream.readline()
        except OSError as exc:
            raise SourceReadError(name, describe_os_error(exc)) from exc

        if not raw:
            return

        line = _strip_terminator(raw)
        if max_line_length is not None and len(line) > max_line_length:
            raise SourceReadError(
                name, f"line {len(line)} bytes long exceeds the {max_line_length} byte limit"
            )
        yield line.decode(ENCODING)


def cat_stream(stream: BinaryIO, name: str, config: Config, out: BinaryIO) -> int:
    """
    Copy one source to out, transforming each line.

    Returns the number of lines written. Lines already written before a
    SourceReadError stay written; out is flushed either way.
    """

    session = StreamSession()
    LOG.debug("Reading source %s", name)
    try:
        for line in iter_lines(stream, name, config.max_line_length):
            session.record(line)
            out.write(transform_line(line, session, config).encode(ENCODING))
            out.write(b"\n")
    finally:
        out.flush()
    return session.line_number


@contextmanager
def open_source(name: str, stdin: Optional[BinaryIO]) -> Iterator[BinaryIO]:
    """
    Open the named source for binary reading.

    "-" stands for stdin, which is handed back as is and never closed.
    stdin is None when the process was started with descriptor 0 closed;
    "-" then fails to open like any missing file.

    A failure to close the file is reported as a SourceReadError, unless
    the body already raised, in which case that error wins.
    """

    if name == STDIN_NAME:
        if stdin is None:
            raise SourceOpenError(name, "Bad file descriptor")
        yield stdin
        return

    try:
        stream = open(name, "rb")
    except OSError as exc:
        raise SourceOpenError(name, describe_os_error(exc)) from exc

    try:
        yield stream
    except BaseException:
        try:
            stream.close()
        except OSError:
            LOG.debug("Failed to close %s after an earlier error", name, exc_info=True)
        raise

    try:
        stream.close()
    except OSError as exc:
        raise SourceReadError(name, describe_os_error(exc)) from exc


def report_error(exc: SourceError, stderr: TextIO) -> None:
    print(f"neko: {exc}", file=stderr)
    stderr.flush()


def run_cat(
    names: Sequence[str],
    config: Config,
    *,
    stdin: Optional[BinaryIO],
    stdout: BinaryIO,
    stderr: TextIO,
) -> int:
    """
    Process every source in order and return the process exit status.

    No names means a single pass over stdin. The status is 0 when every
    source was read completely and 1 when at least one failed to open or
    read.
    """

    if not names:
        names = [STDIN_NAME]

    failures = 0
    for name in names:
        try:
            with open_source(name, stdin) as stream:
                count = cat_stream(stream, name, config, stdout)
        except SourceError as exc:
            failures += 1
            LOG.debug("Skipping rest of source %s", name, exc_info=True)
            report_error(exc, stderr)
            continue
        LOG.info("Finished %s (%d lines)", name, count)

    if failures:
        LOG.info("%d of %d sources failed", failures, len(names))
        return 1
    return 0
