"""
Line transformation pipeline for neko.

transform_line applies the display options to one line in a fixed order:
numbering, tab visualization, end marker, then non-printing escapes.
Each stage works on the output of the previous one, so for example the
"$" added by --show-ends is never escaped and a number prefix is never
touched by --show-tabs.

Everything here is a pure function of its arguments.
"""

from __future__ import annotations

from .config import Config
from .domain import StreamSession

NUMBER_WIDTH = 6
NUMBER_SEPARATOR = "  "
TAB_MARKER = "^I"
END_MARKER = "$"


def create_numbered_line(line: str, number: int) -> str:
    """
    Prefix line with number right-justified in a six character field.

    Numbers wider than the field are not truncated; the field grows.
    """

    return f"{number:>{NUMBER_WIDTH}d}{NUMBER_SEPARATOR}{line}"


def visualize_tabs(line: str) -> str:
    return line.replace("\t", TAB_MARKER)


def convert_non_printing(line: str, show_tabs: bool = False) -> str:
    """
    Rewrite control and high-bit characters using ^ and M- notation.

    Code points are expected in the 0-255 range, one per input byte.

      < 32        ^ followed by the matching letter (tab kept unless
                  show_tabs is set)
      32 .. 126   unchanged
      127         ^?
      128 .. 159  M- followed by the low control character, not re-escaped
      160 .. 254  M-^ followed by code - 64
      255         M-^?

    Anything above 255 is left as is.
    """

    parts = []
    for ch in line:
        code = ord(ch)
        if code < 32:
            if ch == "\t" and not show_tabs:
                parts.append(ch)
            else:
                parts.append("^" + chr(code + 64))
        elif code < 127:
            parts.append(ch)
        elif code == 127:
            parts.append("^?")
        elif code == 255:
            parts.append("M-^?")
        elif code < 160:
            parts.append("M-" + chr(code - 128))
        elif code < 255:
            parts.append("M-^" + chr(code - 128 + 64))
        else:
            parts.append(ch)
    return "".join(parts)


def transform_line(line: str, session: StreamSession, config: Config) -> str:
    """
    Produce the text to print for line, without its trailing newline.

    session must already account for line (see StreamSession.record), as
    both numbering schemes read the post-increment counters.
    """

    if not config.any_transform:
        return line

    result = line

    if config.number_nonblank:
        if line != "":
            result = create_numbered_line(result, session.non_blank_number)
    elif config.number_all:
        result = create_numbered_line(result, session.line_number)

    if config.show_tabs:
        result = visualize_tabs(result)

    if config.show_ends:
        result += END_MARKER

    if config.show_nonprinting:
        result = convert_non_printing(result, show_tabs=config.show_tabs)

    return result
