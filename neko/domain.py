"""
Per-source state for neko.

A StreamSession is created for every source the driver opens and is
discarded when that source is exhausted or fails, so line numbers never
carry over from one file to the next.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StreamSession:
    """
    Running counters for one input source.

    line_number counts every line read so far (1-based once the first line
    has been recorded); blank_line_count counts the zero-length ones.
    """

    line_number: int = 0
    blank_line_count: int = 0

    def record(self, line: str) -> None:
        """Account for a freshly read line before it is transformed."""

        self.line_number += 1
        if line == "":
            self.blank_line_count += 1

    @property
    def non_blank_number(self) -> int:
        return self.line_number - self.blank_line_count
