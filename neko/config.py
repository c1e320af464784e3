"""
Configuration model for neko.

The CLI constructs a Config instance once and passes it down into the
stream driver and line transformer so no display flag lives in global
state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """
    Resolved display options for a neko run.

    number_nonblank and number_all are never both True on an instance
    built through from_flags.
    """

    number_nonblank: bool = False
    number_all: bool = False
    show_ends: bool = False
    show_nonprinting: bool = False
    show_tabs: bool = False
    verbosity: int = 0
    max_line_length: Optional[int] = None

    @classmethod
    def from_flags(
        cls,
        *,
        number_nonblank: bool = False,
        number_all: bool = False,
        show_ends: bool = False,
        show_nonprinting: bool = False,
        show_tabs: bool = False,
        verbosity: int = 0,
        max_line_length: Optional[int] = None,
    ) -> "Config":
        """
        Build a Config from raw CLI flags.

        --number-nonblank overrides --number rather than combining with it.
        """

        if max_line_length is not None and max_line_length < 1:
            raise ValueError("max_line_length must be a positive integer")

        return cls(
            number_nonblank=number_nonblank,
            number_all=number_all and not number_nonblank,
            show_ends=show_ends,
            show_nonprinting=show_nonprinting,
            show_tabs=show_tabs,
            verbosity=verbosity,
            max_line_length=max_line_length,
        )

    @property
    def any_transform(self) -> bool:
        return (
            self.number_nonblank
            or self.number_all
            or self.show_ends
            or self.show_nonprinting
            or self.show_tabs
        )
