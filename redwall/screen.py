"""Primary display resolution as reported by xrandr."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass

_RESOLUTION = re.compile(r"([+-]?\d+)x([+-]?\d+)")


class ScreenError(Exception):
    """The screen resolution could not be determined."""


@dataclass(frozen=True)
class Screen:
    """Pixel size of a display."""

    width: int
    height: int

    @classmethod
    def detect(cls) -> Screen:
        """Run xrandr and return the primary display's resolution."""
        result = subprocess.run(["xrandr"], capture_output=True, text=True, check=True)
        return parse_xrandr(result.stdout)


def parse_xrandr(output: str) -> Screen:
    """Parse xrandr output for the primary display's resolution.

    A primary display without a current mode yields a zero-sized screen.
    """
    primary = next(
        (line for line in output.split("\n") if " connected primary " in line), None
    )
    if not primary:
        raise ScreenError("no primary display found")
    for word in primary.split():
        if "x" in word and word[0].isdigit():
            match = _RESOLUTION.match(word)
            if match is None:
                raise ScreenError("no valid screen resolution found")
            return Screen(width=int(match.group(1)), height=int(match.group(2)))
    return Screen(width=0, height=0)