"""Input statistics shown next to validation status."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextStats:
    """Line and character counts of a text."""

    lines: int
    chars: int


def text_stats(text: str) -> TextStats:
    """
    Count lines and characters.

    An empty text has zero lines; otherwise lines are newline-separated
    segments, so a trailing newline counts an extra empty line.
    """
    return TextStats(lines=len(text.split("\n")) if text else 0, chars=len(text))
