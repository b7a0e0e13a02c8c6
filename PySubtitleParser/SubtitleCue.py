from __future__ import annotations

from datetime import timedelta

class SubtitleCue:
    """
    A single timed subtitle entry.

    Times are integer milliseconds relative to the start of the stream. Lines are
    kept in display order. plaintext_lines is only set by formats that embed inline
    override tags (SubStation Alpha), and holds the lines with those tags removed.
    """
    def __init__(self, start_time : int = 0, end_time : int = 0, lines : list[str]|None = None, plaintext_lines : list[str]|None = None):
        self.start_time : int = start_time
        self.end_time : int = end_time
        self.lines : list[str] = list(lines) if lines else []
        self.plaintext_lines : list[str]|None = list(plaintext_lines) if plaintext_lines is not None else None

    @property
    def start(self) -> timedelta:
        return timedelta(milliseconds=self.start_time)

    @property
    def end(self) -> timedelta:
        return timedelta(milliseconds=self.end_time)

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)

    @property
    def plaintext(self) -> str:
        """ The text without inline tags, or the text itself for formats without markup """
        if self.plaintext_lines is None:
            return self.text
        return '\n'.join(self.plaintext_lines)

    @property
    def has_text(self) -> bool:
        return any(line.strip() for line in self.lines)

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubtitleCue):
            return NotImplemented
        return (self.start_time == other.start_time
                and self.end_time == other.end_time
                and self.lines == other.lines
                and self.plaintext_lines == other.plaintext_lines)

    def __repr__(self) -> str:
        return f"SubtitleCue(start_time={self.start_time}, end_time={self.end_time}, lines={self.lines!r})"

    def __str__(self) -> str:
        return f"{self.start} --> {self.end}: {self.text}"
