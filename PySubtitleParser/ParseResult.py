from __future__ import annotations

from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import StreamPreconditionError, SubtitleError
from PySubtitleParser.SubtitleFormat import SubtitleFormat

class ParseResult:
    """
    Outcome of running one format parser against a stream: either a list of cues or an error.
    """
    def __init__(self, subtitle_format : SubtitleFormat|None, cues : list[SubtitleCue]|None = None, error : SubtitleError|None = None):
        if (cues is None) == (error is None):
            raise ValueError("A ParseResult must have either cues or an error")

        self.format : SubtitleFormat|None = subtitle_format
        self.cues : list[SubtitleCue] = cues or []
        self.error : SubtitleError|None = error

    @classmethod
    def Succeeded(cls, subtitle_format : SubtitleFormat|None, cues : list[SubtitleCue]) -> ParseResult:
        return cls(subtitle_format, cues=cues)

    @classmethod
    def Failed(cls, subtitle_format : SubtitleFormat|None, error : SubtitleError) -> ParseResult:
        return cls(subtitle_format, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_fatal(self) -> bool:
        """ Errors with the stream itself cannot be fixed by trying another format """
        return isinstance(self.error, StreamPreconditionError)

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        name = self.format.name if self.format else None
        if self.ok:
            return f"ParseResult({name}, {len(self.cues)} cues)"
        return f"ParseResult({name}, error={type(self.error).__name__}: {self.error})"
