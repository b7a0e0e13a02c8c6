from __future__ import annotations

import regex

class SubtitleFormat:
    """
    Identity of a subtitle dialect: a unique name and a pattern for its file extensions.

    Instances are immutable. The catalog of supported formats is defined once below,
    and its order is the default order in which parsers are tried.
    """
    __slots__ = ('name', 'extension_pattern', '_extension_regex')

    def __init__(self, name : str, extension_pattern : str|None = None):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'extension_pattern', extension_pattern)
        object.__setattr__(self, '_extension_regex', regex.compile(extension_pattern, regex.IGNORECASE) if extension_pattern else None)

    def __setattr__(self, key, value):
        raise AttributeError(f"SubtitleFormat is immutable (cannot set '{key}')")

    def __delattr__(self, key):
        raise AttributeError(f"SubtitleFormat is immutable (cannot delete '{key}')")

    def matches_extension(self, extension : str|None) -> bool:
        """
        Check whether a file extension (including the leading dot) belongs to this format
        """
        if not extension or self._extension_regex is None:
            return False
        return self._extension_regex.fullmatch(extension) is not None

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubtitleFormat):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"SubtitleFormat({self.name!r})"

    def __str__(self) -> str:
        return self.name


SubRipFormat = SubtitleFormat("SubRip", r"\.srt")
MicroDvdFormat = SubtitleFormat("MicroDvd", r"\.sub")
SubViewerFormat = SubtitleFormat("SubViewer", r"\.sub")
SubStationAlphaFormat = SubtitleFormat("SubStationAlpha", r"\.ssa|\.ass")
TtmlFormat = SubtitleFormat("TTML", r"\.ttml|\.dfxp")
WebVttFormat = SubtitleFormat("WebVTT", r"\.vtt")
# YouTube timed text has no reliable extension, so it is never guessed from a filename
YoutubeXmlFormat = SubtitleFormat("YoutubeXml")

SUPPORTED_FORMATS : tuple[SubtitleFormat, ...] = (
    SubRipFormat,
    MicroDvdFormat,
    SubViewerFormat,
    SubStationAlphaFormat,
    TtmlFormat,
    WebVttFormat,
    YoutubeXmlFormat,
)

def GetFormatByName(name : str) -> SubtitleFormat:
    """
    Find a supported format by name (case-insensitive)
    """
    for subtitle_format in SUPPORTED_FORMATS:
        if subtitle_format.name.lower() == str(name).lower():
            return subtitle_format

    available = ", ".join(subtitle_format.name for subtitle_format in SUPPORTED_FORMATS)
    raise ValueError(f"Unknown subtitle format: {name}. Available formats: {available}")
