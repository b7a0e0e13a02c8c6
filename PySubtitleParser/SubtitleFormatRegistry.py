from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from PySubtitleParser.Formats.MicroDvdParser import MicroDvdParser
from PySubtitleParser.Formats.SrtParser import SrtParser
from PySubtitleParser.Formats.SsaParser import SsaParser
from PySubtitleParser.Formats.SubViewerParser import SubViewerParser
from PySubtitleParser.Formats.TtmlParser import TtmlParser
from PySubtitleParser.Formats.VttParser import VttParser
from PySubtitleParser.Formats.YoutubeXmlParser import YoutubeXmlParser
from PySubtitleParser.Options import Options
from PySubtitleParser.SubtitleFormat import SUPPORTED_FORMATS, GetFormatByName, SubtitleFormat
from PySubtitleParser.SubtitleFormatParser import SubtitleFormatParser

def ordinal_compare(a : str, b : str) -> int:
    """
    Compare two strings by character code: the difference between the first pair of
    characters that differ, or the difference in length if one is a prefix of the other
    """
    for char_a, char_b in zip(a, b):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    return len(a) - len(b)

class SubtitleFormatRegistry:
    """
    An immutable, ordered catalog of subtitle formats and the parsers that read them.

    The order of the entries is the order in which parsers are tried when no format is preferred.
    A registry is built once (usually with CreateDefault) and passed to the dispatcher,
    so different parsers can be configured side by side without any shared state.
    """
    __slots__ = ('_entries',)

    def __init__(self, entries : Iterable[tuple[SubtitleFormat, SubtitleFormatParser]]):
        entries = tuple(entries)
        names = [ subtitle_format.name for subtitle_format, _ in entries ]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate format names in registry: {', '.join(names)}")

        object.__setattr__(self, '_entries', entries)

    def __setattr__(self, key, value):
        raise AttributeError("SubtitleFormatRegistry is immutable")

    @classmethod
    def CreateDefault(cls, options : Options|None = None) -> SubtitleFormatRegistry:
        """
        Create a registry of all supported formats, configured with the given options
        """
        options = options or Options()
        parsers : dict[SubtitleFormat, SubtitleFormatParser] = {}
        for parser in [
            SrtParser(),
            MicroDvdParser(default_frame_rate=options.default_frame_rate),
            SubViewerParser(max_header_lines=options.max_header_lines),
            SsaParser(),
            TtmlParser(ticks_per_millisecond=options.ticks_per_millisecond),
            VttParser(),
            YoutubeXmlParser(),
        ]:
            parsers[parser.FORMAT] = parser

        return cls((subtitle_format, parsers[subtitle_format]) for subtitle_format in SUPPORTED_FORMATS)

    @property
    def entries(self) -> tuple[tuple[SubtitleFormat, SubtitleFormatParser], ...]:
        return self._entries

    @property
    def formats(self) -> list[SubtitleFormat]:
        return [ subtitle_format for subtitle_format, _ in self._entries ]

    def __iter__(self) -> Iterator[tuple[SubtitleFormat, SubtitleFormatParser]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get_parser(self, subtitle_format : SubtitleFormat|str) -> SubtitleFormatParser:
        """
        Get the parser registered for a format (or format name)
        """
        name = subtitle_format.name if isinstance(subtitle_format, SubtitleFormat) else str(subtitle_format)
        for entry_format, parser in self._entries:
            if entry_format.name.lower() == name.lower():
                return parser

        raise ValueError(f"Unknown subtitle format: {name}. Available formats: {self.list_available_formats()}")

    def ordered_for(self, preferred_format : SubtitleFormat|str|None = None) -> list[tuple[SubtitleFormat, SubtitleFormatParser]]:
        """
        The entries in the order they should be tried.

        With a preferred format, entries are stably sorted by the distance between their name
        and the preferred name, so an exact match comes first and the rest keep a deterministic order.
        """
        if preferred_format is None:
            return list(self._entries)

        if not isinstance(preferred_format, SubtitleFormat):
            preferred_format = GetFormatByName(preferred_format)

        preferred_name = preferred_format.name
        return sorted(self._entries, key=lambda entry: abs(ordinal_compare(entry[0].name, preferred_name)))

    def list_available_formats(self) -> str:
        """
        Get a comma-separated string of the registered formats
        """
        return ", ".join(subtitle_format.name for subtitle_format, _ in self._entries) or "None"

    @staticmethod
    def get_format_from_filename(filename : str|None) -> str|None:
        """
        Get the (lower case) extension of a filename, including the dot
        """
        if not filename:
            return None

        _, extension = os.path.splitext(filename)
        return extension.lower() if extension else None

    @staticmethod
    def guess_format(filename : str|None) -> SubtitleFormat|None:
        """
        Guess the subtitle format from a filename's extension.
        The first supported format whose extension pattern matches wins.
        """
        extension = SubtitleFormatRegistry.get_format_from_filename(filename)
        if not extension:
            return None

        for subtitle_format in SUPPORTED_FORMATS:
            if subtitle_format.matches_extension(extension):
                return subtitle_format

        return None
