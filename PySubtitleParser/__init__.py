"""
PySubtitleParser - Subtitle Parsing Library

A Python library for reading subtitles in SubRip, WebVTT, MicroDVD, SubViewer,
SubStation Alpha, TTML and YouTube timed-text formats into a list of timed cues.

Basic Usage
-----------

# Parse a file, trying the format suggested by its extension first
cues = parse_file("movie.srt")

# Parse a stream or bytes, optionally preferring a format
with open("movie.sub", "rb") as stream:
    cues = parse(stream, encoding="cp1252", preferred_format=guess_format("movie.sub"))

# Configure the parser
opts = init_options(default_frame_rate=23.976)
cues = parse_file("movie.sub", options=opts)

for cue in cues:
    print(cue.start_time, cue.end_time, cue.text)
"""
from __future__ import annotations

from typing import BinaryIO

from PySubtitleParser.Options import Options
from PySubtitleParser.ParseResult import ParseResult
from PySubtitleParser.SettingsType import SettingType, SettingsType
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import (
    FormatMismatchError,
    MalformedGrammarError,
    NoCuesFoundError,
    NoFormatMatchedError,
    StreamPreconditionError,
    SubtitleError,
    SubtitleParseError,
)
from PySubtitleParser.SubtitleFormat import SUPPORTED_FORMATS, GetFormatByName, SubtitleFormat
from PySubtitleParser.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubtitleParser.SubtitleParser import SubtitleParser
from PySubtitleParser.Writers.SrtWriter import SrtWriter
from PySubtitleParser.version import __version__


def init_options(**settings : SettingType) -> Options:
    """
    Create and return an :class:`Options` instance with settings for subtitle parsing.

    Parameters
    ----------
    **settings : SettingType
        Keyword settings, e.g.

        default_encoding = "cp1252",
        default_frame_rate = 23.976,
        excerpt_length = 200

        Options that are not specified will be assigned default values.

    Returns
    -------
    Options
        An Options instance with the specified configuration.
    """
    return Options(SettingsType(settings))


def guess_format(filename : str|None) -> SubtitleFormat|None:
    """
    Guess the subtitle format from a filename's extension, or None if it is not recognised
    """
    return SubtitleFormatRegistry.guess_format(filename)


def parse(
    stream : BinaryIO|bytes|bytearray,
    encoding : str|None = None,
    preferred_format : SubtitleFormat|str|None = None,
    options : Options|None = None,
) -> list[SubtitleCue]:
    """
    Parse subtitles from a binary stream or bytes.

    Parameters
    ----------
    stream : BinaryIO | bytes
        The subtitle content. Streams that can't seek are read into memory first.
    encoding : str, optional
        Text encoding of the content. A byte order mark takes precedence.
        Defaults to the default_encoding option.
    preferred_format : SubtitleFormat | str, optional
        Format (or format name) to try first.
    options : Options, optional
        Parser configuration.

    Returns
    -------
    list[SubtitleCue]
        The cues in stream order.

    Raises
    ------
    StreamPreconditionError
        If the stream can't be read or the encoding is unknown.
    NoFormatMatchedError
        If none of the supported formats could parse the content.
    """
    parser = SubtitleParser(options=options)
    return parser.parse(stream, encoding, preferred_format)


def parse_file(path : str, encoding : str|None = None, options : Options|None = None) -> list[SubtitleCue]:
    """
    Parse a subtitle file, trying the format suggested by its extension first
    """
    parser = SubtitleParser(options=options)
    return parser.parse_file(path, encoding)


__all__ = [
    '__version__',
    'Options',
    'SettingsType',
    'ParseResult',
    'SubtitleCue',
    'SubtitleFormat',
    'SubtitleFormatRegistry',
    'SubtitleParser',
    'SrtWriter',
    'SUPPORTED_FORMATS',
    'GetFormatByName',
    'SubtitleError',
    'SubtitleParseError',
    'StreamPreconditionError',
    'FormatMismatchError',
    'MalformedGrammarError',
    'NoCuesFoundError',
    'NoFormatMatchedError',
    'init_options',
    'guess_format',
    'parse',
    'parse_file',
]
