from __future__ import annotations

import codecs
import io
import logging
import os
from typing import BinaryIO

from PySubtitleParser.Helpers.Text import DecodeBytes
from PySubtitleParser.Options import Options
from PySubtitleParser.ParseResult import ParseResult
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import NoFormatMatchedError, StreamPreconditionError, SubtitleError
from PySubtitleParser.SubtitleFormat import SubtitleFormat
from PySubtitleParser.SubtitleFormatRegistry import SubtitleFormatRegistry

class SubtitleParser:
    """
    Reads subtitles in any of the registered formats.

    Each parser in the registry is tried in turn on the rewound stream, starting with the
    preferred format if one is given, and the cues from the first parser that succeeds are returned.
    If every parser fails a NoFormatMatchedError is raised with the start of the content,
    to help work out what the file actually contains.
    """
    def __init__(self, registry : SubtitleFormatRegistry|None = None, options : Options|None = None):
        self.options : Options = options or Options()
        self.registry : SubtitleFormatRegistry = registry or SubtitleFormatRegistry.CreateDefault(self.options)

    def parse(self, stream : BinaryIO|bytes|bytearray, encoding : str|None = None, preferred_format : SubtitleFormat|str|None = None) -> list[SubtitleCue]:
        """
        Parse a subtitle stream and return its cues

        Raises:
            StreamPreconditionError: If the stream can't be read or the encoding is unknown
            NoFormatMatchedError: If no registered format could parse the content
        """
        result = self.parse_stream(stream, encoding, preferred_format)
        return result.cues

    def parse_stream(self, stream : BinaryIO|bytes|bytearray, encoding : str|None = None, preferred_format : SubtitleFormat|str|None = None) -> ParseResult:
        """
        Parse a subtitle stream, returning the successful result (which includes the detected format)
        """
        encoding = encoding or self.options.default_encoding
        stream = self._prepare_stream(stream, encoding)

        errors : dict[str, SubtitleError] = {}
        last_error : SubtitleError|None = None

        for subtitle_format, parser in self.registry.ordered_for(preferred_format):
            result = parser.decode(stream, encoding)
            if result.ok and result.cues:
                logging.info(f"Detected subtitle format {subtitle_format.name} ({len(result.cues)} cues)")
                return result

            if result.is_fatal and result.error:
                raise result.error

            last_error = result.error
            if last_error:
                errors[subtitle_format.name] = last_error
            logging.debug(f"Parsing as {subtitle_format.name} failed: {last_error}")

        excerpt = self._read_excerpt(stream, encoding)
        logging.debug(f"No subtitle format matched. Beginning of stream:\n{excerpt}")
        raise NoFormatMatchedError("All the subtitles parsers failed to parse the input stream", excerpt, errors, last_error)

    def parse_file(self, path : str, encoding : str|None = None) -> list[SubtitleCue]:
        """
        Parse a subtitle file, trying the format suggested by its extension first
        """
        if not path or not os.path.exists(path):
            raise StreamPreconditionError(f"File not found: {path}")

        preferred_format = SubtitleFormatRegistry.guess_format(path)
        with open(path, 'rb') as stream:
            return self.parse(stream, encoding, preferred_format)

    def parse_string(self, content : str, preferred_format : SubtitleFormat|str|None = None) -> list[SubtitleCue]:
        """
        Parse subtitles that have already been decoded
        """
        return self.parse(content.encode('utf-8'), 'utf-8', preferred_format)

    def _prepare_stream(self, stream : BinaryIO|bytes|bytearray, encoding : str) -> BinaryIO:
        """
        Check that the stream can be read, and buffer it if it can't be rewound
        """
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise StreamPreconditionError(f"Unknown encoding '{encoding}'", e)

        if isinstance(stream, (bytes, bytearray)):
            return io.BytesIO(stream)

        if stream is None or not hasattr(stream, 'read'):
            raise StreamPreconditionError("Subtitles must be provided as bytes or a readable binary stream")

        if getattr(stream, 'closed', False):
            raise StreamPreconditionError("Cannot read subtitles from a closed stream")

        readable = getattr(stream, 'readable', None)
        if readable is not None and not readable():
            raise StreamPreconditionError("Stream must be readable in a subtitles parser")

        seekable = getattr(stream, 'seekable', None)
        if seekable is None or not seekable():
            try:
                return io.BytesIO(stream.read())
            except (ValueError, OSError) as e:
                raise StreamPreconditionError("Unable to read subtitle stream", e)

        return stream

    def _read_excerpt(self, stream : BinaryIO, encoding : str) -> str:
        """
        Decode the first few hundred characters of the stream for diagnostics
        """
        length = self.options.excerpt_length
        if length <= 0:
            return ""

        try:
            stream.seek(0)
            # Four bytes per character covers any encoding
            data = stream.read(length * 4)
        except (ValueError, OSError) as e:
            logging.warning(f"Unable to read subtitle stream for diagnostics: {e}")
            return ""

        return DecodeBytes(data, encoding)[:length]
