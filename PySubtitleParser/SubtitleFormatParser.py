import logging
from abc import ABC, abstractmethod
from typing import BinaryIO

from PySubtitleParser.Helpers.Text import DecodeBytes, SplitLines
from PySubtitleParser.ParseResult import ParseResult
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import (
    MalformedGrammarError,
    NoCuesFoundError,
    StreamPreconditionError,
    SubtitleError,
)
from PySubtitleParser.SubtitleFormat import SubtitleFormat

class SubtitleFormatParser(ABC):
    """
    Interface for a parser that reads a single subtitle dialect.

    Implementations provide the grammar in parse_string (or parse_bytes for formats
    that need the raw bytes, e.g. XML documents that declare their own encoding).
    decode() is the entry point used by the dispatcher: it rewinds the stream, runs
    the grammar and reports the outcome as a ParseResult instead of raising.
    """

    FORMAT : SubtitleFormat|None = None

    @property
    def format(self) -> SubtitleFormat|None:
        return self.__class__.FORMAT

    @property
    def name(self) -> str:
        return self.format.name if self.format else self.__class__.__name__

    def decode(self, stream : BinaryIO, encoding : str) -> ParseResult:
        """
        Parse a readable, seekable binary stream from its start.

        Returns:
            ParseResult: the cues, or the error explaining why this format does not apply
        """
        try:
            data = self._read_from_start(stream)
            cues = self.parse_bytes(data, encoding)
            if not cues:
                raise NoCuesFoundError(f"No cues found when parsing as {self.name}")

            return ParseResult.Succeeded(self.format, cues)

        except SubtitleError as e:
            return ParseResult.Failed(self.format, e)

        except Exception as e:
            return ParseResult.Failed(self.format, MalformedGrammarError(f"Unexpected error parsing as {self.name}", e))

    def parse_bytes(self, data : bytes, encoding : str) -> list[SubtitleCue]:
        """
        Parse raw subtitle content in the given encoding.

        Raises:
            SubtitleParseError: If the content is not valid for this format
        """
        return self.parse_string(DecodeBytes(data, encoding))

    @abstractmethod
    def parse_string(self, content : str) -> list[SubtitleCue]:
        """
        Parse decoded subtitle content.

        Returns:
            list[SubtitleCue]: cues in stream order, each with at least one line of text

        Raises:
            SubtitleParseError: If the content is not valid for this format
        """
        raise NotImplementedError

    def _read_from_start(self, stream : BinaryIO) -> bytes:
        try:
            readable, seekable = stream.readable(), stream.seekable()
            if not readable or not seekable:
                raise StreamPreconditionError(
                    f"Stream must be seekable and readable in a subtitles parser (seekable: {seekable}, readable: {readable})")

            stream.seek(0)
            return stream.read()

        except (ValueError, OSError) as e:
            raise StreamPreconditionError("Unable to read subtitle stream", e)

    def _split_lines(self, content : str) -> list[str]:
        return SplitLines(content)

    def _log_discarded(self, message : str) -> None:
        logging.debug(f"{self.name}: {message}")
