from abc import abstractmethod
from collections.abc import Iterator

import regex

from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleFormatParser import SubtitleFormatParser

# Common typos of the --> arrow are accepted as well
_ARROW_PATTERN = regex.compile(r'-->|- >|->')

class TimedBlockParser(SubtitleFormatParser):
    """
    Shared grammar for formats made of blank-line separated blocks, each with a
    "start --> end" timecode line followed by the text (SubRip and WebVTT).

    Lines before the timecode line (sequence numbers, cue identifiers) are ignored.
    Blocks without a timecode line or without text are discarded.
    """

    @abstractmethod
    def _parse_timecode(self, text : str) -> int|None:
        """ Convert one side of a timecode line to milliseconds, or None if it is not a timecode """
        raise NotImplementedError

    def _split_blocks(self, lines : list[str]) -> Iterator[list[str]]:
        """
        Group lines into blocks separated by one or more blank lines.
        Lines are trimmed and empty blocks are not returned.
        """
        block : list[str] = []
        for line in lines:
            line = line.strip()
            if line:
                block.append(line)
            elif block:
                yield block
                block = []

        if block:
            yield block

    def _parse_block(self, block : list[str]) -> SubtitleCue|None:
        times : tuple[int, int]|None = None
        text_lines : list[str] = []

        for line in block:
            if times is None:
                times = self._parse_timecode_line(line)
            else:
                text_lines.append(line)

        if times is None or not text_lines:
            return None

        start, end = times
        return SubtitleCue(start, end, text_lines)

    def _parse_timecode_line(self, line : str) -> tuple[int, int]|None:
        parts = _ARROW_PATTERN.split(line)
        if len(parts) != 2:
            return None

        start = self._parse_timecode(parts[0])
        end = self._parse_timecode(parts[1])
        if start is None or end is None:
            return None

        return start, end
