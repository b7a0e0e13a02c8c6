import regex

from PySubtitleParser.Formats.TimedBlockParser import TimedBlockParser
from PySubtitleParser.Helpers.Text import StripByteOrderMark
from PySubtitleParser.Helpers.Time import ParseShortClockTime
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import FormatMismatchError, NoCuesFoundError
from PySubtitleParser.SubtitleFormat import WebVttFormat

class VttParser(TimedBlockParser):
    """
    Parser for WebVTT (.vtt) subtitles. Formatting tags within the text are preserved as-is.

    A .vtt file looks like:

        WEBVTT

        CUE - 1
        00:00:10.500 --> 00:00:13.000
        Elephant's Dream

        CUE - 2
        00:15.000 --> 00:18.000 align:start
        At the left we can see...

    The cue identifier line is optional, as are the hours in the timecodes.
    """

    FORMAT = WebVttFormat

    _NON_CUE_BLOCK = regex.compile(r'^(?:NOTE|STYLE|REGION)(?:\s|$)')

    def parse_string(self, content : str) -> list[SubtitleCue]:
        blocks = list(self._split_blocks(self._split_lines(content)))
        if not blocks:
            raise FormatMismatchError("Parsing as WebVTT returned no subtitle blocks")

        cues : list[SubtitleCue] = []
        for block in blocks:
            if self._NON_CUE_BLOCK.match(StripByteOrderMark(block[0])):
                continue

            cue = self._parse_block(block)
            if cue:
                cues.append(cue)
            else:
                self._log_discarded(f"discarded block without timecode or text: {block[0]!r}")

        if not cues:
            raise NoCuesFoundError("Content is not in a valid WebVTT format")

        return cues

    def _parse_timecode(self, text : str) -> int|None:
        return ParseShortClockTime(text)
