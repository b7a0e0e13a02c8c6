from PySubtitleParser.Formats.TimedBlockParser import TimedBlockParser
from PySubtitleParser.Helpers.Text import StripByteOrderMark
from PySubtitleParser.Helpers.Time import ParseClockTime
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import FormatMismatchError, NoCuesFoundError
from PySubtitleParser.SubtitleFormat import SubRipFormat

class SrtParser(TimedBlockParser):
    """
    Parser for SubRip (.srt) subtitles.

    A .srt file looks like:

        1
        00:00:10,500 --> 00:00:13,000
        Elephant's Dream

        2
        00:00:15,000 --> 00:00:18,000
        At the left we can see...
    """

    FORMAT = SubRipFormat

    def parse_string(self, content : str) -> list[SubtitleCue]:
        lines = self._split_lines(content)

        first_line = next((StripByteOrderMark(line.strip()) for line in lines if line.strip()), '')
        if first_line.startswith('WEBVTT'):
            raise FormatMismatchError("Content has a WebVTT header, not SubRip")

        blocks = list(self._split_blocks(lines))
        if not blocks:
            raise FormatMismatchError("Parsing as SubRip returned no subtitle blocks")

        cues : list[SubtitleCue] = []
        for block in blocks:
            cue = self._parse_block(block)
            if cue:
                cues.append(cue)
            else:
                self._log_discarded(f"discarded block without timecode or text: {block[0]!r}")

        if not cues:
            raise NoCuesFoundError("Content is not in a valid SubRip format")

        return cues

    def _parse_timecode(self, text : str) -> int|None:
        return ParseClockTime(text)
