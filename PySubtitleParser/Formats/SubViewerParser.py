import regex

from PySubtitleParser.Helpers.Text import StripByteOrderMark
from PySubtitleParser.Helpers.Time import ParseSsaTime
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import FormatMismatchError, MalformedGrammarError, NoCuesFoundError
from PySubtitleParser.SubtitleFormat import SubViewerFormat
from PySubtitleParser.SubtitleFormatParser import SubtitleFormatParser

FIRST_LINE = "[INFORMATION]"
TIMECODE_SEPARATOR = ','

_TIMESTAMP_LINE_PATTERN = regex.compile(r'\d{2}:\d{2}:\d{2}\.\d{2},\d{2}:\d{2}:\d{2}\.\d{2}')

class SubViewerParser(SubtitleFormatParser):
    """
    Parser for SubViewer (.sub) subtitles:

        [INFORMATION]
        ....

        00:04:35.03,00:04:38.82
        Hello guys... please sit down...

        00:05:00.19,00:05:03.47
        M. Franklin,[br]are you crazy?
    """

    FORMAT = SubViewerFormat

    def __init__(self, max_header_lines : int = 20):
        self.max_header_lines = max_header_lines

    def parse_string(self, content : str) -> list[SubtitleCue]:
        lines = self._split_lines(content)

        if not lines or StripByteOrderMark(lines[0]).strip() != FIRST_LINE:
            raise FormatMismatchError(f"SubViewer content must start with {FIRST_LINE}")

        first_timestamp = None
        for index, line in enumerate(lines[1:self.max_header_lines], start=1):
            if _TIMESTAMP_LINE_PATTERN.search(line):
                first_timestamp = index
                break

        if first_timestamp is None:
            last_line = min(len(lines), self.max_header_lines)
            raise MalformedGrammarError(f"Couldn't find the first timestamp line in the first {last_line} lines")

        cues : list[SubtitleCue] = []
        timecode_line : str = lines[first_timestamp]
        text_lines : list[str] = []

        for line in lines[first_timestamp + 1:]:
            if _TIMESTAMP_LINE_PATTERN.search(line):
                self._append_cue(cues, timecode_line, text_lines)
                timecode_line, text_lines = line, []
            elif line:
                text_lines.append(line)

        self._append_cue(cues, timecode_line, text_lines)

        if not cues:
            raise NoCuesFoundError("Content is not in a valid SubViewer format")

        return cues

    def _append_cue(self, cues : list[SubtitleCue], timecode_line : str, text_lines : list[str]) -> None:
        times = self._parse_timecode_line(timecode_line)
        if not times or not any(line.strip() for line in text_lines):
            self._log_discarded(f"discarded group without valid times or text: {timecode_line!r}")
            return

        start, end = times
        cues.append(SubtitleCue(start, end, text_lines))

    def _parse_timecode_line(self, line : str) -> tuple[int, int]|None:
        parts = line.strip().split(TIMECODE_SEPARATOR)
        if len(parts) != 2:
            raise MalformedGrammarError(f"Couldn't parse the timecodes in line {line!r}")

        start, end = ParseSsaTime(parts[0]), ParseSsaTime(parts[1])
        if not start or not end or start <= 0 or end <= 0:
            return None

        return start, end
