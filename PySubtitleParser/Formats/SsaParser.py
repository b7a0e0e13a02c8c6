from __future__ import annotations

from enum import IntEnum

import regex

from PySubtitleParser.Helpers.Text import StripByteOrderMark, StripOverrideTags
from PySubtitleParser.Helpers.Time import ParseSsaTime
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import FormatMismatchError, MalformedGrammarError, NoCuesFoundError
from PySubtitleParser.SubtitleFormat import SubStationAlphaFormat
from PySubtitleParser.SubtitleFormatParser import SubtitleFormatParser

EVENTS_SECTION = "[Events]"
SEPARATOR = ','
COMMENT = ';'

WRAP_STYLE_PREFIX = "WrapStyle:"
FORMAT_PREFIX = "Format:"
DIALOGUE_PREFIX = "Dialogue:"
COMMENT_PREFIX = "Comment:"

START_COLUMN = "Start"
END_COLUMN = "End"
TEXT_COLUMN = "Text"

_SECTION_PATTERN = regex.compile(r'^\[[^\]]+\]$')
_HARD_BREAK_PATTERN = regex.compile(r'\\N')
_ANY_BREAK_PATTERN = regex.compile(r'\\[Nn]')

class SsaWrapStyle(IntEnum):
    """
    Line wrapping mode of an (Advanced) SubStation Alpha script
    """
    Smart = 0                   # lines are evenly broken, only \N breaks
    EndOfLine = 1               # end-of-line word wrapping, only \N breaks
    None_ = 2                   # no word wrapping, both \n and \N break
    SmartWideLowerLine = 3      # like Smart, but the lower line is wider

    @classmethod
    def FromString(cls, value : str|None) -> SsaWrapStyle:
        """
        Parse a wrap style value. Anything unparsable or out of range is None_
        """
        try:
            return cls(int(str(value).strip()))
        except (TypeError, ValueError):
            return cls.None_


class SsaParser(SubtitleFormatParser):
    """
    Parser for SubStation Alpha (.ssa) and Advanced SubStation Alpha (.ass) subtitles.

    Only the [Events] section is read, plus the WrapStyle from the script info:

        [Script Info]
        ScriptType: v4.00
        WrapStyle: 0

        [Events]
        Format: Marked, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
        Dialogue: Marked=0,0:00:01.18,0:00:06.85,DefaultVCD, NTP,0000,0000,0000,,{\\pos(400,570)}Like an angel

    The text column is always last and may itself contain commas.
    """

    FORMAT = SubStationAlphaFormat

    def parse_string(self, content : str) -> list[SubtitleCue]:
        lines = iter(self._split_lines(content))

        wrap_style = SsaWrapStyle.None_
        found_events = False
        for line in lines:
            line = StripByteOrderMark(line).strip()
            if line == EVENTS_SECTION:
                found_events = True
                break

            if line.startswith(WRAP_STYLE_PREFIX):
                wrap_style = SsaWrapStyle.FromString(line[len(WRAP_STYLE_PREFIX):])

        if not found_events:
            raise FormatMismatchError(f"Reached the end of the content without finding the {EVENTS_SECTION} section")

        header_line = next(lines, None)
        if not header_line or not header_line.strip():
            raise MalformedGrammarError(f"The header line after {EVENTS_SECTION} is missing")

        columns = self._parse_header(header_line)

        cues : list[SubtitleCue] = []
        for line in lines:
            if _SECTION_PATTERN.match(line.strip()):
                break

            cue = self._parse_event(line, columns, wrap_style)
            if cue:
                cues.append(cue)

        if not cues:
            raise NoCuesFoundError("Content is not in a valid SubStation Alpha format")

        return cues

    def _parse_header(self, header_line : str) -> tuple[int, int, int]:
        """
        Find the indices of the Start, End and Text columns
        """
        header = header_line.strip()
        if header.startswith(FORMAT_PREFIX):
            header = header[len(FORMAT_PREFIX):]

        column_headers = [ column.strip() for column in header.split(SEPARATOR) ]

        try:
            return column_headers.index(START_COLUMN), column_headers.index(END_COLUMN), column_headers.index(TEXT_COLUMN)
        except ValueError:
            raise MalformedGrammarError(
                f"Couldn't find all the necessary column headers ({START_COLUMN}, {END_COLUMN}, {TEXT_COLUMN}) in header line {header_line!r}")

    def _parse_event(self, line : str, columns : tuple[int, int, int], wrap_style : SsaWrapStyle) -> SubtitleCue|None:
        if not line.strip() or line.startswith(COMMENT) or line.startswith(COMMENT_PREFIX):
            return None

        if line.startswith(DIALOGUE_PREFIX):
            line = line[len(DIALOGUE_PREFIX):].lstrip()

        start_index, end_index, text_index = columns
        fields = line.split(SEPARATOR)
        if len(fields) <= max(start_index, end_index, text_index):
            self._log_discarded(f"discarded event with too few columns: {line!r}")
            return None

        start = ParseSsaTime(fields[start_index])
        end = ParseSsaTime(fields[end_index])
        text = SEPARATOR.join(fields[text_index:])

        if not start or not end or start <= 0 or end <= 0 or not text:
            self._log_discarded(f"discarded event without valid times or text: {line!r}")
            return None

        lines = self._split_text(text, wrap_style)
        plaintext_lines = [ StripOverrideTags(text_line) for text_line in lines ]
        return SubtitleCue(start, end, lines, plaintext_lines)

    def _split_text(self, text : str, wrap_style : SsaWrapStyle) -> list[str]:
        pattern = _ANY_BREAK_PATTERN if wrap_style == SsaWrapStyle.None_ else _HARD_BREAK_PATTERN
        lines = pattern.split(text)
        return [ lines[0] ] + [ line.lstrip(' ') for line in lines[1:] ]
