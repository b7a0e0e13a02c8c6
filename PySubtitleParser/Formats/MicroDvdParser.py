from __future__ import annotations

import logging

import regex

from PySubtitleParser.Helpers.Time import FramesToMilliseconds
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import MalformedGrammarError, NoCuesFoundError
from PySubtitleParser.SubtitleFormat import MicroDvdFormat
from PySubtitleParser.SubtitleFormatParser import SubtitleFormatParser

_LINE_PATTERN = regex.compile(r'^[{\[](-?\d+)[}\]][{\[](-?\d+)[}\]](.*)')
_FRAME_RATE_PATTERN = regex.compile(r'\d+(?:\.\d*)?|\.\d+')
_LINE_SEPARATOR = '|'

class MicroDvdParser(SubtitleFormatParser):
    """
    Parser for MicroDVD (.sub) subtitles, which are timed in frames rather than milliseconds.

    A MicroDVD file looks like this:

        {1}{1}29.970
        {0}{180}PIRATES OF THE CARIBBEAN|English subtitles
        {509}{629}Drink up me 'earties yo ho!
        {635}{755}We kidnap and ravage and don't give a hoot.

    The first line may announce the frame rate. Otherwise the default frame rate is used,
    so timings are only as good as that guess.
    """

    FORMAT = MicroDvdFormat

    def __init__(self, default_frame_rate : float = 25.0):
        if default_frame_rate <= 0:
            raise ValueError(f"Default frame rate must be positive, got {default_frame_rate}")
        self.default_frame_rate = default_frame_rate

    def parse_string(self, content : str) -> list[SubtitleCue]:
        lines = iter(self._split_lines(content))

        # Skip to the first line in MicroDVD format
        first_match = None
        for line in lines:
            first_match = _LINE_PATTERN.match(line)
            if first_match:
                break

        if not first_match:
            raise NoCuesFoundError("No MicroDVD lines found")

        cues : list[SubtitleCue] = []

        frame_rate = self._extract_frame_rate(first_match.group(3))
        if frame_rate is None:
            frame_rate = self.default_frame_rate
            logging.debug(f"No frame rate found in first MicroDVD line {first_match.group(0)!r}, using default frame rate {frame_rate}")
            self._append_cue(cues, first_match, frame_rate)

        for line in lines:
            if not line.strip():
                continue

            match = _LINE_PATTERN.match(line)
            if not match:
                raise MalformedGrammarError(f"The subtitle line {line!r} is not in the MicroDVD format")

            self._append_cue(cues, match, frame_rate)

        if not cues:
            raise NoCuesFoundError("Content is not in a valid MicroDVD format")

        return cues

    def _append_cue(self, cues : list[SubtitleCue], match : regex.Match, frame_rate : float) -> None:
        start_frame, end_frame, text = match.groups()
        lines = [ segment for segment in text.split(_LINE_SEPARATOR) if segment ]
        if not any(line.strip() for line in lines):
            self._log_discarded(f"discarded line without text: {match.group(0)!r}")
            return

        start = FramesToMilliseconds(int(start_frame), frame_rate)
        end = FramesToMilliseconds(int(end_frame), frame_rate)
        cues.append(SubtitleCue(start, end, lines))

    def _extract_frame_rate(self, text : str) -> float|None:
        """
        Read the frame rate from the text of the first line, e.g. {1}{1}23.976
        """
        first_segment = text.split(_LINE_SEPARATOR)[0].strip()
        if not _FRAME_RATE_PATTERN.fullmatch(first_segment):
            return None

        frame_rate = float(first_segment)
        return frame_rate if frame_rate > 0 else None
