import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape, quoteattr

import regex

from PySubtitleParser.Formats.XmlNodeParser import XmlNodeParser
from PySubtitleParser.Helpers.Time import TimeToMilliseconds
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import MalformedGrammarError
from PySubtitleParser.SubtitleFormat import TtmlFormat

DEFAULT_FRAME_RATE = 30.0

_CLOCK_TIME_PATTERN = regex.compile(r'^(\d+):(\d{2}):(\d{2})(?:\.(\d+))?$')
_FRAME_TIME_PATTERN = regex.compile(r'^(\d+):(\d{2}):(\d{2}):(\d+(?:\.\d+)?)$')
_OFFSET_TIME_PATTERN = regex.compile(r'^(\d+(?:\.\d+)?)(h|ms|m|s|f|t)$')

_MILLISECONDS_PER_UNIT = {
    'h': 3600000.0,
    'm': 60000.0,
    's': 1000.0,
    'ms': 1.0,
}

class TtmlParser(XmlNodeParser):
    """
    Parser for Timed Text Markup Language (.ttml, .dfxp) subtitles, e.g.

        <tt xmlns="http://www.w3.org/ns/ttml">
          <body><div>
            <p begin="00:00:01.000" end="00:00:03.500">Hello<br/>world</p>
            <p begin="40000000t" dur="20000000t">Ticks, as exported by Netflix</p>
          </div></body>
        </tt>

    Each <p> element becomes a cue with a single line holding its inner markup.
    """

    FORMAT = TtmlFormat
    NODE_NAME = "p"

    def __init__(self, ticks_per_millisecond : int = 10000):
        if ticks_per_millisecond <= 0:
            raise ValueError(f"Ticks per millisecond must be positive, got {ticks_per_millisecond}")
        self.ticks_per_millisecond = ticks_per_millisecond

    def _parse_node(self, root : ET.Element, node : ET.Element) -> SubtitleCue|None:
        start = self.parse_time_expression(self._require_attr(node, "begin"), root)

        end_attr = self._get_attr(node, "end")
        if end_attr and end_attr.strip():
            end = self.parse_time_expression(end_attr.strip(), root)
        else:
            end = start + self.parse_time_expression(self._require_attr(node, "dur"), root)

        text = self._inner_markup(node).strip()
        if not text:
            return None

        return SubtitleCue(start, end, [ text ])

    def parse_time_expression(self, text : str, root : ET.Element|None = None) -> int:
        """
        Convert a TTML time expression to milliseconds.

        Supports clock times (00:00:01.500), clock times with frames (00:00:01:12),
        and offset times in hours, minutes, seconds, milliseconds, frames or ticks (1.5s, 12f, 10000000t).
        Frame and tick rates are read from the document root if it declares them.
        """
        text = text.strip()

        match = _CLOCK_TIME_PATTERN.match(text)
        if match:
            milliseconds = TimeToMilliseconds(*match.groups())
            if milliseconds is None:
                raise MalformedGrammarError(f"Invalid clock time {text!r}")
            return milliseconds

        match = _FRAME_TIME_PATTERN.match(text)
        if match:
            hours, minutes, seconds, frames = match.groups()
            milliseconds = TimeToMilliseconds(hours, minutes, seconds)
            if milliseconds is None:
                raise MalformedGrammarError(f"Invalid clock time {text!r}")
            return milliseconds + round(float(frames) * 1000 / self._get_frame_rate(root))

        match = _OFFSET_TIME_PATTERN.match(text)
        if match:
            value, unit = match.groups()
            if unit == 't':
                return self._ticks_to_milliseconds(value, root)
            if unit == 'f':
                return round(float(value) * 1000 / self._get_frame_rate(root))
            return round(float(value) * _MILLISECONDS_PER_UNIT[unit])

        raise MalformedGrammarError(f"Unrecognised time expression {text!r}")

    def _ticks_to_milliseconds(self, value : str, root : ET.Element|None) -> int:
        if '.' in value:
            raise MalformedGrammarError(f"Tick counts must be whole numbers: {value}t")

        ticks = int(value)
        tick_rate = self._get_attr(root, "tickRate") if root is not None else None
        if tick_rate:
            rate = int(tick_rate)
            if rate <= 0:
                raise MalformedGrammarError(f"Invalid tick rate {tick_rate}")
            return round(ticks * 1000 / rate)

        return ticks // self.ticks_per_millisecond

    def _get_frame_rate(self, root : ET.Element|None) -> float:
        frame_rate = self._get_attr(root, "frameRate") if root is not None else None
        if not frame_rate:
            return DEFAULT_FRAME_RATE

        rate = float(frame_rate)
        multiplier = self._get_attr(root, "frameRateMultiplier")
        if multiplier:
            numerator, denominator = multiplier.split()
            rate = rate * float(numerator) / float(denominator)

        if rate <= 0:
            raise MalformedGrammarError(f"Invalid frame rate {frame_rate}")
        return rate

    def _inner_markup(self, node : ET.Element) -> str:
        """
        Serialize the content of an element, with namespaces removed from tag and attribute names
        """
        parts = [ escape(node.text or '') ]
        for child in node:
            parts.append(self._serialize(child))
            parts.append(escape(child.tail or ''))
        return ''.join(parts)

    def _serialize(self, element : ET.Element) -> str:
        tag = self._strip_ns(element.tag)
        attributes = ''.join(f" {self._strip_ns(key)}={quoteattr(value)}" for key, value in element.attrib.items())

        content = self._inner_markup(element)
        if not content:
            return f"<{tag}{attributes}/>"

        return f"<{tag}{attributes}>{content}</{tag}>"
