import xml.etree.ElementTree as ET

from PySubtitleParser.Formats.XmlNodeParser import XmlNodeParser
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleFormat import YoutubeXmlFormat

class YoutubeXmlParser(XmlNodeParser):
    """
    Parser for YouTube timed-text XML, where times are in (fractional) seconds:

        <transcript>
            <text start="0.5" dur="2.25">Hello there</text>
        </transcript>
    """

    FORMAT = YoutubeXmlFormat
    NODE_NAME = "text"

    def _parse_node(self, root : ET.Element, node : ET.Element) -> SubtitleCue|None:
        start = float(self._require_attr(node, "start"))
        duration = float(self._require_attr(node, "dur"))

        text = ''.join(node.itertext())
        if not text.strip():
            return None

        return SubtitleCue(round(start * 1000), round((start + duration) * 1000), [ text ])
