import logging
import xml.etree.ElementTree as ET
from abc import abstractmethod

from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import FormatMismatchError, NoCuesFoundError, SubtitleParseError
from PySubtitleParser.SubtitleFormatParser import SubtitleFormatParser

class XmlNodeParser(SubtitleFormatParser):
    """
    Shared logic for markup formats where each cue is one element of an XML document.

    The document is parsed from the raw bytes, so the XML declaration decides the encoding.
    Every element whose local name (ignoring any namespace) is NODE_NAME is converted to a cue,
    and a node that can't be converted is logged and skipped rather than failing the document.
    """

    NODE_NAME : str = ""

    def parse_bytes(self, data : bytes, encoding : str) -> list[SubtitleCue]:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise FormatMismatchError("Content is not a valid XML document", e)

        cues : list[SubtitleCue] = []
        for node in root.iter():
            if self._strip_ns(node.tag) != self.NODE_NAME:
                continue

            try:
                cue = self._parse_node(root, node)
            except (SubtitleParseError, ValueError, TypeError, ArithmeticError) as e:
                logging.warning(f"{self.name}: error parsing <{self.NODE_NAME}> node {ET.tostring(node, encoding='unicode')!r}: {e}")
                continue

            if cue:
                cues.append(cue)
            else:
                self._log_discarded(f"discarded <{self.NODE_NAME}> node without text")

        if not cues:
            raise NoCuesFoundError(f"Content is not in a valid {self.name} format, or represents empty subtitles")

        return cues

    def parse_string(self, content : str) -> list[SubtitleCue]:
        return self.parse_bytes(content.encode('utf-8'), 'utf-8')

    @abstractmethod
    def _parse_node(self, root : ET.Element, node : ET.Element) -> SubtitleCue|None:
        """
        Convert one element to a cue, or None if it has no text.

        Raises:
            SubtitleParseError, ValueError, ArithmeticError: If the element's timing attributes are missing or invalid
        """
        raise NotImplementedError

    def _strip_ns(self, tag) -> str:
        if not isinstance(tag, str):
            return ""
        return tag.split('}', 1)[1] if '}' in tag else tag

    def _get_attr(self, element : ET.Element, name : str) -> str|None:
        """ Get an attribute by name, with or without a namespace """
        if name in element.attrib:
            return element.attrib[name]

        for key, value in element.attrib.items():
            if self._strip_ns(key) == name:
                return value

        return None

    def _require_attr(self, element : ET.Element, name : str) -> str:
        value = self._get_attr(element, name)
        if value is None or not value.strip():
            raise ValueError(f"Missing {name} attribute")
        return value.strip()
