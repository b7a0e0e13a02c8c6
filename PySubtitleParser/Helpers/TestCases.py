import unittest
from typing import Any

from PySubtitleParser.Helpers.Tests import log_input_expected_result, log_test_name
from PySubtitleParser.Options import Options
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleParser import SubtitleParser

class LoggedTestCase(unittest.TestCase):
    """
    Test case that logs the name of each test, and the input, expected and actual values of logged assertions
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, label : str, expected : Any, actual : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(label if input_value is None else input_value, expected, actual)
        self.assertEqual(expected, actual, msg or label)

    def assertLoggedTrue(self, label : str, actual : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(label if input_value is None else input_value, True, actual)
        self.assertTrue(actual, msg or label)

    def assertLoggedFalse(self, label : str, actual : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(label if input_value is None else input_value, False, actual)
        self.assertFalse(actual, msg or label)

    def assertLoggedIs(self, label : str, expected : Any, actual : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(label if input_value is None else input_value, expected, actual)
        self.assertIs(expected, actual, msg or label)

    def assertLoggedIsNone(self, label : str, actual : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(label if input_value is None else input_value, None, actual)
        self.assertIsNone(actual, msg or label)

    def assertLoggedIsInstance(self, label : str, actual : Any, expected_type : type|tuple[type, ...], input_value : Any = None, msg : str|None = None) -> None:
        expected_types = expected_type if isinstance(expected_type, tuple) else (expected_type,)
        expected_name = " | ".join(t.__name__ for t in expected_types)
        log_input_expected_result(label if input_value is None else input_value, expected_name, type(actual).__name__)
        self.assertIsInstance(actual, expected_type, msg or label)

    def assertLoggedIn(self, label : str, member : Any, container : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(label if input_value is None else input_value, member, container)
        self.assertIn(member, container, msg or label)


class SubtitleParserTestCase(LoggedTestCase):
    """
    Test case with a parser configured with default options
    """
    def setUp(self) -> None:
        super().setUp()
        self.options = Options()
        self.parser = SubtitleParser(options=self.options)

    def parse_text(self, content : str, preferred_format : str|None = None) -> list[SubtitleCue]:
        return self.parser.parse_string(content, preferred_format)

    def assertCuesEqual(self, expected : list[tuple[int, int, list[str]]], cues : list[SubtitleCue]) -> None:
        """
        Compare cues with a list of (start_time, end_time, lines) tuples
        """
        actual = [ (cue.start_time, cue.end_time, cue.lines) for cue in cues ]
        log_input_expected_result("cues", expected, actual)
        self.assertSequenceEqual(expected, actual)
