from datetime import timedelta

import regex

from PySubtitleParser.Helpers import FormatErrorMessages, GetInputPath
from PySubtitleParser.Helpers.TestCases import LoggedTestCase
from PySubtitleParser.Helpers.Tests import log_input_expected_result
from PySubtitleParser.Helpers.Text import DecodeBytes, DetectByteOrderMark, SplitLines, StripOverrideTags
from PySubtitleParser.Helpers.Time import (
    FramesToMilliseconds,
    ParseClockTime,
    ParseShortClockTime,
    ParseSsaTime,
    TimeToMilliseconds,
)
from PySubtitleParser.ParseResult import ParseResult
from PySubtitleParser.SubtitleCue import SubtitleCue
from PySubtitleParser.SubtitleError import FormatMismatchError, NoFormatMatchedError, StreamPreconditionError
from PySubtitleParser.SubtitleFormat import SubRipFormat
from PySubtitleParser.version import __version__

class TestTimeHelpers(LoggedTestCase):
    def test_ParseClockTime(self):
        cases = [
            ("00:00:01,000", 1000),
            ("01:02:03.456", 3723456),
            ("00:00:10,5", 10500),
            (" 00:00:02,000 align:start", 2000),
            ("00:60:00,000", None),
            ("00:00:60,000", None),
            ("00:01.000", None),
            ("", None),
            (None, None),
        ]

        for text, expected in cases:
            with self.subTest(text=text):
                result = ParseClockTime(text)
                log_input_expected_result(text, expected, result)
                self.assertEqual(expected, result)

    def test_ParseShortClockTime(self):
        cases = [
            ("00:01.000", 1000),
            ("12:34.5", 754500),
            ("01:00:00.000", 3600000),
            ("1.000", None),
        ]

        for text, expected in cases:
            with self.subTest(text=text):
                result = ParseShortClockTime(text)
                log_input_expected_result(text, expected, result)
                self.assertEqual(expected, result)

    def test_ParseSsaTime(self):
        cases = [
            ("0:00:01.50", 1500),
            ("1:02:03.04", 3723040),
            (" 0:00:01.00 ", 1000),
            ("0:00:01", None),
            ("Start", None),
            ("", None),
        ]

        for text, expected in cases:
            with self.subTest(text=text):
                result = ParseSsaTime(text)
                log_input_expected_result(text, expected, result)
                self.assertEqual(expected, result)

    def test_TimeToMilliseconds(self):
        self.assertLoggedEqual("with fraction", 3723450, TimeToMilliseconds(1, 2, 3, "45"))
        self.assertLoggedEqual("no fraction", 60000, TimeToMilliseconds("0", "1", "0"))
        self.assertLoggedIsNone("minutes out of range", TimeToMilliseconds(0, 60, 0))

    def test_FramesToMilliseconds(self):
        self.assertLoggedEqual("25 fps", 2000, FramesToMilliseconds(50, 25.0))
        self.assertLoggedEqual("29.97 fps", 1668, FramesToMilliseconds(50, 29.970))


class TestTextHelpers(LoggedTestCase):
    def test_SplitLines(self):
        cases = [
            ("a\r\nb\rc\nd", ["a", "b", "c", "d"]),
            ("a\n\nb\n", ["a", "", "b"]),
            ("a\x0cb", ["a\x0cb"]),
            ("", []),
        ]

        for text, expected in cases:
            with self.subTest(text=text):
                result = SplitLines(text)
                log_input_expected_result(repr(text), expected, result)
                self.assertEqual(expected, result)

    def test_DecodeBytes(self):
        self.assertLoggedEqual("utf-8 bom", "Café", DecodeBytes(b'\xef\xbb\xbfCaf\xc3\xa9', 'cp1252'))
        self.assertLoggedEqual("utf-16 bom", "Café", DecodeBytes("Café".encode('utf-16'), 'utf-8'))
        self.assertLoggedEqual("no bom", "Café", DecodeBytes(b'Caf\xe9', 'cp1252'))
        self.assertLoggedEqual("invalid bytes", "Caf\ufffd", DecodeBytes(b'Caf\xe9', 'utf-8'))

    def test_DetectByteOrderMark(self):
        self.assertLoggedEqual("utf-32", ('utf-32-le', 4), DetectByteOrderMark(b'\xff\xfe\x00\x00a\x00\x00\x00'))
        self.assertLoggedEqual("utf-16", ('utf-16-le', 2), DetectByteOrderMark(b'\xff\xfea\x00'))
        self.assertLoggedEqual("none", (None, 0), DetectByteOrderMark(b'abc'))

    def test_StripOverrideTags(self):
        self.assertLoggedEqual("tags", "Italic text", StripOverrideTags("{\\i1}Italic{\\i0} text"))
        self.assertLoggedEqual("no tags", "Plain", StripOverrideTags("Plain"))

    def test_GetInputPath(self):
        self.assertLoggedIsNone("none", GetInputPath(None))
        self.assertLoggedEqual("normalised", GetInputPath("a/./b.srt"), GetInputPath("a/b.srt"))

    def test_FormatErrorMessages(self):
        errors = [ FormatMismatchError("No header"), "Plain message" ]
        self.assertLoggedEqual("messages", "No header, Plain message", FormatErrorMessages(errors))


class TestSubtitleCue(LoggedTestCase):
    def test_Properties(self):
        cue = SubtitleCue(1500, 4000, ["{\\b1}Bold{\\b0}", "second"], ["Bold", "second"])

        self.assertLoggedEqual("start", timedelta(seconds=1.5), cue.start)
        self.assertLoggedEqual("end", timedelta(seconds=4), cue.end)
        self.assertLoggedEqual("duration", 2500, cue.duration)
        self.assertLoggedEqual("text", "{\\b1}Bold{\\b0}\nsecond", cue.text)
        self.assertLoggedEqual("plaintext", "Bold\nsecond", cue.plaintext)
        self.assertLoggedTrue("has text", cue.has_text)

    def test_PlaintextFallsBackToText(self):
        cue = SubtitleCue(0, 1000, ["<i>Hello</i>"])
        self.assertLoggedIsNone("plaintext lines", cue.plaintext_lines)
        self.assertLoggedEqual("plaintext", "<i>Hello</i>", cue.plaintext)

    def test_Equality(self):
        self.assertLoggedEqual("equal", SubtitleCue(0, 1000, ["a"]), SubtitleCue(0, 1000, ["a"]))
        self.assertNotEqual(SubtitleCue(0, 1000, ["a"]), SubtitleCue(0, 1001, ["a"]))
        self.assertNotEqual(SubtitleCue(0, 1000, ["a"]), SubtitleCue(0, 1000, ["a"], ["a"]))

    def test_Str(self):
        cue = SubtitleCue(1000, 2000, ["Hello"])
        self.assertLoggedEqual("str", "0:00:01 --> 0:00:02: Hello", str(cue))


class TestErrorsAndResults(LoggedTestCase):
    def test_ParseResult(self):
        succeeded = ParseResult.Succeeded(SubRipFormat, [SubtitleCue(0, 1000, ["a"])])
        failed = ParseResult.Failed(SubRipFormat, FormatMismatchError("Not SubRip"))
        fatal = ParseResult.Failed(SubRipFormat, StreamPreconditionError("Closed"))

        self.assertLoggedTrue("succeeded ok", succeeded.ok)
        self.assertLoggedFalse("failed ok", failed.ok)
        self.assertLoggedFalse("failed fatal", failed.is_fatal)
        self.assertLoggedTrue("fatal", fatal.is_fatal)

        with self.assertRaises(ValueError):
            ParseResult(SubRipFormat)

    def test_ErrorMessages(self):
        wrapped = FormatMismatchError("Not a valid document", ValueError("bad token"))
        self.assertLoggedEqual("wrapped", "Not a valid document: bad token", str(wrapped))

        error = NoFormatMatchedError("All the parsers failed", "Some text", {"SubRip": wrapped}, wrapped)
        self.assertLoggedIn("excerpt", "Beginning of subtitle stream:\nSome text", str(error))
        self.assertLoggedIs("last error", wrapped, error.last_error)

class TestVersion(LoggedTestCase):
    def test_VersionIsPackageVersion(self):
        # The same form as the version in pyproject.toml, without a "v" prefix
        self.assertLoggedTrue("version", regex.fullmatch(r'\d+\.\d+\.\d+', __version__) is not None, input_value=__version__)
