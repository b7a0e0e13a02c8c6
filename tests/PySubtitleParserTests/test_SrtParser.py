import io

from PySubtitleParser.Formats.SrtParser import SrtParser
from PySubtitleParser.Helpers.TestCases import LoggedTestCase
from PySubtitleParser.Helpers.Tests import log_input_expected_error, skip_if_debugger_attached
from PySubtitleParser.SubtitleError import FormatMismatchError, NoCuesFoundError, StreamPreconditionError
from PySubtitleParser.SubtitleFormat import SubRipFormat

srt_content = """1
00:00:01,000 --> 00:00:04,000
Hello world

2
00:00:05,500 --> 00:00:07,250
Second line
with two lines

"""

class TestSrtParser(LoggedTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.parser = SrtParser()

    def test_parse_basic(self):
        cues = self.parser.parse_string(srt_content)

        self.assertLoggedEqual("cue count", 2, len(cues))
        self.assertLoggedEqual("first start", 1000, cues[0].start_time)
        self.assertLoggedEqual("first end", 4000, cues[0].end_time)
        self.assertLoggedEqual("first lines", ["Hello world"], cues[0].lines)
        self.assertLoggedEqual("second start", 5500, cues[1].start_time)
        self.assertLoggedEqual("second end", 7250, cues[1].end_time)
        self.assertLoggedEqual("second lines", ["Second line", "with two lines"], cues[1].lines)
        self.assertLoggedIsNone("plaintext lines", cues[0].plaintext_lines)

    def test_format(self):
        self.assertLoggedEqual("format", SubRipFormat, self.parser.format)
        self.assertLoggedEqual("name", "SubRip", self.parser.name)

    def test_line_endings(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nWindows\r\n\r\n2\r00:00:03,000 --> 00:00:04,000\rMac\r"
        cues = self.parser.parse_string(content)

        self.assertLoggedEqual("lines", [["Windows"], ["Mac"]], [cue.lines for cue in cues])

    def test_cue_at_zero_is_kept(self):
        content = "1\n00:00:00,000 --> 00:00:00,000\nAt zero\n"
        cues = self.parser.parse_string(content)

        self.assertLoggedEqual("cue count", 1, len(cues))
        self.assertLoggedEqual("times", (0, 0), (cues[0].start_time, cues[0].end_time))

    def test_arrow_variants(self):
        content = "1\n00:00:01,000 -> 00:00:02,000\nShort arrow\n\n2\n00:00:03,000 - > 00:00:04,000\nSpaced arrow\n"
        cues = self.parser.parse_string(content)

        self.assertLoggedEqual("times", [(1000, 2000), (3000, 4000)], [(cue.start_time, cue.end_time) for cue in cues])

    def test_decimal_fraction(self):
        content = "1\n00:00:10,5 --> 00:00:11.25\nFractions\n"
        cues = self.parser.parse_string(content)

        self.assertLoggedEqual("times", (10500, 11250), (cues[0].start_time, cues[0].end_time))

    def test_missing_index_and_extra_blank_lines(self):
        content = "\n\n00:00:01,000 --> 00:00:02,000\nNo index\n\n\n\n3\n00:00:03,000 --> 00:00:04,000\nThird\n"
        cues = self.parser.parse_string(content)

        self.assertLoggedEqual("lines", [["No index"], ["Third"]], [cue.lines for cue in cues])

    def test_invalid_blocks_are_discarded(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\n\n2\n00:61:00,000 --> 00:62:00,000\nBad minutes\n\n3\n00:00:03,000 --> 00:00:04,000\nValid\n"
        cues = self.parser.parse_string(content)

        self.assertLoggedEqual("lines", [["Valid"]], [cue.lines for cue in cues])

    def test_byte_order_mark(self):
        data = b'\xef\xbb\xbf' + srt_content.encode('utf-8')
        cues = self.parser.parse_bytes(data, 'cp1252')

        self.assertLoggedEqual("cue count", 2, len(cues))
        self.assertLoggedEqual("first lines", ["Hello world"], cues[0].lines)

    def test_decode_returns_result(self):
        result = self.parser.decode(io.BytesIO(srt_content.encode('utf-8')), 'utf-8')

        self.assertLoggedTrue("ok", result.ok)
        self.assertLoggedEqual("format", SubRipFormat, result.format)
        self.assertLoggedEqual("cue count", 2, len(result.cues))

    def test_decode_failure_is_returned(self):
        result = self.parser.decode(io.BytesIO(b"No subtitles here"), 'utf-8')

        self.assertLoggedFalse("ok", result.ok)
        self.assertLoggedIsInstance("error", result.error, NoCuesFoundError)
        self.assertLoggedFalse("fatal", result.is_fatal)

    def test_decode_closed_stream_is_fatal(self):
        stream = io.BytesIO(srt_content.encode('utf-8'))
        stream.close()
        result = self.parser.decode(stream, 'utf-8')

        self.assertLoggedIsInstance("error", result.error, StreamPreconditionError)
        self.assertLoggedTrue("fatal", result.is_fatal)

    @skip_if_debugger_attached
    def test_webvtt_is_rejected(self):
        content = "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nHello\n"
        with self.assertRaises(FormatMismatchError) as e:
            self.parser.parse_string(content)
        log_input_expected_error(content, FormatMismatchError, e.exception)

    @skip_if_debugger_attached
    def test_empty_content(self):
        with self.assertRaises(FormatMismatchError) as e:
            self.parser.parse_string("")
        log_input_expected_error("", FormatMismatchError, e.exception)

    @skip_if_debugger_attached
    def test_no_cues(self):
        content = "Just some text\n\nand some more"
        with self.assertRaises(NoCuesFoundError) as e:
            self.parser.parse_string(content)
        log_input_expected_error(content, NoCuesFoundError, e.exception)
