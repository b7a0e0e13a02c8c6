import os
import sys
import logging

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, base_path)

from check_imports import check_required_imports
check_required_imports(['PySubtitleParser', 'regex', 'pysubs2', 'srt'])

from scripts.subparser_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
)

from PySubtitleParser.Helpers import FormatErrorMessages, GetInputPath
from PySubtitleParser.Options import Options
from PySubtitleParser.SettingsType import SettingsError
from PySubtitleParser.SubtitleError import NoFormatMatchedError, SubtitleError
from PySubtitleParser.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubtitleParser.SubtitleParser import SubtitleParser
from PySubtitleParser.Writers.SrtWriter import SrtWriter

parser = CreateArgParser("Parses subtitle files in any supported format and reports the result")
args = parser.parse_args()

logger_options = InitLogger("parse-subtitles", args.debug)

try:
    options : Options = CreateOptions(args)
except SettingsError as e:
    print(f"Invalid settings: {e}")
    sys.exit(1)

subtitle_parser = SubtitleParser(options=options)
writer = SrtWriter()

failures = 0
for input_path in args.input:
    path = GetInputPath(input_path) or input_path
    print(f"Parsing {os.path.basename(path)}")

    try:
        preferred_format = args.format or SubtitleFormatRegistry.guess_format(path)
        with open(path, 'rb') as stream:
            result = subtitle_parser.parse_stream(stream, args.encoding, preferred_format)

        format_name = result.format.name if result.format else "unknown format"
        print(f"SUCCESS: {len(result.cues)} cues ({format_name})")

        if args.srt:
            print(writer.compose(result.cues, include_formatting=not args.plaintext))

    except NoFormatMatchedError as e:
        failures += 1
        print(f"FAILED: {e.message}")
        print(f"Errors: {FormatErrorMessages(list(e.errors.values()))}")
        logging.debug(f"Beginning of {path}:\n{e.excerpt}")

    except (SubtitleError, ValueError, OSError) as e:
        failures += 1
        logging.debug(f"Failed to parse {path}", exc_info=True)
        print(f"FAILED: {e}")

if failures:
    print(f"{failures} of {len(args.input)} files could not be parsed")
    sys.exit(1)
