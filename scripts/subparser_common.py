import os
import logging
import sys

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PySubtitleParser import init_options
from PySubtitleParser.Options import Options
from PySubtitleParser.SubtitleFormatRegistry import SubtitleFormatRegistry

log_dir = os.getenv('LOG_DIR', 'logs')

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = os.path.join(log_dir, f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'WARNING').upper()
        logging_level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create new arg parser with the shared command line arguments
    """
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument('--list-formats', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()
    if pre_args.list_formats:
        HandleFormatListing(pre_args)

    parser = ArgumentParser(description=description)
    parser.add_argument('input', nargs='+', help="Path to subtitle file(s) (see --list-formats for supported formats)")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    parser.add_argument('-e', '--encoding', type=str, default=None, help="Text encoding of the subtitle files (default: utf-8, or DEFAULT_ENCODING)")
    parser.add_argument('-f', '--format', type=str, default=None, help="Try this subtitle format first instead of guessing from the file extension")
    parser.add_argument('--framerate', type=float, default=None, help="Frame rate for MicroDVD files that don't specify one")
    parser.add_argument('--srt', action='store_true', help="Print the parsed subtitles in SubRip format")
    parser.add_argument('--plaintext', action='store_true', help="Strip inline formatting tags when printing SubRip output")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def HandleFormatListing(args: Namespace) -> None:
    """Print supported subtitle formats and exit if requested."""
    if getattr(args, "list_formats", False):
        formats = SubtitleFormatRegistry.CreateDefault().list_available_formats()
        print(f"Supported subtitle formats: {formats}")
        sys.exit(0)

def CreateOptions(args: Namespace) -> Options:
    """ Create options from the command line arguments, falling back to DEFAULT_ENCODING and DEFAULT_FRAME_RATE from the environment """
    return init_options(
        default_encoding=args.encoding or os.getenv('DEFAULT_ENCODING'),
        default_frame_rate=args.framerate or os.getenv('DEFAULT_FRAME_RATE'),
    )
