import pysubs2.time
import regex

_CLOCK_TIME_PATTERN = regex.compile(r'(\d+):(\d+):(\d+)[,.](\d+)')
_SHORT_CLOCK_TIME_PATTERN = regex.compile(r'(\d+):(\d+)[,.](\d+)')

def TimeToMilliseconds(hours : int|str, minutes : int|str, seconds : int|str, fraction : str|None = None) -> int|None:
    """
    Convert clock components to milliseconds. The fraction is a decimal fraction of a
    second, so "5" is 500ms and "050" is 50ms. Returns None if minutes or seconds are out of range.
    """
    hours, minutes, seconds = int(hours), int(minutes), int(seconds)
    if minutes >= 60 or seconds >= 60:
        return None

    milliseconds = int(fraction[:3].ljust(3, '0')) if fraction else 0
    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + milliseconds

def ParseClockTime(text : str|None) -> int|None:
    """
    Find an HH:MM:SS,fff (or HH:MM:SS.fff) timecode in the text and convert it to milliseconds
    """
    if not text:
        return None

    match = _CLOCK_TIME_PATTERN.search(text)
    if not match:
        return None

    return TimeToMilliseconds(*match.groups())

def ParseShortClockTime(text : str|None) -> int|None:
    """
    Find an HH:MM:SS.fff timecode, or an MM:SS.fff timecode with hours omitted, and convert it to milliseconds
    """
    if not text:
        return None

    milliseconds = ParseClockTime(text)
    if milliseconds is not None:
        return milliseconds

    match = _SHORT_CLOCK_TIME_PATTERN.search(text)
    if not match:
        return None

    minutes, seconds, fraction = match.groups()
    return TimeToMilliseconds(0, minutes, seconds, fraction)

def ParseSsaTime(text : str|None) -> int|None:
    """
    Parse an H:MM:SS.cc timestamp as used by SubStation Alpha and SubViewer.
    The whole (trimmed) text must be a timestamp.
    """
    if not text:
        return None

    match = pysubs2.time.TIMESTAMP.fullmatch(text.strip())
    if not match:
        return None

    return pysubs2.time.timestamp_to_ms(match.groups())

def FramesToMilliseconds(frames : int, frame_rate : float) -> int:
    """
    Convert a frame number to milliseconds at the given frame rate
    """
    return pysubs2.time.frames_to_ms(frames, frame_rate)
