import codecs

import regex

BYTE_ORDER_MARK = '\ufeff'

_LINE_BREAK_PATTERN = regex.compile(r'\r\n|\r|\n')
_OVERRIDE_TAG_PATTERN = regex.compile(r'\{[^}]*\}')

# Byte order marks take precedence over the requested encoding
_BYTE_ORDER_MARKS = [
    (codecs.BOM_UTF32_LE, 'utf-32-le'),
    (codecs.BOM_UTF32_BE, 'utf-32-be'),
    (codecs.BOM_UTF8, 'utf-8'),
    (codecs.BOM_UTF16_LE, 'utf-16-le'),
    (codecs.BOM_UTF16_BE, 'utf-16-be'),
]

def DetectByteOrderMark(data : bytes) -> tuple[str|None, int]:
    """
    Identify a byte order mark at the start of the data.

    Returns the encoding it implies and the length of the mark, or (None, 0)
    """
    for bom, encoding in _BYTE_ORDER_MARKS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None, 0

def DecodeBytes(data : bytes, encoding : str) -> str:
    """
    Decode subtitle content, honouring a byte order mark if present.
    Undecodable bytes are replaced rather than raising.
    """
    bom_encoding, bom_length = DetectByteOrderMark(data)
    if bom_encoding:
        return data[bom_length:].decode(bom_encoding, errors='replace')

    return data.decode(encoding, errors='replace')

def SplitLines(text : str) -> list[str]:
    """
    Split text into lines on CRLF, CR or LF only (unlike str.splitlines, which
    also breaks on form feeds and unicode separators). A trailing line break does
    not produce an extra empty line.
    """
    if not text:
        return []

    lines = _LINE_BREAK_PATTERN.split(text)
    if lines and lines[-1] == '':
        lines.pop()
    return lines

def StripOverrideTags(text : str) -> str:
    """
    Remove SSA style {...} override blocks from a line
    """
    return _OVERRIDE_TAG_PATTERN.sub('', text)

def StripByteOrderMark(text : str) -> str:
    """
    Remove a decoded byte order mark from the start of the text
    """
    return text[1:] if text.startswith(BYTE_ORDER_MARK) else text
