from __future__ import annotations


class SubtitleError(Exception):
    """
    Base class for errors raised while reading subtitles.

    Keeps the human readable message and the underlying error (if any) separately
    so that callers can report either.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message}: {str(self.error)}" if self.message else str(self.error)
        return self.message or super().__str__()


class StreamPreconditionError(SubtitleError):
    """ The input stream cannot be read (closed, not readable, unknown encoding). Never retried. """
    pass


class SubtitleParseError(SubtitleError):
    """ Base class for grammar errors raised by a single format parser """
    pass


class FormatMismatchError(SubtitleParseError):
    """ The opening expectation of the format was not met, e.g. a missing section header """
    pass


class MalformedGrammarError(SubtitleParseError):
    """ The format was recognised but an internal rule of the grammar was broken """
    pass


class NoCuesFoundError(SubtitleParseError):
    """ The grammar matched but no valid cue could be extracted """
    pass


class NoFormatMatchedError(SubtitleError):
    """
    Every registered parser failed to read the stream.

    Carries an excerpt of the decoded content, the error raised by each format
    and the error from the last format that was tried.
    """
    def __init__(self, message : str, excerpt : str = "", errors : dict[str, SubtitleError]|None = None, last_error : SubtitleError|None = None):
        super().__init__(message, last_error)
        self.excerpt = excerpt
        self.errors : dict[str, SubtitleError] = errors or {}
        self.last_error = last_error

    def __str__(self) -> str:
        text = super().__str__()
        if self.excerpt:
            text += f"\nBeginning of subtitle stream:\n{self.excerpt}"
        return text
