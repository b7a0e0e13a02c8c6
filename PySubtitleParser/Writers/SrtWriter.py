from typing import BinaryIO

import srt

from PySubtitleParser.SubtitleCue import SubtitleCue

class SrtWriter:
    """
    Writes cues in SubRip (.srt) format, numbering them from 1 in the order given
    """
    def compose(self, cues : list[SubtitleCue], include_formatting : bool = True) -> str:
        """
        Render the cues as SubRip text.

        If include_formatting is False the plaintext version of each cue is written where there is one.
        """
        subtitles = [
            srt.Subtitle(
                index=index,
                start=cue.start,
                end=cue.end,
                content=self._get_content(cue, include_formatting)
            )
            for index, cue in enumerate(cues, start=1)
        ]

        return srt.compose(subtitles, reindex=False, strict=False)

    def write_stream(self, stream : BinaryIO, cues : list[SubtitleCue], include_formatting : bool = True, encoding : str = 'utf-8') -> None:
        """
        Write the cues to a binary stream in SubRip format
        """
        stream.write(self.compose(cues, include_formatting).encode(encoding))
        stream.flush()

    def _get_content(self, cue : SubtitleCue, include_formatting : bool) -> str:
        if not include_formatting and cue.plaintext_lines is not None:
            return "\n".join(cue.plaintext_lines)
        return "\n".join(cue.lines)
