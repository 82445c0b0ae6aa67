"""
Terminal rendering of word records.
"""

import os
import sys
from typing import List, Optional, TextIO

from .config import ANSI_STYLES, LIST_SEPARATOR, NO_COLOR_VAR, PART_BULLET
from .models import ChineseWordRecord, EnglishWordRecord, WordRecord


def join_list(values: List[str]) -> str:
    """Join spellings or glosses the way they are shown on screen."""
    return LIST_SEPARATOR.join(values)


class Renderer:
    """Formats word records as lines of text and writes them to a stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.color = self._detect_color() if color is None else color

    def _detect_color(self) -> bool:
        if os.getenv(NO_COLOR_VAR):
            return False
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def style(self, text: str, *styles: str) -> str:
        """Wrap text in ANSI styles when colour output is enabled."""
        if not self.color or not styles:
            return text
        prefix = "".join(ANSI_STYLES[name] for name in styles)
        return f"{prefix}{text}{ANSI_STYLES['reset']}"

    def _english_lines(self, record: EnglishWordRecord) -> List[str]:
        lines: List[str] = []

        if record.exchange is not None and record.exchange.has_tense_forms():
            # Empty forms are kept as empty segments so positions stay fixed
            forms = "; ".join(join_list(form) for form in record.exchange.tense_forms())
            lines.append(self.style(f" Tenses -> {forms}", 'italic', 'blue'))

        for symbol in record.symbols:
            lines.append(
                f" EN[{self.style(symbol.ph_en, 'yellow')}] AM[{self.style(symbol.ph_am, 'yellow')}]"
            )
            for part in symbol.parts:
                # Label and glosses are concatenated without a separator
                lines.append(
                    f" {self.style(PART_BULLET, 'green')} {self.style(part.part + join_list(part.means), 'cyan')}"
                )
        return lines

    def _chinese_lines(self, record: ChineseWordRecord) -> List[str]:
        lines: List[str] = []
        for symbol in record.symbols:
            lines.append(self.style(f" Pinyin: {symbol.word_symbol}", 'italic', 'blue'))
            for part in symbol.parts:
                means = join_list([mean.word_mean for mean in part.means])
                lines.append(self.style(f" Meaning: {means}", 'green'))
        return lines

    def format_lines(self, record: Optional[WordRecord]) -> List[str]:
        """Build the output lines for a record; an absent record yields none."""
        if record is None or not record.word_name:
            return []

        lines = [self.style(f"# {record.word_name}", 'bold', 'underline', 'magenta')]
        if not record.symbols:
            return lines

        if isinstance(record, EnglishWordRecord):
            lines.extend(self._english_lines(record))
        else:
            lines.extend(self._chinese_lines(record))
        return lines

    def render(self, record: Optional[WordRecord]) -> None:
        """Write the formatted lines for a record to the output stream."""
        for line in self.format_lines(record):
            print(line, file=self.stream)
