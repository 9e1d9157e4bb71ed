from bookcover_matcher             import ModuleLogger
from bookcover_matcher.core.models import OcrLine
from dataclasses                   import dataclass, field
from typing                        import NamedTuple

logger = ModuleLogger('tsv_parser')()

# -------------------- Data Classes --------------------

class TsvWord(NamedTuple):
    """
    One data row of Tesseract TSV output.
    """
    level      : int
    page       : int
    block      : int
    paragraph  : int
    line       : int
    word       : int
    left       : int
    top        : int
    width      : int
    height     : int
    confidence : float  # -1 marks non-word structural rows
    text       : str

    @property
    def line_key(self) -> tuple[int, int, int, int]:
        return (self.page, self.block, self.paragraph, self.line)

@dataclass
class LineEnvelope:
    """
    Accumulates the words of one line and the union of their boxes.
    """
    words  : list[str] = field(default_factory = list)
    left   : int       = 0
    top    : int       = 0
    right  : int       = 0
    bottom : int       = 0

    def add(self, word: TsvWord):
        right  = word.left + word.width
        bottom = word.top + word.height

        if not self.words:
            self.left, self.top, self.right, self.bottom = word.left, word.top, right, bottom
        else:
            self.left   = min(self.left, word.left)
            self.top    = min(self.top, word.top)
            self.right  = max(self.right, right)
            self.bottom = max(self.bottom, bottom)

        self.words.append(word.text)

    def to_ocr_line(self) -> OcrLine:
        l, t, r, b = (float(v) for v in (self.left, self.top, self.right, self.bottom))
        return OcrLine(
            text         = ' '.join(self.words),
            bounding_box = (l, t, r, t, r, b, l, b)
        )

# -------------------- TsvLineParser Class --------------------

class TsvLineParser:
    """
    Groups word rows of Tesseract TSV output into OcrLines.

    Columns: level page_num block_num par_num line_num word_num left top width height conf text.
    Words sharing (page, block, par, line) form a line; a new line starts whenever that key
    changes from the previous kept row, so output order is first-appearance order.
    """
    FIELD_COUNT = 12

    def parse(self, raw_tabular_text: str) -> list[OcrLine]:
        """
        Parses raw TSV text into lines.

        Args:
            raw_tabular_text : TSV output including its header row

        Returns:
            Ordered list of OcrLines; empty when no word rows survive filtering
        """
        lines        = []
        current_key  = None
        envelope     = LineEnvelope()
        rows         = raw_tabular_text.split('\n')[1:]
        skipped_rows = 0

        for row in rows:
            row = row.rstrip('\r')
            if not row.strip():
                continue

            word = self.parse_row(row)
            if word is None:
                skipped_rows += 1
                continue

            if word.confidence < 0 or not word.text:
                continue

            if word.line_key != current_key:
                if envelope.words:
                    lines.append(envelope.to_ocr_line())
                current_key = word.line_key
                envelope    = LineEnvelope()

            envelope.add(word)

        if envelope.words:
            lines.append(envelope.to_ocr_line())

        if skipped_rows:
            logger.debug(f"Skipped {skipped_rows} malformed TSV rows")

        return lines

    @classmethod
    def parse_row(cls, row: str) -> TsvWord | None:
        """
        Parses a single TSV data row.

        Returns:
            TsvWord, or None when the row is malformed
        """
        fields = row.split('\t', cls.FIELD_COUNT - 1)
        if len(fields) < cls.FIELD_COUNT:
            return None

        try:
            integers   = [int(value) for value in fields[:10]]
            confidence = float(fields[10])
        except ValueError:
            return None

        return TsvWord(*integers, confidence, fields[11].strip())
