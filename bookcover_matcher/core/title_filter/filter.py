from bookcover_matcher                      import ModuleLogger
from bookcover_matcher.core.line_geometry   import LineGeometry
from bookcover_matcher.core.models          import ExtractedWord, OcrLine
from bookcover_matcher.core.settings        import TitleFilterSettings
from dataclasses                            import dataclass, field
from typing                                 import Sequence

logger = ModuleLogger('title_filter')()

@dataclass
class HeightTier:
    """
    Words of similar visual size, keyed by the tallest word that opened the tier.
    """
    representative_height : float
    indices               : list[int] = field(default_factory = list)

class TitleTextFilter:
    """
    Separates title/author text from blurbs, review quotes and publisher marks.

    Title and author are set in visibly larger type than everything else on a cover, so lines
    are kept by their size relative to the largest horizontal line rather than by an absolute
    pixel threshold. Vertical (spine) text is ignored.
    """

    def __init__(self, settings: TitleFilterSettings | None = None):
        """
        Args:
            settings : Filter thresholds (defaults to TitleFilterSettings())
        """
        self.settings = settings or TitleFilterSettings()
        self.geometry = LineGeometry(vertical_aspect_ratio = self.settings.vertical_aspect_ratio)

    # -------------------- Line Filtering --------------------

    def extract_filtered_text(self, lines: Sequence[OcrLine]) -> list[ExtractedWord]:
        """
        Filters OCR lines down to the words most likely to be title and author.

        With no usable geometry on any line, every word is returned with height 0.

        Args:
            lines : OCR lines in reading order

        Returns:
            Words of the qualifying lines, in line order then token order
        """
        geometric_lines = [line for line in lines if self.geometry.has_geometry(line.bounding_box)]

        if not geometric_lines:
            return [
                ExtractedWord(text = word, height = 0.0)
                for line in lines
                for word in line.words
            ]

        horizontal_lines = [line for line in geometric_lines if not self.geometry.is_vertical(line.bounding_box)]
        sized_lines      = [
            (line, self.geometry.text_size(line.bounding_box))
            for line in (horizontal_lines or geometric_lines)
        ]

        max_size       = max(size for _, size in sized_lines)
        size_threshold = max_size * self.settings.size_ratio_threshold
        extracted      = [
            ExtractedWord(text = word, height = size)
            for line, size in sized_lines
            if size >= size_threshold
            for word in line.words
        ]

        logger.debug(
            f"Text filtering: max_size={max_size}, threshold={size_threshold}, "
            f"total_lines={len(lines)}, extracted_words={len(extracted)}"
        )
        return extracted

    # -------------------- Search Word Limits --------------------

    def limit_search_words(self, words: Sequence[ExtractedWord]) -> list[ExtractedWord]:
        """
        Caps the number of words used as a search query, keeping the tallest ones.

        Returns:
            At most max_search_words words, in their original order
        """
        words = list(words)
        if len(words) <= self.settings.max_search_words:
            if len(words) < self.settings.min_search_words:
                logger.debug(f"Word count {len(words)} below minimum {self.settings.min_search_words}, keeping all words")
            return words

        by_height = sorted(range(len(words)), key = lambda i: words[i].height, reverse = True)
        kept      = set(by_height[:self.settings.max_search_words])

        logger.debug(f"Trimmed search words from {len(words)} to {len(kept)}")
        return [word for i, word in enumerate(words) if i in kept]

    # -------------------- Sharpening --------------------

    def sharpen_search_words(self, words: Sequence[ExtractedWord]) -> list[ExtractedWord]:
        """
        Exploits the visual hierarchy of a cover to narrow a search query.

        Words are grouped into height tiers; everything below the largest proportional gap
        between adjacent tiers is dropped. The input is returned unchanged whenever there is
        no meaningful gap to cut at.

        Returns:
            Surviving words in their original order
        """
        words   = list(words)
        sharpen = self.settings.sharpen

        if len(words) < sharpen.min_words_required or all(word.height <= 0 for word in words):
            return words

        tiers = self.build_height_tiers(words)
        if len(tiers) < sharpen.min_tiers_required:
            return words

        gap_index, gap_ratio = self.find_largest_height_gap(tiers)
        if gap_ratio < sharpen.min_gap_threshold:
            return words

        surviving = {i for tier in tiers[:gap_index + 1] for i in tier.indices}
        if len(surviving) < sharpen.min_words_after_cut:
            return words

        logger.debug(f"Sharpened search words from {len(words)} to {len(surviving)} (gap ratio {gap_ratio:.2f})")
        return [word for i, word in enumerate(words) if i in surviving]

    def build_height_tiers(self, words: Sequence[ExtractedWord]) -> list[HeightTier]:
        """
        Groups words by height, tallest first. A word opens a new tier when it is shorter
        than the current tier's height by more than the grouping tolerance.
        """
        tolerance = self.settings.sharpen.tier_grouping_tolerance
        ordered   = sorted(
            (i for i, word in enumerate(words) if word.height > 0),
            key     = lambda i: words[i].height,
            reverse = True
        )

        tiers = []
        for i in ordered:
            height = words[i].height
            if not tiers or height < tiers[-1].representative_height * (1 - tolerance):
                tiers.append(HeightTier(representative_height = height))
            tiers[-1].indices.append(i)

        return tiers

    @staticmethod
    def find_largest_height_gap(tiers: Sequence[HeightTier]) -> tuple[int, float]:
        """
        Returns:
            (index of the tier above the gap, relative size of the gap); (-1, 0.0) if none
        """
        best_index, best_ratio = -1, 0.0

        for i in range(len(tiers) - 1):
            upper = tiers[i].representative_height
            lower = tiers[i + 1].representative_height
            ratio = (upper - lower) / upper

            if ratio > best_ratio:
                best_index, best_ratio = i, ratio

        return best_index, best_ratio
