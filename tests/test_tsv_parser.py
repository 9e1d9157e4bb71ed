"""Tests for Tesseract TSV parsing."""

from bookcover_matcher import TsvLineParser

from .conftest import TSV_HEADER, build_tsv, build_word_row


class TestTsvLineParser:
    """Tests for grouping TSV word rows into lines."""

    def test_single_line(self):
        """Words on the same line are joined with a space."""
        tsv = build_tsv(
            build_word_row(1, 1, 1, 1, 1, 10, 20, 200, 50, 96, "Mistborn"),
            build_word_row(1, 1, 1, 1, 2, 220, 20, 100, 50, 92, "Sanderson"),
        )

        lines = TsvLineParser().parse(tsv)

        assert len(lines) == 1
        assert lines[0].text == "Mistborn Sanderson"

    def test_groups_multiple_lines(self):
        """Three words across two line numbers produce two lines in order."""
        tsv = build_tsv(
            build_word_row(1, 1, 1, 1, 1, 10, 20, 300, 60, 96, "The"),
            build_word_row(1, 1, 1, 1, 2, 320, 20, 200, 60, 95, "Hobbit"),
            build_word_row(1, 1, 1, 2, 1, 50, 100, 200, 40, 90, "Tolkien"),
        )

        lines = TsvLineParser().parse(tsv)

        assert [line.text for line in lines] == ["The Hobbit", "Tolkien"]

    def test_union_bounding_box(self):
        """The line box is the min/max envelope of its word boxes."""
        tsv = build_tsv(
            build_word_row(1, 1, 1, 1, 1, 10, 20, 200, 50, 96, "Snow"),
            build_word_row(1, 1, 1, 1, 2, 220, 25, 100, 45, 90, "Crash"),
        )

        lines = TsvLineParser().parse(tsv)

        assert list(lines[0].bounding_box) == [10, 20, 320, 20, 320, 70, 10, 70]

    def test_skips_negative_confidence_rows(self):
        """conf=-1 rows are structural markers, not words."""
        tsv = build_tsv(
            "4\t1\t1\t1\t1\t0\t10\t20\t300\t50\t-1\t",
            build_word_row(1, 1, 1, 1, 1, 10, 20, 300, 50, 95, "Dune"),
        )

        lines = TsvLineParser().parse(tsv)

        assert len(lines) == 1
        assert lines[0].text == "Dune"
        assert list(lines[0].bounding_box) == [10, 20, 310, 20, 310, 70, 10, 70]

    def test_skips_blank_word_text(self):
        """Whitespace-only words are dropped."""
        tsv = build_tsv(
            build_word_row(1, 1, 1, 1, 1, 10, 20, 300, 50, 95, "Dune"),
            build_word_row(1, 1, 1, 1, 2, 320, 20, 50, 50, 90, "   "),
        )

        lines = TsvLineParser().parse(tsv)

        assert len(lines) == 1
        assert lines[0].text == "Dune"
        assert lines[0].bounding_box[2] == 310

    def test_header_only_returns_empty(self):
        assert TsvLineParser().parse(TSV_HEADER) == []

    def test_empty_string_returns_empty(self):
        assert TsvLineParser().parse("") == []

    def test_only_structural_rows_returns_empty(self):
        tsv = build_tsv(
            "1\t1\t0\t0\t0\t0\t0\t0\t640\t480\t-1\t",
            "2\t1\t1\t0\t0\t0\t10\t20\t300\t50\t-1\t",
        )

        assert TsvLineParser().parse(tsv) == []

    def test_preserves_first_appearance_order(self):
        """Groups follow row order, not sorted key order."""
        tsv = build_tsv(
            build_word_row(1, 2, 1, 1, 1, 10, 300, 200, 40, 90, "Later"),
            build_word_row(1, 1, 1, 1, 1, 10, 20, 200, 50, 96, "Earlier"),
        )

        lines = TsvLineParser().parse(tsv)

        assert [line.text for line in lines] == ["Later", "Earlier"]

    def test_key_change_starts_new_line_even_when_key_repeats(self):
        """A key reappearing after a different key opens a new line."""
        tsv = build_tsv(
            build_word_row(1, 1, 1, 1, 1, 10, 20, 100, 50, 96, "One"),
            build_word_row(1, 1, 1, 2, 1, 10, 80, 100, 50, 96, "Two"),
            build_word_row(1, 1, 1, 1, 2, 120, 20, 100, 50, 96, "Three"),
        )

        lines = TsvLineParser().parse(tsv)

        assert [line.text for line in lines] == ["One", "Two", "Three"]

    def test_same_line_number_in_different_blocks_is_separate(self):
        tsv = build_tsv(
            build_word_row(1, 1, 1, 1, 1, 10, 20, 100, 50, 96, "Title"),
            build_word_row(1, 2, 1, 1, 1, 10, 200, 100, 30, 96, "Author"),
        )

        lines = TsvLineParser().parse(tsv)

        assert [line.text for line in lines] == ["Title", "Author"]

    def test_malformed_rows_are_skipped(self):
        """Unparsable numbers or missing columns skip only that row."""
        tsv = build_tsv(
            "5\t1\t1\t1\t1\t1\tten\t20\t100\t50\t96.0\tBroken",
            "5\t1\t1\t1\t1\t2\t10\t20\t100\t50\tnot-a-number\tBroken",
            "5\t1\t1\t1\t1\t3\t10\t20",
            build_word_row(1, 1, 1, 1, 4, 10, 20, 100, 50, 96, "Kept"),
        )

        lines = TsvLineParser().parse(tsv)

        assert [line.text for line in lines] == ["Kept"]

    def test_tolerates_carriage_returns_and_blank_rows(self):
        tsv = "\r\n".join([
            TSV_HEADER,
            build_word_row(1, 1, 1, 1, 1, 10, 20, 100, 50, 96, "Dune"),
            "",
        ])

        lines = TsvLineParser().parse(tsv)

        assert [line.text for line in lines] == ["Dune"]

    def test_word_text_is_trimmed(self):
        tsv = build_tsv(build_word_row(1, 1, 1, 1, 1, 10, 20, 100, 50, 96, "  Dune "))

        assert TsvLineParser().parse(tsv)[0].text == "Dune"

    def test_parse_row_returns_none_for_malformed_row(self):
        assert TsvLineParser.parse_row("5\t1\t1") is None

    def test_parse_row_reads_all_fields(self):
        word = TsvLineParser.parse_row(build_word_row(1, 2, 3, 4, 5, 6, 7, 8, 9, 91.5, "Word"))

        assert word.line_key == (1, 2, 3, 4)
        assert (word.left, word.top, word.width, word.height) == (6, 7, 8, 9)
        assert word.confidence == 91.5
        assert word.text == "Word"
