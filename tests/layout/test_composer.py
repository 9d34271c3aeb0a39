"""
Unit and integration tests for the page layout engine.
"""

import pandas as pd
import pytest

from bookgrid.layout import (
    InputShape,
    InvalidInputError,
    LayoutConfig,
    LAYOUT_COLUMNS,
    build_layout,
    layout_book,
    layout_lines,
    line_offsets,
    tokenize_line,
)


class TestLineOffsets:
    """Tests for line_offsets()."""

    def test_offsets_when_three_words_then_running_sums(self):
        # Act
        left, right = line_offsets(["the", "cat", "sat"])

        # Assert
        assert left.tolist() == [0, 4, 8]
        assert right.tolist() == [3, 7, 11]

    def test_offsets_when_varied_lengths_then_one_unit_gap(self):
        # Act
        left, right = line_offsets(["a", "longer", "mid", "z"])

        # Assert
        assert left[0] == 0
        assert all(left[i + 1] == right[i] + 1 for i in range(3))

    def test_offsets_when_no_words_then_empty(self):
        left, right = line_offsets([])

        assert len(left) == 0
        assert len(right) == 0


class TestTokenizeLine:
    """Tests for tokenize_line()."""

    def test_tokenize_when_punctuation_then_stays_attached(self):
        assert tokenize_line("Hello, world! It's  fine.", LayoutConfig()) == [
            "Hello,", "world!", "It's", "fine.",
        ]

    def test_tokenize_when_to_lower_then_lowercased(self):
        assert tokenize_line("The Cat", LayoutConfig(to_lower=True)) == ["the", "cat"]

    def test_tokenize_when_custom_tokenizer_then_used(self):
        # Arrange
        config = LayoutConfig(tokenizer=lambda text: text.split(","))

        # Act & Assert
        assert tokenize_line("a,b,,c", config) == ["a", "b", "c"]


class TestBuildLayoutGeometry:
    """Exact geometry for small inputs with default spacing."""

    def test_build_when_two_lines_one_per_page_then_exact_boxes(self, short_lines):
        """
        L = 11, two pages on a 2 x 2 grid (column-major):
        page 1 at (1, 1), page 2 at (1, 2).
        """
        # Act
        df = build_layout(short_lines, lines_per_page=1)

        # Assert
        assert tuple(df.columns) == LAYOUT_COLUMNS
        assert df["word"].tolist() == ["the", "cat", "sat", "on", "the", "mat"]
        assert df["page"].tolist() == [1, 1, 1, 2, 2, 2]
        assert df["line"].tolist() == [1, 1, 1, 1, 1, 1]
        # x origin = x_page * (11 + 10) = 21
        assert df["xmin"].tolist() == [24.0, 28.0, 32.0, 23.0, 27.0, 31.0]
        assert df["xmax"].tolist() == [21.0, 25.0, 29.0, 21.0, 24.0, 28.0]
        # ymin = -1 * 4 - y_page * (1 * 4 + 10)
        assert df["ymin"].tolist() == [-18.0] * 3 + [-32.0] * 3
        assert df["ymax"].tolist() == [-21.0] * 3 + [-35.0] * 3

    def test_build_when_row_major_then_second_page_moves_right(self, short_lines):
        # Act
        df = build_layout(short_lines, lines_per_page=1, fill_by_column=False)

        # Assert
        page2 = df[df["page"] == 2]
        assert page2["xmax"].tolist() == [42.0, 45.0, 49.0]
        assert page2["ymin"].tolist() == [-18.0] * 3

    def test_build_when_custom_spacing_then_applied(self):
        # Arrange
        config = LayoutConfig(
            lines_per_page=2,
            character_height=2,
            vertical_space=0.5,
            x_space_pages=4,
            y_space_pages=6,
        )

        # Act
        df = build_layout(["ab cd", "efg h"], config)

        # Assert
        # One page at (1, 1); L = 5; x origin = 9; page pitch y = 2 * 2.5 + 6 = 11
        assert df["xmax"].tolist() == [9.0, 12.0, 9.0, 13.0]
        assert df["xmin"].tolist() == [11.0, 14.0, 12.0, 14.0]
        assert df["ymin"].tolist() == [-13.5, -13.5, -16.0, -16.0]
        assert df["ymax"].tolist() == [-15.5, -15.5, -18.0, -18.0]

    def test_build_when_pages_differ_in_width_then_widest_line_sets_pitch(self):
        # Arrange
        lines = ["a much longer first line", "b c"]

        # Act
        df = build_layout(lines, lines_per_page=1, fill_by_column=False)

        # Assert
        # L = 24, page 2 at x_page = 2 -> origin 2 * 34 = 68
        assert df.loc[df["word"] == "b", "xmax"].item() == 68.0


class TestBuildLayoutProperties:
    """Invariants over a larger document."""

    @pytest.fixture
    def layout(self, prose_lines):
        return layout_book(prose_lines, lines_per_page=7)

    def test_layout_when_many_lines_then_page_and_line_consistent(self, layout):
        # Arrange
        lines = layout.lines

        # Assert
        for prev, cur in zip(lines, lines[1:]):
            if prev.line == 7:
                assert (cur.page, cur.line) == (prev.page + 1, 1)
            else:
                assert (cur.page, cur.line) == (prev.page, prev.line + 1)
        assert layout.page_count == 9

    def test_layout_when_adjacent_words_then_one_unit_gap(self, layout):
        # Arrange
        by_line = {}
        for box in layout.words:
            by_line.setdefault(box.line_index, []).append(box)

        # Assert
        for boxes in by_line.values():
            cell = layout.grid[boxes[0].page]
            origin = cell.x_page * (layout.max_line_length + 10)
            assert boxes[0].xmax == origin
            for prev, cur in zip(boxes, boxes[1:]):
                assert cur.xmax == prev.xmin + 1
                assert (cur.ymin, cur.ymax) == (prev.ymin, prev.ymax)

    def test_layout_when_same_page_then_same_grid_cell(self, layout):
        # Arrange
        df = layout.to_frame()

        # Assert
        for page, group in df.groupby("page"):
            cell = layout.grid[page]
            origin = cell.x_page * (layout.max_line_length + 10)
            assert (group["xmax"] >= origin).all()
            assert (group["xmin"] <= origin + layout.max_line_length).all()

    def test_layout_when_words_then_reading_order_preserved(self, layout, prose_lines):
        assert [box.word for box in layout.words] == " ".join(prose_lines).split()


class TestLayoutBookInputs:
    """Input shapes, empty inputs and errors."""

    def test_layout_when_word_stream_then_reflowed(self, word_stream):
        # Act
        result = layout_book(word_stream, wrap_width=30)

        # Assert
        assert result.shape is InputShape.WORDS
        assert all(len(line.text) <= 30 for line in result.lines)
        assert [box.word for box in result.words] == word_stream
        assert result.max_line_length <= 30

    def test_layout_when_lines_then_not_reflowed(self, prose_lines):
        # Act
        result = layout_book(prose_lines)

        # Assert
        assert result.shape is InputShape.LINES
        assert [line.text for line in result.lines] == prose_lines

    def test_layout_when_dataframe_then_same_as_list(self, prose_lines):
        # Act
        from_list = build_layout(prose_lines)
        from_frame = build_layout(pd.DataFrame({"text": prose_lines}))

        # Assert
        pd.testing.assert_frame_equal(from_list, from_frame)

    def test_layout_when_config_and_overrides_then_overrides_win(self, short_lines):
        # Arrange
        config = LayoutConfig(lines_per_page=5)

        # Act
        result = layout_book(short_lines, config, lines_per_page=1)

        # Assert
        assert result.page_count == 2

    def test_layout_when_invalid_override_then_raises_error(self, short_lines):
        with pytest.raises(ValueError, match="lines_per_page"):
            build_layout(short_lines, lines_per_page=0)

    @pytest.mark.parametrize("book", [[], (), pd.Series([], dtype=object), pd.DataFrame({"text": []})])
    def test_build_when_empty_input_then_empty_table(self, book):
        # Act
        df = build_layout(book)

        # Assert
        assert len(df) == 0
        assert tuple(df.columns) == LAYOUT_COLUMNS

    def test_build_when_only_blank_records_then_empty_table(self):
        assert len(build_layout(["", None, ""])) == 0

    def test_build_when_blank_lines_inside_text_then_lines_still_counted(self):
        # Arrange
        lines = [f"line {i} here" for i in range(1, 11)]
        lines[1] = ""

        # Act
        df = build_layout(lines)

        # Assert
        assert 2 not in df["line"].tolist()
        assert df["line"].unique().tolist() == [1] + list(range(3, 11))

    def test_build_when_unsupported_input_then_raises_error(self):
        with pytest.raises(InvalidInputError):
            build_layout(12345)

    def test_build_when_table_lacks_text_then_raises_error(self):
        with pytest.raises(InvalidInputError):
            build_layout(pd.DataFrame({"word": ["a b"]}))

    def test_build_when_caller_adds_column_then_result_unaffected(self, short_lines):
        # Arrange
        result = layout_book(short_lines)

        # Act
        df = result.to_frame()
        df["word_length"] = df["word"].str.len()

        # Assert
        assert "word_length" not in result.to_frame().columns

    def test_layout_lines_when_no_lines_then_empty_result(self):
        assert layout_lines([], LayoutConfig()).is_empty

    def test_build_when_numeric_records_then_raises_error(self):
        with pytest.raises(InvalidInputError):
            build_layout([1, 2, 3])

    def test_layout_when_blank_word_records_then_page_width_from_words(self):
        """Blank records in a word stream do not widen the page."""
        # Act
        result = layout_book(["ab", None, "cd"])

        # Assert
        assert [line.text for line in result.lines] == ["ab cd"]
        assert result.max_line_length == 5
        assert [box.word for box in result.words] == ["ab", "cd"]


class TestBuildLayoutGridShape:
    """Row and column requests end to end."""

    def test_build_when_two_rows_then_pages_stack_two_high(self):
        """rows bounds the vertical position: pages 1-2 in column 1, 3-4 in column 2."""
        # Arrange
        lines = [f"line {i} x" for i in range(1, 5)]  # L = 8

        # Act
        df = build_layout(lines, lines_per_page=1, rows=2)

        # Assert
        first = df.groupby("page").first()
        # x origin = x_page * (8 + 10); ymin = -4 - y_page * 14
        assert first["xmax"].tolist() == [18.0, 18.0, 36.0, 36.0]
        assert first["ymin"].tolist() == [-18.0, -32.0, -18.0, -32.0]

    def test_build_when_two_rows_row_major_then_rows_fill_first(self):
        # Arrange
        lines = [f"line {i} x" for i in range(1, 5)]

        # Act
        df = build_layout(lines, lines_per_page=1, rows=2, fill_by_column=False)

        # Assert
        first = df.groupby("page").first()
        assert first["xmax"].tolist() == [18.0, 36.0, 18.0, 36.0]
        assert first["ymin"].tolist() == [-18.0, -18.0, -32.0, -32.0]
