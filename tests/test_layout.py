"""Tests for burrow.layout module."""

import math

import pytest

from burrow.layout import GridLayout, compute_layout, find_name, initial_columns
from burrow.listing import Entry


def files(*names):
    return [Entry(name, False) for name in names]


class TestInitialColumns:
    def test_fits_in_a_third_of_the_height(self):
        assert initial_columns(5, 60) == 1

    def test_spreads_long_listings(self):
        assert initial_columns(7, 6) == 3

    def test_tiny_height_does_not_divide_by_zero(self):
        assert initial_columns(4, 2) == 4
        assert initial_columns(4, 0) == 4

    def test_never_below_one(self):
        assert initial_columns(0, 30) == 1


class TestComputeLayout:
    def test_empty_listing(self):
        layout = compute_layout([], 80, 20)
        assert layout.columns == 1
        assert layout.rows == 0
        assert layout.count == 0
        assert layout.lines() == []

    def test_single_column_when_everything_fits(self):
        layout = compute_layout(files("a", "b", "c"), 80, 60)
        assert layout.columns == 1
        assert layout.rows == 3
        assert layout.lines() == ["a", "b", "c"]

    def test_seven_entries_three_columns(self):
        layout = compute_layout(files(*"abcdefg"), 80, 6)
        assert layout.columns == 3
        assert layout.rows == 3
        # The seventh entry is alone in the last column
        assert layout.cell(6) == (2, 0)
        assert layout.last_row(2) == 0
        assert layout.lines() == ["a    d    g", "b    e     ", "c    f     "]

    def test_directories_get_a_slash_and_columns_are_padded(self):
        entries = [Entry("a", True), Entry("bbb", False)]
        layout = compute_layout(entries, 80, 3)
        assert layout.columns == 2
        assert layout.widths == [2, 3]
        assert layout.lines() == ["a/    bbb"]

    def test_narrow_width_reduces_columns(self):
        entries = files(*(f"name_{i:02d}" for i in range(10)))
        layout = compute_layout(entries, 40, 3)
        assert layout.columns == 4
        assert layout.rows == 3
        assert layout.line_width == 40

    def test_single_column_accepted_even_if_too_wide(self):
        layout = compute_layout(files("a-very-long-file-name.txt", "b"), 5, 3)
        assert layout.columns == 1
        assert layout.line_width > 5

    def test_wide_characters_measured_in_cells(self):
        layout = compute_layout(files("日本", "a"), 80, 3)
        assert layout.widths == [4, 1]
        assert layout.line_width == 9

    def test_custom_gap(self):
        layout = compute_layout(files("a", "b"), 80, 3, gap=1)
        assert layout.lines() == ["a b"]

    @pytest.mark.parametrize("width", [1, 7, 20, 33, 80])
    @pytest.mark.parametrize("height", [1, 3, 10, 30])
    def test_layout_fits(self, width, height):
        for count in range(0, 45):
            entries = [Entry("x" * (i % 7 + 1), i % 3 == 0) for i in range(count)]
            layout = compute_layout(entries, width, height)
            assert layout.columns >= 1
            assert layout.columns * layout.rows >= count
            if count:
                assert layout.rows == math.ceil(count / layout.columns)
                # The last column is never empty
                assert (layout.columns - 1) * layout.rows < count
                assert layout.last_row(layout.columns - 1) >= 0
            assert layout.columns == 1 or layout.line_width <= width
            assert all(len(line) == layout.line_width for line in layout.lines())


class TestGridLayout:
    def test_index_and_cell_are_inverse(self):
        layout = GridLayout(columns=3, rows=4, count=10)
        for index in range(10):
            assert layout.index(*layout.cell(index)) == index

    def test_contains(self):
        layout = GridLayout(columns=3, rows=3, count=7)
        assert layout.contains(2, 0)
        assert not layout.contains(2, 1)
        assert not layout.contains(3, 0)
        assert not layout.contains(0, -1)

    def test_last_row(self):
        layout = GridLayout(columns=3, rows=3, count=7)
        assert layout.last_row(0) == 2
        assert layout.last_row(1) == 2
        assert layout.last_row(2) == 0

    def test_cell_of_empty_layout(self):
        assert GridLayout(columns=1, rows=0, count=0).cell(0) == (0, 0)


class TestFindName:
    def test_finds_cell(self):
        entries = files(*"abcdefg")
        layout = compute_layout(entries, 80, 6)
        assert find_name(entries, layout, "e") == (1, 1)

    def test_missing_name(self):
        entries = files("a", "b")
        layout = compute_layout(entries, 80, 6)
        assert find_name(entries, layout, "zzz") is None
