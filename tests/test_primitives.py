"""Tests for the shared quantity primitives."""

from __future__ import annotations

import pytest

from fencebom.calculators.primitives import (
    boards_high,
    ceil_units,
    extra_line_posts,
    horizontal_boards_raw,
    length_coverage,
    linear_coverage,
    linear_coverage_raw,
    per_section,
    post_count,
    section_count,
)


class TestPostAndSectionCounts:
    def test_hundred_feet_at_eight_foot_spacing(self) -> None:
        assert post_count(100, 8, lines=1) == 14
        assert section_count(100, 8) == 13

    def test_four_lines_add_one_post(self) -> None:
        assert extra_line_posts(4) == 1
        assert post_count(100, 8, lines=4) == 15

    def test_one_and_two_lines_have_same_post_count(self) -> None:
        assert post_count(100, 8, lines=1) == post_count(100, 8, lines=2)

    @pytest.mark.parametrize(
        ("lines", "extra"),
        [(1, 0), (2, 0), (3, 1), (4, 1), (5, 2), (6, 2), (7, 3)],
    )
    def test_extra_line_posts(self, lines: int, extra: int) -> None:
        assert extra_line_posts(lines) == extra

    def test_post_count_non_decreasing_in_lines(self) -> None:
        counts = [post_count(75, 6, lines) for lines in range(2, 12)]
        assert counts == sorted(counts)

    def test_section_count_ignores_lines(self) -> None:
        assert section_count(100, 8) == 13
        for lines in range(1, 8):
            assert post_count(100, 8, lines) - extra_line_posts(lines) == 14

    def test_exact_multiple_does_not_add_a_section(self) -> None:
        assert section_count(96, 8) == 12
        assert post_count(96, 8, lines=1) == 13

    def test_float_noise_does_not_add_a_unit(self) -> None:
        # 0.1 * 3 / 0.1 == 3.0000000000000004
        assert ceil_units(0.1 * 3 / 0.1) == 3


class TestLinearCoverage:
    def test_picket_example(self) -> None:
        """(100 * 12 / 5.5) * 1.025 * 1.1 is exactly 246 up to float noise."""
        raw = linear_coverage_raw(100, 5.5, 1.025, 1.1)
        assert raw == pytest.approx(246.0)
        assert linear_coverage(100, 5.5, 1.025, 1.1) == 246

    def test_fraction_rounds_up(self) -> None:
        # 218.18 * 1.025 * 1.11 = 248.24
        assert linear_coverage(100, 5.5, 1.025, 1.11) == 249

    def test_monotonic_in_net_length(self) -> None:
        counts = [linear_coverage(length, 5.5, 1.025, 1.0) for length in range(1, 300, 7)]
        assert counts == sorted(counts)

    def test_monotonic_in_style_multiplier(self) -> None:
        multipliers = [1.0, 1.05, 1.1, 1.11, 1.2, 1.294, 2.0]
        counts = [linear_coverage(100, 5.5, 1.025, m) for m in multipliers]
        assert counts == sorted(counts)


class TestRepeatingAndLengthCoverage:
    def test_rails_per_section(self) -> None:
        assert per_section(13, 2) == 26
        assert per_section(13, 3) == 39

    def test_cap_covers_run_end_to_end(self) -> None:
        assert length_coverage(100, 8) == 13
        assert length_coverage(100, 10) == 10

    def test_double_sided_trim(self) -> None:
        assert length_coverage(100, 8, multiplier=2) == 25


class TestHorizontalBoards:
    def test_rows_to_reach_height(self) -> None:
        # 72" / 5.5" = 13.09 rows
        assert boards_high(6, 5.5) == 14

    def test_boards_for_hundred_feet(self) -> None:
        assert horizontal_boards_raw(100, 6, 5.5, 8, 1.0, 1.0) == pytest.approx(175)

    def test_both_faces_double_the_boards(self) -> None:
        single = horizontal_boards_raw(100, 6, 5.5, 8, 1.0, 1.0)
        double = horizontal_boards_raw(100, 6, 5.5, 8, 2.0, 1.0)
        assert double == pytest.approx(single * 2)
