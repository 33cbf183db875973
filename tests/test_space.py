"""Tests for fa.space -- row partitioning and the per-space state machine."""

from __future__ import annotations

import re

import pytest

from fa.space import Space, SpaceState, partition_rows


def _space(start_row: int = 0, row_count: int = 3, pattern: str = "MATCH") -> Space:
    return Space(
        start_row=start_row,
        row_count=row_count,
        trigger=re.compile(pattern),
        header="--\n",
    )


# ---------------------------------------------------------------------------
# partition_rows
# ---------------------------------------------------------------------------


class TestPartitionRows:
    """Usable rows are split into contiguous, non-overlapping regions."""

    def test_single_space_takes_everything(self) -> None:
        assert partition_rows(23, 1) == [(0, 23)]

    def test_even_split(self) -> None:
        assert partition_rows(12, 3) == [(0, 4), (4, 4), (8, 4)]

    def test_remainder_goes_to_last_space(self) -> None:
        assert partition_rows(23, 3) == [(0, 7), (7, 7), (14, 9)]

    def test_one_row_each(self) -> None:
        assert partition_rows(4, 4) == [(0, 1), (1, 1), (2, 1), (3, 1)]

    @pytest.mark.parametrize("total", [1, 2, 5, 23, 60])
    def test_regions_cover_rows_exactly_once(self, total: int) -> None:
        for count in range(1, total + 1):
            regions = partition_rows(total, count)
            assert len(regions) == count
            covered = [row for start, rows in regions for row in range(start, start + rows)]
            assert covered == list(range(total))
            assert all(rows >= 1 for _, rows in regions)

    def test_more_spaces_than_rows_rejected(self) -> None:
        with pytest.raises(ValueError, match="do not fit"):
            partition_rows(2, 3)

    def test_zero_spaces_rejected(self) -> None:
        with pytest.raises(ValueError):
            partition_rows(10, 0)


# ---------------------------------------------------------------------------
# Space
# ---------------------------------------------------------------------------


class TestSpaceConstruction:
    """Region bounds are checked on construction."""

    def test_starts_finding_with_no_rows_written(self) -> None:
        space = _space()
        assert space.state is SpaceState.FINDING
        assert space.cursor_offset == 0

    def test_zero_rows_rejected(self) -> None:
        with pytest.raises(ValueError):
            _space(row_count=0)

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError):
            _space(start_row=-1)

    def test_rows_and_end_row(self) -> None:
        space = _space(start_row=4, row_count=3)
        assert list(space.rows()) == [4, 5, 6]
        assert space.end_row == 7


class TestSpaceTrigger:
    """Trigger matching and eligibility."""

    def test_matches_anywhere_in_line(self) -> None:
        space = _space(pattern="err")
        assert space.matches("some error here\n")
        assert not space.matches("all good\n")

    def test_finding_space_is_eligible(self) -> None:
        assert _space().is_eligible(restart_on_find=False)

    def test_printing_space_not_eligible_without_restart(self) -> None:
        space = _space()
        space.activate(1)
        assert not space.is_eligible(restart_on_find=False)

    def test_printing_space_eligible_with_restart(self) -> None:
        space = _space()
        space.activate(1)
        assert space.is_eligible(restart_on_find=True)


class TestSpaceTransitions:
    """Finding/Printing transitions driven by the row budget."""

    def test_activate_enters_printing(self) -> None:
        space = _space(row_count=3)
        space.activate(1)
        assert space.state is SpaceState.PRINTING
        assert space.cursor_offset == 1
        assert space.next_row == space.start_row + 1

    def test_advance_until_full_returns_to_finding(self) -> None:
        space = _space(row_count=3)
        space.activate(1)
        space.advance()
        assert space.state is SpaceState.PRINTING
        space.advance()
        assert space.cursor_offset == 3
        assert space.is_full
        assert space.state is SpaceState.FINDING

    def test_activation_filling_region_stays_finding(self) -> None:
        space = _space(row_count=2)
        space.activate(2)
        assert space.state is SpaceState.FINDING
        assert space.cursor_offset == 2

    def test_activation_offset_clamped_to_region(self) -> None:
        space = _space(row_count=2)
        space.activate(5)
        assert space.cursor_offset == 2

    def test_stop_keeps_offset(self) -> None:
        space = _space(row_count=5)
        space.activate(2)
        space.stop()
        assert space.state is SpaceState.FINDING
        assert space.cursor_offset == 2
