"""
Unit tests for floor plan generation and seat selection

Test Focus:
1. Generated topology, capacities and initial statuses are fixed
2. At most one seat is selected after any click sequence
3. Reserved and occupied seats ignore clicks
4. Clicking the selected seat deselects it; clicking another moves the selection
"""

from itertools import product

import pytest

from quickseat.models import SeatStatus, TableType
from quickseat.seats import SeatBoard, generate_seats, seat_stats, seats_by_row, select_seat, selected_seat


def _status_of(seats, seat_id):
    return next(seat.status for seat in seats if seat.seat_id == seat_id)


@pytest.mark.unit
class TestGenerateSeats:
    def test_topology(self):
        seats = generate_seats()
        rows = seats_by_row(seats)

        assert [row for row, _ in rows] == ["A", "B", "C", "D", "E"]
        assert [len(row_seats) for _, row_seats in rows] == [5, 5, 5, 4, 3]
        assert [seat.seat_id for seat in rows[0][1]] == ["A1", "A2", "A3", "A4", "A5"]

    def test_table_types_and_capacity(self):
        by_id = {seat.seat_id: seat for seat in generate_seats()}

        assert by_id["A1"].table_type == TableType.PAIR
        assert by_id["A1"].capacity == 2
        assert by_id["C3"].table_type == TableType.QUAD
        assert by_id["C3"].capacity == 4
        assert by_id["E2"].table_type == TableType.BOOTH
        assert by_id["E2"].capacity == 6

    def test_initial_statuses(self):
        seats = generate_seats()

        assert _status_of(seats, "A1") == SeatStatus.AVAILABLE
        assert _status_of(seats, "A2") == SeatStatus.OCCUPIED
        assert _status_of(seats, "A4") == SeatStatus.RESERVED
        assert _status_of(seats, "B2") == SeatStatus.AVAILABLE
        assert selected_seat(seats) is None

    def test_is_deterministic(self):
        assert generate_seats() == generate_seats()

    def test_stats(self):
        stats = seat_stats(generate_seats())

        assert stats.total == 22
        assert stats.available == 12
        assert stats.reserved == 4
        assert stats.occupied == 6


@pytest.mark.unit
class TestSelectSeat:
    def test_select_available_seat(self):
        seats = select_seat(generate_seats(), "A1")

        assert _status_of(seats, "A1") == SeatStatus.SELECTED
        assert selected_seat(seats).seat_id == "A1"

    def test_select_then_select_other_moves_selection(self):
        seats = generate_seats()
        seats = select_seat(seats, "A1")
        seats = select_seat(seats, "B2")

        assert [seat.seat_id for seat in seats if seat.status == SeatStatus.SELECTED] == ["B2"]
        assert _status_of(seats, "A1") == SeatStatus.AVAILABLE

    def test_selecting_selected_seat_deselects(self):
        seats = select_seat(generate_seats(), "C1")
        seats = select_seat(seats, "C1")

        assert _status_of(seats, "C1") == SeatStatus.AVAILABLE
        assert selected_seat(seats) is None

    @pytest.mark.parametrize("seat_id", ["A2", "A4", "B1", "D1"])
    def test_locked_seat_is_noop(self, seat_id):
        seats = select_seat(generate_seats(), "A1")
        before = list(seats)

        after = select_seat(seats, seat_id)

        assert after is seats
        assert after == before
        assert selected_seat(after).seat_id == "A1"

    def test_unknown_seat_is_noop(self):
        seats = generate_seats()
        assert select_seat(seats, "Z9") is seats

    def test_other_seats_untouched(self):
        original = select_seat(generate_seats(), "A1")
        updated = select_seat(original, "C5")

        changed = {a.seat_id for a, b in zip(original, updated) if a != b}
        assert changed == {"A1", "C5"}

    def test_at_most_one_selected_for_any_pair_of_clicks(self):
        ids = [seat.seat_id for seat in generate_seats()]
        for first, second in product(ids, repeat=2):
            seats = select_seat(select_seat(generate_seats(), first), second)
            assert sum(1 for seat in seats if seat.status == SeatStatus.SELECTED) <= 1


@pytest.mark.unit
class TestSeatBoard:
    def test_select_reports_change(self):
        board = SeatBoard()

        assert board.select("A1") is True
        assert board.selected.seat_id == "A1"
        assert board.select("A2") is False
        assert board.selected.seat_id == "A1"

    def test_stats_ignore_selected_seat(self):
        board = SeatBoard()
        board.select("A1")

        stats = board.stats()
        assert stats.available == 11
        assert stats.total == 22

    def test_seat_lookup(self):
        board = SeatBoard()
        assert board.seat("E3").table_type == TableType.BOOTH
        assert board.seat("nope") is None
