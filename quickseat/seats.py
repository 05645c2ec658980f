"""Floor plan generation and single-seat selection."""

from __future__ import annotations

from dataclasses import dataclass, replace

from quickseat.constant import (
    BOOTH_ROWS,
    PAIR_TABLE_MAX_NUMBER,
    SEAT_ROWS,
    SEAT_STATUS_CYCLE,
    SEATS_PER_ROW,
    TABLE_CAPACITY,
)
from quickseat.models import Seat, SeatStatus, TableType


@dataclass(frozen=True)
class SeatStats:
    total: int
    available: int
    reserved: int
    occupied: int


def _table_type_for(row: str, number: int) -> TableType:
    if row in BOOTH_ROWS:
        return TableType.BOOTH
    if number <= PAIR_TABLE_MAX_NUMBER:
        return TableType.PAIR
    return TableType.QUAD


def generate_seats() -> list[Seat]:
    """
    Build the floor plan.

    The topology and initial statuses are fixed, so every call returns an
    identical collection.
    """
    seats: list[Seat] = []
    for row_index, row in enumerate(SEAT_ROWS):
        for number in range(1, SEATS_PER_ROW[row] + 1):
            table_type = _table_type_for(row, number)
            status = SEAT_STATUS_CYCLE[(row_index + number) % len(SEAT_STATUS_CYCLE)]
            seats.append(
                Seat(
                    seat_id=f"{row}{number}",
                    row=row,
                    number=number,
                    capacity=TABLE_CAPACITY[table_type.value],
                    table_type=table_type,
                    status=SeatStatus(status),
                )
            )
    return seats


def select_seat(seats: list[Seat], seat_id: str) -> list[Seat]:
    """
    Toggle selection of one seat.

    Locked or unknown seats leave the collection untouched (the same list is
    returned). Selecting the selected seat clears the selection; selecting
    any other seat moves the selection to it.
    """
    target = next((seat for seat in seats if seat.seat_id == seat_id), None)
    if target is None or target.is_locked:
        return seats

    deselecting = target.status == SeatStatus.SELECTED
    updated: list[Seat] = []
    for seat in seats:
        if seat.seat_id == seat_id:
            new_status = SeatStatus.AVAILABLE if deselecting else SeatStatus.SELECTED
            updated.append(replace(seat, status=new_status))
        elif seat.status == SeatStatus.SELECTED:
            updated.append(replace(seat, status=SeatStatus.AVAILABLE))
        else:
            updated.append(seat)
    return updated


def selected_seat(seats: list[Seat]) -> Seat | None:
    return next((seat for seat in seats if seat.status == SeatStatus.SELECTED), None)


def seats_by_row(seats: list[Seat]) -> list[tuple[str, list[Seat]]]:
    """Group seats by row, keeping first-seen row order."""
    rows: dict[str, list[Seat]] = {}
    for seat in seats:
        rows.setdefault(seat.row, []).append(seat)
    return list(rows.items())


def seat_stats(seats: list[Seat]) -> SeatStats:
    def count(status: SeatStatus) -> int:
        return sum(1 for seat in seats if seat.status == status)

    return SeatStats(
        total=len(seats),
        available=count(SeatStatus.AVAILABLE),
        reserved=count(SeatStatus.RESERVED),
        occupied=count(SeatStatus.OCCUPIED),
    )


class SeatBoard:
    """Owns one floor plan for the lifetime of a screen."""

    def __init__(self, seats: list[Seat] | None = None) -> None:
        self.seats: list[Seat] = generate_seats() if seats is None else list(seats)

    def select(self, seat_id: str) -> bool:
        """Apply a selection click; return whether anything changed."""
        updated = select_seat(self.seats, seat_id)
        changed = updated is not self.seats
        self.seats = updated
        return changed

    def seat(self, seat_id: str) -> Seat | None:
        return next((seat for seat in self.seats if seat.seat_id == seat_id), None)

    @property
    def selected(self) -> Seat | None:
        return selected_seat(self.seats)

    def rows(self) -> list[tuple[str, list[Seat]]]:
        return seats_by_row(self.seats)

    def stats(self) -> SeatStats:
        return seat_stats(self.seats)
