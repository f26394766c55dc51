from utils.constants import UNIT_MULTIPLIER


def compose_bed_number(unit: int, index: int) -> int:
    """Build the bed number UXX from a unit and a bed index (e.g. unit 2, index 5 -> 205)."""
    return unit * UNIT_MULTIPLIER + index


def unit_of(bed_number: int) -> int:
    """Get the unit a bed number belongs to."""
    return bed_number // UNIT_MULTIPLIER


def index_of(bed_number: int) -> int:
    """Get the bed index within its unit."""
    return bed_number % UNIT_MULTIPLIER


def roommate_of(bed_number: int) -> int:
    """
    Get the other bed of the same room.

    Rooms pair consecutive beds by parity: 101/102, 103/104, ... so an even bed
    shares with the bed below it and an odd bed with the bed above it.
    Applying it twice returns the original bed.
    """
    if bed_number % 2 == 0:
        return bed_number - 1
    return bed_number + 1

