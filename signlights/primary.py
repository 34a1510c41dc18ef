"""Coordination logic for the primary controller of a multi-sign display."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, TypeVar

__all__ = [
    "CONNECTION_CHECK_INTERVAL",
    "SECONDARY_RESYNC_INTERVAL",
    "TELEMETRY_INTERVAL",
    "MAX_SCAN_TIME",
    "MAX_TOTAL_SCAN_TIME",
    "LOGO_NAME_SUFFIX",
    "SignOffsets",
    "compute_offsets",
    "ButtonSequence",
    "battery_labels",
    "should_keep_secondary",
    "order_by_position",
]

# Milliseconds between checks that the secondaries are still connected.
CONNECTION_CHECK_INTERVAL = 1500
# Milliseconds after which all secondaries are resynchronised.
SECONDARY_RESYNC_INTERVAL = 10000
# Milliseconds between telemetry reports.
TELEMETRY_INTERVAL = 5000
# Milliseconds to wait for a single secondary to answer a scan.
MAX_SCAN_TIME = 2000
# Milliseconds to keep scanning after the last secondary was found.
MAX_TOTAL_SCAN_TIME = 10000

# Secondaries are named "<prefix> <position>-<type>"; type 15 is the logo.
LOGO_NAME_SUFFIX = "-15"

T = TypeVar("T")


@dataclass(frozen=True)
class SignOffsets:
    """Where one sign sits among all the signs of the display."""

    digits_to_left: int = 0
    digits_to_right: int = 0
    columns_to_left: int = 0
    columns_to_right: int = 0


def compute_offsets(column_counts: Iterable[int]) -> list[SignOffsets]:
    """Offsets for signs placed left to right with the given column counts."""
    counts = list(column_counts)
    digit_count = len(counts)
    total_columns = sum(counts)
    offsets = []
    columns_so_far = 0
    for index, columns in enumerate(counts):
        offsets.append(
            SignOffsets(
                digits_to_left=index,
                digits_to_right=digit_count - index - 1,
                columns_to_left=columns_so_far,
                columns_to_right=total_columns - columns_so_far - columns,
            )
        )
        columns_so_far += columns
    return offsets


class ButtonSequence:
    """Tracks repeated presses of the manual style buttons.

    Pressing the same button again steps through its list of styles;
    pressing a different button starts that button's list from the top.
    """

    def __init__(self) -> None:
        self.last_button: Optional[int] = None
        self.sequence_number = 0

    def press(self, button: int) -> int:
        """Record a normal press and return the style index to show."""
        if button == self.last_button:
            self.sequence_number += 1
        else:
            self.sequence_number = 0
        self.last_button = button
        return self.sequence_number


def battery_labels(voltages: Iterable[float]) -> list[str]:
    """Short display labels such as ``1=7.20``, numbered from one."""
    return [f"{number}={voltage:.2f}" for number, voltage in enumerate(voltages, start=1)]


def should_keep_secondary(local_name: str, ignore_logo: bool) -> bool:
    """Whether a discovered secondary is used; the logo is dropped when ignored."""
    return not ignore_logo or not local_name.endswith(LOGO_NAME_SUFFIX)


def order_by_position(secondaries: Sequence[T], key: Callable[[T], int]) -> list[T]:
    """The secondaries sorted by their sign position, lowest first."""
    return sorted(secondaries, key=key)