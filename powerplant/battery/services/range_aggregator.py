# path: powerplant/battery/services/range_aggregator.py
"""
Postcode range report over battery records.

Pure functions: no DB, no shared state, safe to call from concurrent requests.

Postcodes are compared as strings (code-point order), not as numbers:
"61" and "6100000" both lie between "6050" and "6200", while "605" is below
"6050" (a prefix sorts first). Clients rely on this; do not switch to
numeric comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Tuple


class BatteryLike(Protocol):
    """Anything with name/postcode/capacity: ORM rows, schemas, test doubles."""

    name: str
    postcode: str
    capacity: int


@dataclass(frozen=True)
class RangeReport:
    """Batteries within [start, end] sorted by name, plus capacity totals."""

    batteries: Tuple[BatteryLike, ...]
    total_capacity: int
    average_capacity: float

    @property
    def count(self) -> int:
        return len(self.batteries)


def filter_in_postcode_range(
    batteries: Iterable[BatteryLike],
    start_postcode: str,
    end_postcode: str,
) -> List[BatteryLike]:
    """
    Batteries with start_postcode <= postcode <= end_postcode, sorted by name.

    sorted() is stable: batteries with equal names keep their input order.
    start > end gives an empty list.
    """
    in_range = [b for b in batteries if start_postcode <= b.postcode <= end_postcode]
    return sorted(in_range, key=lambda b: b.name)


def total_capacity(batteries: Iterable[BatteryLike]) -> int:
    return sum(b.capacity for b in batteries)


def average_capacity(batteries: Sequence[BatteryLike]) -> float:
    """Arithmetic mean of capacity; 0.0 for an empty sequence."""
    if not batteries:
        return 0.0
    return total_capacity(batteries) / len(batteries)


def compute_range_report(
    batteries: Iterable[BatteryLike],
    start_postcode: str,
    end_postcode: str,
) -> RangeReport:
    selected = filter_in_postcode_range(batteries, start_postcode, end_postcode)
    return RangeReport(
        batteries=tuple(selected),
        total_capacity=total_capacity(selected),
        average_capacity=average_capacity(selected),
    )
