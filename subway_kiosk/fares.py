"""Fare calculation and change-making for the ticket machine."""

from __future__ import annotations

from dataclasses import dataclass

MIN_TICKETS = 1
MAX_TICKETS = 10

MISSING_STATIONS = "请输入起点和终点站名！"
NO_PRICE_YET = "请先计算票价！"
NOT_ENOUGH_COINS = "投币不足，请继续投币！"

_DISTANCE_OFFSET = 3
# (longest distance in the band, price per ticket), checked in order.
_FARE_BANDS = ((3, 2), (6, 3))
_TOP_FARE = 4


class FareError(ValueError):
    """Raised when a fare cannot be quoted or paid."""


class InsufficientPayment(FareError):
    """Raised when the inserted money does not cover the total."""

    def __init__(self, total: float, paid: float) -> None:
        super().__init__(NOT_ENOUGH_COINS)
        self.total = total
        self.paid = paid

    @property
    def shortfall(self) -> float:
        """How much more money is needed."""
        return self.total - self.paid


@dataclass(frozen=True)
class Quote:
    """A priced journey for a number of tickets."""

    start: str
    end: str
    count: int
    distance: int
    unit_price: int

    @property
    def total(self) -> int:
        """Price of all tickets together."""
        return self.unit_price * self.count


def simulated_distance(start: str, end: str) -> int:
    """Stand-in distance between two stations, derived from their names."""
    return abs(len(start) - len(end)) + _DISTANCE_OFFSET


def unit_price(distance: int) -> int:
    """Price of one ticket for the given distance."""
    for limit, price in _FARE_BANDS:
        if distance <= limit:
            return price
    return _TOP_FARE


def quote(start: str, end: str, count: int) -> Quote:
    """Price ``count`` tickets from ``start`` to ``end``."""
    start = start.strip()
    end = end.strip()
    if not start or not end:
        raise FareError(MISSING_STATIONS)
    if isinstance(count, bool) or not isinstance(count, int):
        raise FareError(f"ticket count must be an integer, not {count!r}")
    if not MIN_TICKETS <= count <= MAX_TICKETS:
        raise FareError(
            f"ticket count must be between {MIN_TICKETS} and {MAX_TICKETS}"
        )
    distance = simulated_distance(start, end)
    return Quote(start, end, count, distance, unit_price(distance))


def make_change(total: float, paid: float) -> float:
    """Return the change due when ``paid`` is inserted for ``total``."""
    if total <= 0:
        raise FareError(NO_PRICE_YET)
    if paid < total:
        raise InsufficientPayment(total, paid)
    return paid - total