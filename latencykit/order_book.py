"""A limit order book that matches by price-time priority."""

from __future__ import annotations

import dataclasses
import enum
from collections import deque
from dataclasses import dataclass

from sortedcontainers import SortedDict


class Side(enum.Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass
class Order:
    """A limit order; ``price`` is in ticks."""

    id: int
    side: Side
    price: int
    qty: int


@dataclass(frozen=True)
class Fill:
    """A trade between an incoming order and a resting one."""

    order_id: int
    match_id: int
    price: int
    qty: int


class OrderBook:
    """Bids and asks keyed by price, each level a FIFO queue of resting orders."""

    def __init__(self) -> None:
        self._bids: SortedDict = SortedDict()
        self._asks: SortedDict = SortedDict()

    def add_order(self, order: Order) -> list[Fill]:
        """Match ``order`` against the book, rest any remainder, return the fills.

        The caller's order object is left untouched.
        """
        incoming = dataclasses.replace(order)
        if incoming.side is Side.BUY:
            fills = self._match(incoming, self._asks, 0, lambda best: best <= incoming.price)
            book = self._bids
        else:
            fills = self._match(incoming, self._bids, -1, lambda best: best >= incoming.price)
            book = self._asks
        if incoming.qty > 0:
            book.setdefault(incoming.price, deque()).append(incoming)
        return fills

    def best_bid(self) -> int:
        """Highest bid price, or 0 when there are no bids."""
        return self._bids.peekitem(-1)[0] if self._bids else 0

    def best_ask(self) -> int:
        """Lowest ask price, or 0 when there are no asks."""
        return self._asks.peekitem(0)[0] if self._asks else 0

    @staticmethod
    def _match(incoming: Order, opposite: SortedDict, best_index: int, crosses) -> list[Fill]:
        fills: list[Fill] = []
        while incoming.qty > 0 and opposite:
            price, level = opposite.peekitem(best_index)
            if not crosses(price):
                break
            while incoming.qty > 0 and level:
                resting = level[0]
                qty = min(incoming.qty, resting.qty)
                fills.append(Fill(incoming.id, resting.id, resting.price, qty))
                incoming.qty -= qty
                resting.qty -= qty
                if resting.qty == 0:
                    level.popleft()
            if not level:
                del opposite[price]
        return fills