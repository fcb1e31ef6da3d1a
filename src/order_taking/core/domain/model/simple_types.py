from __future__ import annotations

import operator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import reduce
from typing import Iterable

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class OrderId:
    value: str


@dataclass(frozen=True)
class OrderLineId:
    value: str


@dataclass(frozen=True)
class ProductCode:
    value: str


@dataclass(frozen=True)
class Address:
    value: str


@dataclass(frozen=True)
class Price:
    amount: Decimal

    @staticmethod
    def of(amount: Decimal | int | float | str) -> "Price":
        dec = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return Price(dec)

    @staticmethod
    def zero() -> "Price":
        return Price.of(0)

    def __add__(self, other: "Price") -> "Price":
        return Price(self.amount + other.amount)


@dataclass(frozen=True)
class BillingAmount:
    value: Price

    @staticmethod
    def sum_prices(prices: Iterable[Price]) -> "BillingAmount":
        return BillingAmount(reduce(operator.add, prices, Price.zero()))
