from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from order_taking.core.domain.model.simple_types import (
    Address,
    BillingAmount,
    OrderId,
    OrderLineId,
    Price,
    ProductCode,
)


@dataclass(frozen=True)
class ValidatedOrderLine:
    order_line_id: OrderLineId
    product_code: ProductCode


@dataclass(frozen=True)
class ValidatedOrder:
    order_id: OrderId
    shipping_address: Address
    lines: Tuple[ValidatedOrderLine, ...]


@dataclass(frozen=True)
class PricedOrderLine:
    order_line_id: OrderLineId
    line_price: Price


@dataclass(frozen=True)
class PricedOrder:
    order_id: OrderId
    amount_to_bill: BillingAmount
    lines: Tuple[PricedOrderLine, ...]

    @staticmethod
    def from_lines(order_id: OrderId, lines: Sequence[PricedOrderLine]) -> "PricedOrder":
        """The billing amount is always derived from the lines, never passed in."""
        priced_lines = tuple(lines)
        return PricedOrder(
            order_id=order_id,
            amount_to_bill=BillingAmount.sum_prices(ln.line_price for ln in priced_lines),
            lines=priced_lines,
        )


class ShippingMethod(str, Enum):
    POSTAL = "POSTAL"
    FEDEX = "FEDEX"


@dataclass(frozen=True)
class ShippingInfo:
    method: ShippingMethod
    price: Price


@dataclass(frozen=True)
class PricedOrderWithShipping:
    priced_order: PricedOrder
    shipping: ShippingInfo

    @property
    def order_id(self) -> OrderId:
        return self.priced_order.order_id


@dataclass(frozen=True)
class Letter:
    content: str


@dataclass(frozen=True)
class Acknowledgment:
    order_id: OrderId
    letter: Letter


class SendResult(str, Enum):
    SENT = "SENT"
    NOT_SENT = "NOT_SENT"
