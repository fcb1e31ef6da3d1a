from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from returns.result import Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.events import PlaceOrderEvent


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    order_line_id: str
    product_code: str


@dataclass(frozen=True)
class UnvalidatedOrder:
    order_id: str
    lines: Sequence[UnvalidatedOrderLine]
    shipping_address: str = ""


PlaceOrderWorkflow = Callable[
    [UnvalidatedOrder], Awaitable[Result[list[PlaceOrderEvent], PlaceOrderError]]
]
