from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from returns.result import Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.domain.model.simple_types import Price


class ShippingCostCalculator(Protocol):
    async def calculate_shipping_cost(
        self, priced_order: PricedOrder
    ) -> Result[Price, PlaceOrderError]: ...


CalculateShippingCost = Callable[[PricedOrder], Awaitable[Result[Price, PlaceOrderError]]]
