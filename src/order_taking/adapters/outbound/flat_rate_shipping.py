from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import PlaceOrderError, ShippingError
from order_taking.core.domain.model.order import PricedOrder
from order_taking.core.domain.model.simple_types import Price
from order_taking.core.ports.outbound.shipping import ShippingCostCalculator


@dataclass
class FlatRateShipping(ShippingCostCalculator):
    base_cost: Decimal = Decimal("2.00")
    per_line_cost: Decimal = Decimal("0.00")
    max_lines: int | None = None

    async def calculate_shipping_cost(
        self, priced_order: PricedOrder
    ) -> Result[Price, PlaceOrderError]:
        line_count = len(priced_order.lines)
        if self.max_lines is not None and line_count > self.max_lines:
            return Failure(
                ShippingError(f"cannot ship more than {self.max_lines} lines in one parcel")
            )
        return Success(Price.of(self.base_cost + self.per_line_cost * line_count))
