from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import (
    PlaceOrderError,
    PricingError,
    ValidationError,
)
from order_taking.core.domain.model.simple_types import Price, ProductCode
from order_taking.core.ports.outbound.catalog import PriceList, ProductCodeChecker


@dataclass
class InMemoryProductCatalog(ProductCodeChecker, PriceList):
    prices_by_code: Dict[str, Decimal]

    async def check_product_exists(
        self, product_code: ProductCode
    ) -> Result[None, PlaceOrderError]:
        if product_code.value not in self.prices_by_code:
            return Failure(ValidationError("Product does not exist"))
        return Success(None)

    async def get_product_price(
        self, product_code: ProductCode
    ) -> Result[Price, PlaceOrderError]:
        amount = self.prices_by_code.get(product_code.value)
        if amount is None:
            return Failure(PricingError(f"no price for product {product_code.value}"))
        return Success(Price.of(amount))
