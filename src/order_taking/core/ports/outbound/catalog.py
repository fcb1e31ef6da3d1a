from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from returns.result import Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.simple_types import Price, ProductCode


class ProductCodeChecker(Protocol):
    async def check_product_exists(
        self, product_code: ProductCode
    ) -> Result[None, PlaceOrderError]: ...


class PriceList(Protocol):
    async def get_product_price(
        self, product_code: ProductCode
    ) -> Result[Price, PlaceOrderError]: ...


CheckProductExists = Callable[[ProductCode], Awaitable[Result[None, PlaceOrderError]]]
GetProductPrice = Callable[[ProductCode], Awaitable[Result[Price, PlaceOrderError]]]
