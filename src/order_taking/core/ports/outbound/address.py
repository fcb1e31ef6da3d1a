from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from returns.result import Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.simple_types import Address


class AddressChecker(Protocol):
    async def check_address_exists(
        self, address: Address
    ) -> Result[None, PlaceOrderError]: ...


CheckAddressExists = Callable[[Address], Awaitable[Result[None, PlaceOrderError]]]
