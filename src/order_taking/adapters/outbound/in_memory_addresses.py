from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import PlaceOrderError, ValidationError
from order_taking.core.domain.model.simple_types import Address
from order_taking.core.ports.outbound.address import AddressChecker


@dataclass
class InMemoryAddressBook(AddressChecker):
    # None accepts any non-blank address
    known_addresses: set[str] | None = None

    async def check_address_exists(self, address: Address) -> Result[None, PlaceOrderError]:
        street = address.value.strip()
        if not street:
            return Failure(ValidationError("Address does not exist"))
        if self.known_addresses is not None and street not in self.known_addresses:
            return Failure(ValidationError("Address does not exist"))
        return Success(None)
