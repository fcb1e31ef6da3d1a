from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest
from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import (
    LetterCreationError,
    PlaceOrderError,
    PricingError,
    SendError,
    ShippingError,
    ValidationError,
)
from order_taking.core.domain.model.order import (
    Acknowledgment,
    Letter,
    PricedOrder,
    PricedOrderWithShipping,
    SendResult,
)
from order_taking.core.domain.model.simple_types import Address, Price, ProductCode
from order_taking.core.ports.inbound.place_order import (
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_taking.core.usecase.place_order import place_order


class FakeCatalog:
    def __init__(self) -> None:
        self.prices: dict[str, Decimal] = {}
        self.missing: set[str] = set()
        self.unpriced: set[str] = set()
        self.delays: dict[str, float] = {}
        self.checked: list[str] = []
        self.priced: list[str] = []
        self.completed: list[str] = []
        self.cancelled: list[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def check_product_exists(self, product_code: ProductCode) -> Result[None, PlaceOrderError]:
        code = product_code.value
        self.checked.append(code)
        await self._pause(code)
        if code in self.missing:
            return Failure(ValidationError("Product does not exist"))
        return Success(None)

    async def get_product_price(self, product_code: ProductCode) -> Result[Price, PlaceOrderError]:
        code = product_code.value
        self.priced.append(code)
        await self._pause(code)
        if code in self.unpriced:
            return Failure(PricingError(f"no price for product {code}"))
        return Success(Price.of(self.prices.get(code, Decimal("1.00"))))

    async def _pause(self, code: str) -> None:
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(code, 0))
        except asyncio.CancelledError:
            self.cancelled.append(code)
            raise
        finally:
            self.in_flight -= 1
        self.completed.append(code)


class FakeAddressBook:
    def __init__(self) -> None:
        self.valid = True
        self.checked: list[Address] = []

    async def check_address_exists(self, address: Address) -> Result[None, PlaceOrderError]:
        self.checked.append(address)
        if not self.valid:
            return Failure(ValidationError("Address does not exist"))
        return Success(None)


class FakeShipping:
    def __init__(self) -> None:
        self.cost = Decimal("2.00")
        self.fail = False
        self.calls: list[PricedOrder] = []

    async def calculate_shipping_cost(self, priced_order: PricedOrder) -> Result[Price, PlaceOrderError]:
        self.calls.append(priced_order)
        if self.fail:
            return Failure(ShippingError("shipping cost unavailable"))
        return Success(Price.of(self.cost))


class FakeLetters:
    def __init__(self) -> None:
        self.fail = False
        self.calls: list[PricedOrderWithShipping] = []

    async def create_acknowledgment_letter(
        self, order: PricedOrderWithShipping
    ) -> Result[Letter, PlaceOrderError]:
        self.calls.append(order)
        if self.fail:
            return Failure(LetterCreationError("letter generation failed"))
        return Success(Letter(content=f"Thanks for order {order.order_id.value}"))


class FakeSender:
    def __init__(self) -> None:
        self.outcome = SendResult.SENT
        self.fail = False
        self.calls: list[Acknowledgment] = []

    async def send_order_acknowledgement(
        self, acknowledgment: Acknowledgment
    ) -> Result[SendResult, PlaceOrderError]:
        self.calls.append(acknowledgment)
        if self.fail:
            return Failure(SendError("smtp unreachable"))
        return Success(self.outcome)


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def address_book() -> FakeAddressBook:
    return FakeAddressBook()


@pytest.fixture
def shipping() -> FakeShipping:
    return FakeShipping()


@pytest.fixture
def letters() -> FakeLetters:
    return FakeLetters()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def workflow(catalog, address_book, shipping, letters, sender):
    return place_order(
        check_product_exists=catalog.check_product_exists,
        check_address_exists=address_book.check_address_exists,
        get_product_price=catalog.get_product_price,
        calculate_shipping_cost=shipping.calculate_shipping_cost,
        create_acknowledgment_letter=letters.create_acknowledgment_letter,
        send_order_acknowledgement=sender.send_order_acknowledgement,
    )


def make_order(order_id: str = "O1", *codes: str, address: str = "1 Main Street") -> UnvalidatedOrder:
    codes = codes or ("P1", "P2")
    return UnvalidatedOrder(
        order_id=order_id,
        shipping_address=address,
        lines=tuple(
            UnvalidatedOrderLine(order_line_id=f"L{i}", product_code=code)
            for i, code in enumerate(codes, start=1)
        ),
    )


@pytest.fixture
def order_factory():
    return make_order
