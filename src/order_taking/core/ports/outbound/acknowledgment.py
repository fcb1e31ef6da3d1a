from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from returns.result import Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.order import (
    Acknowledgment,
    Letter,
    PricedOrderWithShipping,
    SendResult,
)


class AcknowledgmentLetterWriter(Protocol):
    async def create_acknowledgment_letter(
        self, order: PricedOrderWithShipping
    ) -> Result[Letter, PlaceOrderError]: ...


class AcknowledgmentSender(Protocol):
    """NOT_SENT is a business outcome; a Failure means the transport broke."""

    async def send_order_acknowledgement(
        self, acknowledgment: Acknowledgment
    ) -> Result[SendResult, PlaceOrderError]: ...


CreateAcknowledgmentLetter = Callable[
    [PricedOrderWithShipping], Awaitable[Result[Letter, PlaceOrderError]]
]
SendOrderAcknowledgement = Callable[
    [Acknowledgment], Awaitable[Result[SendResult, PlaceOrderError]]
]
