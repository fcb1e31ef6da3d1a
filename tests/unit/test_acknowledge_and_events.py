from __future__ import annotations

from decimal import Decimal

import pytest
from returns.maybe import Nothing, Some
from returns.result import Failure, Success
from structlog.testing import capture_logs

from order_taking.core.domain.model.errors import LetterCreationError, SendError
from order_taking.core.domain.model.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    ShippableOrderPlaced,
)
from order_taking.core.domain.model.order import (
    Letter,
    PricedOrder,
    PricedOrderLine,
    PricedOrderWithShipping,
    SendResult,
    ShippingInfo,
    ShippingMethod,
)
from order_taking.core.domain.model.simple_types import OrderId, OrderLineId, Price
from order_taking.core.domain.service.events import create_events
from order_taking.core.usecase.steps import acknowledge_order


@pytest.fixture
def shipped_order() -> PricedOrderWithShipping:
    priced = PricedOrder.from_lines(
        OrderId("O1"),
        [
            PricedOrderLine(OrderLineId("L1"), Price.of("5.00")),
            PricedOrderLine(OrderLineId("L2"), Price.of("3.00")),
        ],
    )
    return PricedOrderWithShipping(
        priced_order=priced,
        shipping=ShippingInfo(method=ShippingMethod.POSTAL, price=Price.of("2.00")),
    )


@pytest.mark.asyncio
async def test_sent_acknowledgment_yields_order_id(letters, sender, shipped_order) -> None:
    result = await acknowledge_order(
        letters.create_acknowledgment_letter,
        sender.send_order_acknowledgement,
        shipped_order,
    )

    assert result == Success(Some(OrderId("O1")))
    assert letters.calls == [shipped_order]
    assert sender.calls[0].letter == Letter("Thanks for order O1")
    assert sender.calls[0].order_id == OrderId("O1")


@pytest.mark.asyncio
async def test_not_sent_is_a_soft_outcome(letters, sender, shipped_order) -> None:
    sender.outcome = SendResult.NOT_SENT

    result = await acknowledge_order(
        letters.create_acknowledgment_letter,
        sender.send_order_acknowledgement,
        shipped_order,
    )

    assert result == Success(Nothing)


@pytest.mark.asyncio
async def test_letter_failure_aborts_before_sending(letters, sender, shipped_order) -> None:
    letters.fail = True

    result = await acknowledge_order(
        letters.create_acknowledgment_letter,
        sender.send_order_acknowledgement,
        shipped_order,
    )

    assert result == Failure(LetterCreationError("letter generation failed"))
    assert sender.calls == []


@pytest.mark.asyncio
async def test_transport_failure_is_an_error_not_not_sent(letters, sender, shipped_order) -> None:
    sender.fail = True

    result = await acknowledge_order(
        letters.create_acknowledgment_letter,
        sender.send_order_acknowledgement,
        shipped_order,
    )

    assert result == Failure(SendError("smtp unreachable"))


@pytest.mark.asyncio
async def test_plain_string_outcome_counts_as_sent(letters, sender, shipped_order) -> None:
    sender.outcome = "SENT"

    result = await acknowledge_order(
        letters.create_acknowledgment_letter,
        sender.send_order_acknowledgement,
        shipped_order,
    )

    assert result == Success(Some(OrderId("O1")))


@pytest.mark.asyncio
async def test_not_sent_is_logged(letters, sender, shipped_order) -> None:
    sender.outcome = SendResult.NOT_SENT

    with capture_logs() as logs:
        await acknowledge_order(
            letters.create_acknowledgment_letter,
            sender.send_order_acknowledgement,
            shipped_order,
        )

    assert logs == [
        {
            "event": "Acknowledgment handled",
            "log_level": "debug",
            "order_id": "O1",
            "sent": False,
            "ok": True,
        }
    ]


def test_events_with_acknowledgment(shipped_order) -> None:
    events = create_events(shipped_order, Some(OrderId("O1")))

    assert events == [
        AcknowledgmentSent(order_id=OrderId("O1")),
        BillableOrderPlaced(order_id=OrderId("O1"), amount_to_bill=Price.of("8.00")),
        ShippableOrderPlaced(order_id=OrderId("O1")),
    ]


def test_events_without_acknowledgment(shipped_order) -> None:
    events = create_events(shipped_order, Nothing)

    assert events == [
        BillableOrderPlaced(order_id=OrderId("O1"), amount_to_bill=Price.of("8.00")),
        ShippableOrderPlaced(order_id=OrderId("O1")),
    ]
    assert not any(isinstance(event, AcknowledgmentSent) for event in events)


def test_billing_event_excludes_shipping_cost(shipped_order) -> None:
    billing = create_events(shipped_order, Nothing)[0]

    assert isinstance(billing, BillableOrderPlaced)
    assert billing.amount_to_bill.amount == Decimal("8.00")


def test_event_types_are_tagged() -> None:
    assert AcknowledgmentSent.event_type == "acknowledgment_sent"
    assert BillableOrderPlaced.event_type == "billable_order_placed"
    assert ShippableOrderPlaced.event_type == "shippable_order_placed"
