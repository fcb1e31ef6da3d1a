from __future__ import annotations

from returns.maybe import Maybe

from order_taking.core.domain.model.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    PlaceOrderEvent,
    ShippableOrderPlaced,
)
from order_taking.core.domain.model.order import PricedOrder, PricedOrderWithShipping
from order_taking.core.domain.model.simple_types import OrderId


def create_acknowledgment_event(order_id: OrderId) -> PlaceOrderEvent:
    return AcknowledgmentSent(order_id=order_id)


def create_billing_event(priced_order: PricedOrder) -> PlaceOrderEvent:
    return BillableOrderPlaced(
        order_id=priced_order.order_id,
        amount_to_bill=priced_order.amount_to_bill.value,
    )


def create_shipping_event(priced_order: PricedOrder) -> PlaceOrderEvent:
    return ShippableOrderPlaced(order_id=priced_order.order_id)


def create_events(
    order: PricedOrderWithShipping,
    acknowledgment: Maybe[OrderId],
) -> list[PlaceOrderEvent]:
    """Acknowledgment (if any) first, then billing, then shipping."""
    acknowledgment_events: list[PlaceOrderEvent] = (
        acknowledgment.map(create_acknowledgment_event)
        .map(lambda event: [event])
        .value_or([])
    )
    billing_events = [create_billing_event(order.priced_order)]
    shipping_events = [create_shipping_event(order.priced_order)]
    return [*acknowledgment_events, *billing_events, *shipping_events]
