from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from order_taking.core.domain.model.simple_types import OrderId, Price


@dataclass(frozen=True)
class AcknowledgmentSent:
    event_type: ClassVar[str] = "acknowledgment_sent"

    order_id: OrderId


@dataclass(frozen=True)
class ShippableOrderPlaced:
    event_type: ClassVar[str] = "shippable_order_placed"

    order_id: OrderId


@dataclass(frozen=True)
class BillableOrderPlaced:
    event_type: ClassVar[str] = "billable_order_placed"

    order_id: OrderId
    amount_to_bill: Price


PlaceOrderEvent = Union[AcknowledgmentSent, ShippableOrderPlaced, BillableOrderPlaced]
