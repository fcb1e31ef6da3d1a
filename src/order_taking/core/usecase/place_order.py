from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any

import structlog
from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.events import PlaceOrderEvent
from order_taking.core.domain.service.events import create_events
from order_taking.core.ports.inbound.place_order import (
    PlaceOrderWorkflow,
    UnvalidatedOrder,
)
from order_taking.core.ports.outbound.acknowledgment import (
    CreateAcknowledgmentLetter,
    SendOrderAcknowledgement,
)
from order_taking.core.ports.outbound.address import CheckAddressExists
from order_taking.core.ports.outbound.catalog import CheckProductExists, GetProductPrice
from order_taking.core.ports.outbound.shipping import CalculateShippingCost
from order_taking.core.usecase.steps import (
    acknowledge_order,
    add_shipping_info_to_order,
    price_order,
    validate_order,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlaceOrderDeps:
    check_product_exists: CheckProductExists
    check_address_exists: CheckAddressExists
    get_product_price: GetProductPrice
    calculate_shipping_cost: CalculateShippingCost
    create_acknowledgment_letter: CreateAcknowledgmentLetter
    send_order_acknowledgement: SendOrderAcknowledgement


def place_order(
    check_product_exists: CheckProductExists,
    check_address_exists: CheckAddressExists,
    get_product_price: GetProductPrice,
    calculate_shipping_cost: CalculateShippingCost,
    create_acknowledgment_letter: CreateAcknowledgmentLetter,
    send_order_acknowledgement: SendOrderAcknowledgement,
) -> PlaceOrderWorkflow:
    """
    Configure the workflow with its collaborators.

    The returned callable takes an UnvalidatedOrder and resolves to either the
    ordered event list or the first failure raised by any step.
    """
    deps = PlaceOrderDeps(
        check_product_exists=check_product_exists,
        check_address_exists=check_address_exists,
        get_product_price=get_product_price,
        calculate_shipping_cost=calculate_shipping_cost,
        create_acknowledgment_letter=create_acknowledgment_letter,
        send_order_acknowledgement=send_order_acknowledgement,
    )
    return partial(run_place_order, deps)


async def run_place_order(
    deps: PlaceOrderDeps, unvalidated_order: UnvalidatedOrder
) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
    log = logger.bind(order_id=unvalidated_order.order_id)

    validated = await validate_order(
        deps.check_product_exists, deps.check_address_exists, unvalidated_order
    )
    if isinstance(validated, Failure):
        return _abort(log, "validate_order", validated)

    priced = await price_order(deps.get_product_price, validated.unwrap())
    if isinstance(priced, Failure):
        return _abort(log, "price_order", priced)

    shipped = await add_shipping_info_to_order(
        deps.calculate_shipping_cost, priced.unwrap()
    )
    if isinstance(shipped, Failure):
        return _abort(log, "add_shipping_info_to_order", shipped)

    acknowledged = await acknowledge_order(
        deps.create_acknowledgment_letter,
        deps.send_order_acknowledgement,
        shipped.unwrap(),
    )
    if isinstance(acknowledged, Failure):
        return _abort(log, "acknowledge_order", acknowledged)

    events = create_events(shipped.unwrap(), acknowledged.unwrap())
    log.info("Order placed", events=[event.event_type for event in events])
    return Success(events)


def _abort(log: Any, step: str, failure: Failure) -> Failure:
    err = failure.failure()
    log.warning(
        "Place order workflow failed",
        step=step,
        error_type=type(err).__name__,
        error=str(err),
    )
    return failure
