from __future__ import annotations

import structlog
from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure, Result

from order_taking.core.domain.model.errors import PlaceOrderError
from order_taking.core.domain.model.order import (
    Acknowledgment,
    PricedOrder,
    PricedOrderLine,
    PricedOrderWithShipping,
    SendResult,
    ShippingInfo,
    ShippingMethod,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_taking.core.domain.model.simple_types import (
    Address,
    OrderId,
    OrderLineId,
    ProductCode,
)
from order_taking.core.domain.service.fan_out import collect_concurrently
from order_taking.core.domain.service.validation import validate_fields
from order_taking.core.ports.inbound.place_order import (
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from order_taking.core.ports.outbound.acknowledgment import (
    CreateAcknowledgmentLetter,
    SendOrderAcknowledgement,
)
from order_taking.core.ports.outbound.address import CheckAddressExists
from order_taking.core.ports.outbound.catalog import CheckProductExists, GetProductPrice
from order_taking.core.ports.outbound.shipping import CalculateShippingCost

logger = structlog.get_logger(__name__)


# ---- ValidateOrder ---------------------------------------------------------


async def to_validated_order_line(
    check_product_exists: CheckProductExists,
    unvalidated_line: UnvalidatedOrderLine,
) -> Result[ValidatedOrderLine, PlaceOrderError]:
    line = ValidatedOrderLine(
        order_line_id=OrderLineId(unvalidated_line.order_line_id),
        product_code=ProductCode(unvalidated_line.product_code),
    )
    checked = await check_product_exists(line.product_code)
    return checked.map(lambda _: line)


async def validate_order(
    check_product_exists: CheckProductExists,
    check_address_exists: CheckAddressExists,
    unvalidated_order: UnvalidatedOrder,
) -> Result[ValidatedOrder, PlaceOrderError]:
    fields = validate_fields(unvalidated_order)
    if isinstance(fields, Failure):
        return fields

    order_id = OrderId(unvalidated_order.order_id)
    address = Address(unvalidated_order.shipping_address)

    # address check rides along with the line checks; slot 0 is its result
    checked = await collect_concurrently(
        [
            check_address_exists(address),
            *(
                to_validated_order_line(check_product_exists, ln)
                for ln in unvalidated_order.lines
            ),
        ]
    )
    logger.debug(
        "Order lines checked",
        order_id=order_id.value,
        lines=len(unvalidated_order.lines),
        ok=not isinstance(checked, Failure),
    )
    return checked.map(
        lambda results: ValidatedOrder(
            order_id=order_id,
            shipping_address=address,
            lines=tuple(results[1:]),
        )
    )


# ---- PriceOrder ------------------------------------------------------------


async def to_priced_order_line(
    get_product_price: GetProductPrice,
    validated_line: ValidatedOrderLine,
) -> Result[PricedOrderLine, PlaceOrderError]:
    price = await get_product_price(validated_line.product_code)
    return price.map(
        lambda line_price: PricedOrderLine(
            order_line_id=validated_line.order_line_id,
            line_price=line_price,
        )
    )


async def price_order(
    get_product_price: GetProductPrice,
    validated_order: ValidatedOrder,
) -> Result[PricedOrder, PlaceOrderError]:
    lines = await collect_concurrently(
        to_priced_order_line(get_product_price, ln) for ln in validated_order.lines
    )
    logger.debug(
        "Order lines priced",
        order_id=validated_order.order_id.value,
        lines=len(validated_order.lines),
        ok=not isinstance(lines, Failure),
    )
    return lines.map(
        lambda priced_lines: PricedOrder.from_lines(validated_order.order_id, priced_lines)
    )


# ---- Shipping --------------------------------------------------------------


async def add_shipping_info_to_order(
    calculate_shipping_cost: CalculateShippingCost,
    priced_order: PricedOrder,
) -> Result[PricedOrderWithShipping, PlaceOrderError]:
    cost = await calculate_shipping_cost(priced_order)
    logger.debug(
        "Shipping cost calculated",
        order_id=priced_order.order_id.value,
        shipping_cost=cost.map(lambda price: str(price.amount)).value_or(None),
        ok=not isinstance(cost, Failure),
    )
    return cost.map(
        lambda price: PricedOrderWithShipping(
            priced_order=priced_order,
            shipping=ShippingInfo(method=ShippingMethod.POSTAL, price=price),
        )
    )


# ---- AcknowledgeOrder ------------------------------------------------------


def _to_acknowledgment_outcome(outcome: SendResult, order_id: OrderId) -> Maybe[OrderId]:
    if outcome == SendResult.SENT:
        return Some(order_id)
    return Nothing


async def acknowledge_order(
    create_acknowledgment_letter: CreateAcknowledgmentLetter,
    send_order_acknowledgement: SendOrderAcknowledgement,
    order: PricedOrderWithShipping,
) -> Result[Maybe[OrderId], PlaceOrderError]:
    letter = await create_acknowledgment_letter(order)
    if isinstance(letter, Failure):
        logger.debug("Acknowledgment letter failed", order_id=order.order_id.value)
        return letter

    acknowledgment = Acknowledgment(order_id=order.order_id, letter=letter.unwrap())
    sent = await send_order_acknowledgement(acknowledgment)
    logger.debug(
        "Acknowledgment handled",
        order_id=order.order_id.value,
        sent=sent.map(lambda result: result == SendResult.SENT).value_or(None),
        ok=not isinstance(sent, Failure),
    )
    return sent.map(lambda result: _to_acknowledgment_outcome(result, order.order_id))
