from __future__ import annotations

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import PlaceOrderError, ValidationError
from order_taking.core.ports.inbound.place_order import UnvalidatedOrder


def validate_order_id(order: UnvalidatedOrder) -> Result[UnvalidatedOrder, PlaceOrderError]:
    if not order.order_id.strip():
        return Failure(ValidationError("order_id is required"))
    return Success(order)


def validate_lines(order: UnvalidatedOrder) -> Result[UnvalidatedOrder, PlaceOrderError]:
    for i, ln in enumerate(order.lines):
        if not ln.order_line_id.strip():
            return Failure(ValidationError(f"lines[{i}].order_line_id is required"))
        if not ln.product_code.strip():
            return Failure(ValidationError(f"lines[{i}].product_code is required"))
    return Success(order)


def validate_fields(order: UnvalidatedOrder) -> Result[UnvalidatedOrder, PlaceOrderError]:
    """Checks the raw strings only; existence checks belong to the collaborators."""
    return Success(order).bind(validate_order_id).bind(validate_lines)
