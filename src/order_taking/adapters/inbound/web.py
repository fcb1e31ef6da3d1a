from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from order_taking.core.domain.model.errors import (
    LetterCreationError,
    PlaceOrderError,
    PricingError,
    SendError,
    ShippingError,
    ValidationError,
)
from order_taking.core.domain.model.events import BillableOrderPlaced, PlaceOrderEvent
from order_taking.core.ports.inbound.place_order import (
    PlaceOrderWorkflow,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)

logger = structlog.get_logger(__name__)


# ---- HTTP DTOs -------------------------------------------------------------


class OrderLineForm(BaseModel):
    order_line_id: str = Field(examples=["L1"])
    product_code: str = Field(examples=["P1"])


class OrderForm(BaseModel):
    order_id: str = Field(examples=["O1"])
    shipping_address: str = Field(default="", examples=["1 Main Street"])
    lines: list[OrderLineForm] = Field(default_factory=list)


class PlaceOrderEventOut(BaseModel):
    type: str
    order_id: str
    amount_to_bill: str | None = None


class PlaceOrderResponse(BaseModel):
    events: list[PlaceOrderEventOut]


class ErrorResponse(BaseModel):
    type: str
    message: str


# ---- Mapping helpers -------------------------------------------------------


def to_unvalidated_order(form: OrderForm) -> UnvalidatedOrder:
    return UnvalidatedOrder(
        order_id=form.order_id,
        shipping_address=form.shipping_address,
        lines=tuple(
            UnvalidatedOrderLine(
                order_line_id=ln.order_line_id, product_code=ln.product_code
            )
            for ln in form.lines
        ),
    )


def to_event_out(event: PlaceOrderEvent) -> PlaceOrderEventOut:
    amount = None
    if isinstance(event, BillableOrderPlaced):
        amount = str(event.amount_to_bill.amount)
    return PlaceOrderEventOut(
        type=event.event_type, order_id=event.order_id.value, amount_to_bill=amount
    )


def to_http_error(err: PlaceOrderError) -> tuple[int, dict]:
    if isinstance(err, ValidationError):
        status = 400
    elif isinstance(err, (PricingError, ShippingError)):
        status = 422
    elif isinstance(err, SendError):
        status = 503
    elif isinstance(err, LetterCreationError):
        status = 500
    else:
        status = 500
    return status, ErrorResponse(type=type(err).__name__, message=str(err)).model_dump()


# ---- App factory -----------------------------------------------------------


def create_fastapi_app(workflow: PlaceOrderWorkflow) -> FastAPI:
    app = FastAPI(title="order_taking")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(type="RequestValidationError", message="invalid request")
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error while placing order", exc_info=exc)
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/orders", status_code=201)
    async def place_order_endpoint(form: OrderForm) -> Any:
        result = await workflow(to_unvalidated_order(form))
        if isinstance(result, Success):
            events = [to_event_out(event) for event in result.unwrap()]
            return PlaceOrderResponse(events=events).model_dump()
        status, body = to_http_error(result.failure())
        return JSONResponse(status_code=status, content=body)

    return app
