from __future__ import annotations

from decimal import Decimal

from fastapi import FastAPI

from order_taking.adapters.inbound.web import create_fastapi_app
from order_taking.adapters.outbound.flat_rate_shipping import FlatRateShipping
from order_taking.adapters.outbound.in_memory_addresses import InMemoryAddressBook
from order_taking.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from order_taking.adapters.outbound.logging_acknowledgments import (
    LoggingAcknowledgmentSender,
)
from order_taking.adapters.outbound.template_letters import TemplateLetterWriter
from order_taking.config import Settings
from order_taking.core.ports.inbound.place_order import PlaceOrderWorkflow
from order_taking.core.usecase.place_order import place_order
from order_taking.utils.logging import configure_logging

DEMO_PRICES = {
    "W1234": Decimal("5.00"),
    "W5678": Decimal("7.50"),
    "G123": Decimal("3.00"),
}


def build_workflow(settings: Settings | None = None) -> PlaceOrderWorkflow:
    settings = settings or Settings()
    catalog = InMemoryProductCatalog(prices_by_code=dict(DEMO_PRICES))
    addresses = InMemoryAddressBook()
    shipping = FlatRateShipping(
        base_cost=settings.shipping_base_cost,
        per_line_cost=settings.shipping_per_line_cost,
    )
    letters = TemplateLetterWriter()
    sender = LoggingAcknowledgmentSender()

    # collaborators are bound once; the workflow is applied per order
    return place_order(
        check_product_exists=catalog.check_product_exists,
        check_address_exists=addresses.check_address_exists,
        get_product_price=catalog.get_product_price,
        calculate_shipping_cost=shipping.calculate_shipping_cost,
        create_acknowledgment_letter=letters.create_acknowledgment_letter,
        send_order_acknowledgement=sender.send_order_acknowledgement,
    )


def build_app(settings: Settings | None = None) -> FastAPI:
    return create_fastapi_app(build_workflow(settings))


def create_asgi_app() -> FastAPI:
    settings = Settings()
    configure_logging(settings.log_level, json=settings.log_json)
    return build_app(settings)
