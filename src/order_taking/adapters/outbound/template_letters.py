from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import LetterCreationError, PlaceOrderError
from order_taking.core.domain.model.order import Letter, PricedOrderWithShipping
from order_taking.core.ports.outbound.acknowledgment import AcknowledgmentLetterWriter

DEFAULT_TEMPLATE = (
    "Thank you for your order {order_id}.\n"
    "Lines: {line_count}\n"
    "Amount to bill: {amount_to_bill}\n"
    "Shipping ({shipping_method}): {shipping_cost}\n"
)


@dataclass
class TemplateLetterWriter(AcknowledgmentLetterWriter):
    template: str = DEFAULT_TEMPLATE

    async def create_acknowledgment_letter(
        self, order: PricedOrderWithShipping
    ) -> Result[Letter, PlaceOrderError]:
        try:
            content = self.template.format(
                order_id=order.order_id.value,
                line_count=len(order.priced_order.lines),
                amount_to_bill=order.priced_order.amount_to_bill.value.amount,
                shipping_method=order.shipping.method.value,
                shipping_cost=order.shipping.price.amount,
            )
        except (KeyError, IndexError, ValueError) as exc:
            return Failure(LetterCreationError(f"letter template is invalid: {exc!r}"))
        return Success(Letter(content))
