from __future__ import annotations

from dataclasses import dataclass, field

import structlog
from returns.result import Failure, Result, Success

from order_taking.core.domain.model.errors import PlaceOrderError, SendError
from order_taking.core.domain.model.order import Acknowledgment, SendResult
from order_taking.core.ports.outbound.acknowledgment import AcknowledgmentSender

logger = structlog.get_logger(__name__)


@dataclass
class LoggingAcknowledgmentSender(AcknowledgmentSender):
    """Writes acknowledgments to the log instead of a mail server."""

    opted_out: set[str] = field(default_factory=set)
    fail: bool = False
    outbox: list[Acknowledgment] = field(default_factory=list)

    async def send_order_acknowledgement(
        self, acknowledgment: Acknowledgment
    ) -> Result[SendResult, PlaceOrderError]:
        if self.fail:
            return Failure(SendError(message="mail transport is down"))

        order_id = acknowledgment.order_id.value
        if order_id in self.opted_out:
            logger.info("Acknowledgment not sent", order_id=order_id, reason="opted_out")
            return Success(SendResult.NOT_SENT)

        self.outbox.append(acknowledgment)
        logger.info(
            "Acknowledgment sent",
            order_id=order_id,
            letter=acknowledgment.letter.content,
        )
        return Success(SendResult.SENT)
