from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceOrderError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class PricingError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class ShippingError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class LetterCreationError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class SendError(PlaceOrderError):
    pass
