"""Payment use cases."""

from .confirm_payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentResponse,
    ConfirmPaymentUseCase,
)

__all__ = [
    "ConfirmPaymentRequest",
    "ConfirmPaymentResponse",
    "ConfirmPaymentUseCase",
]
