"""Payment webhook routes."""

import secrets

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from civicfix.application.usecase.payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentResponse,
    ConfirmPaymentUseCase,
)
from civicfix.config import PaymentSettings
from civicfix.interface.error import domain_errors

router = APIRouter(prefix="/payments", tags=["payments"], route_class=DishkaRoute)


@router.post("/confirm", response_model=ConfirmPaymentResponse)
async def confirm_payment(
    request: ConfirmPaymentRequest,
    confirm_payment_use_case: FromDishka[ConfirmPaymentUseCase],
    payment_settings: FromDishka[PaymentSettings],
    x_webhook_secret: str | None = Header(default=None),
) -> ConfirmPaymentResponse:
    """Apply a payment confirmed by the payment processor.

    Authenticated by the shared secret in ``X-Webhook-Secret``. Redelivery
    of the same session id is acknowledged without side effects.
    """
    if not x_webhook_secret or not secrets.compare_digest(
        x_webhook_secret.encode(), payment_settings.webhook_secret.encode()
    ):
        logfire.warn("Payment webhook with bad secret", session_id=request.session_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook secret",
        )

    with domain_errors("Payment confirmation"):
        return await confirm_payment_use_case.execute(request)
