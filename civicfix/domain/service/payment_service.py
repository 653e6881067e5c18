"""Payment domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from civicfix.domain.error import ValidationError
from civicfix.domain.model import Payment
from civicfix.domain.repository import PaymentRepository
from civicfix.domain.value import PaymentKind

from .base import Service
from .issue_service import IssueService
from .user_service import UserService


class PaymentService(Service):
    """Domain service reacting to payments confirmed by the processor."""

    def __init__(
        self,
        payment_repository: PaymentRepository,
        issue_service: IssueService,
        user_service: UserService,
    ) -> None:
        """Initialize payment service.

        Args:
            payment_repository: Payment repository
            issue_service: Issue domain service
            user_service: User domain service
        """
        self.payment_repository = payment_repository
        self.issue_service = issue_service
        self.user_service = user_service

    async def confirm(self, payment: Payment) -> tuple[Payment, bool]:
        """Apply a confirmed payment exactly once.

        The payment record is written first so a concurrent redelivery fails on
        the unique session id before any effect is applied.

        Args:
            payment: Payment reported by the processor

        Returns:
            Tuple of (stored payment, applied). ``applied`` is False when the
            session id was already processed.

        Raises:
            NotFoundError: If the boosted issue or subscribing user is unknown
            ValidationError: If a concurrent delivery claimed the session id
        """
        with logfire.span(
            "payment_service.confirm",
            session_id=payment.session_id,
            kind=payment.kind.value,
            email=payment.email,
        ):
            existing = await self.payment_repository.find_by_session_id(
                payment.session_id
            )
            if existing:
                logfire.info(
                    "Payment already processed", session_id=payment.session_id
                )
                return existing, False

            # Fail on unknown targets before claiming the session id
            if payment.kind == PaymentKind.BOOST:
                await self.issue_service.get_by_id(payment.issue_id)
            else:
                await self.user_service.get_by_email(payment.email)

            try:
                saved = await self.payment_repository.save(payment)
            except IntegrityError:
                logfire.warn(
                    "Concurrent payment confirmation", session_id=payment.session_id
                )
                raise ValidationError("Payment is already being processed")

            if payment.kind == PaymentKind.BOOST:
                # issue_id presence is enforced by the Payment model
                await self.issue_service.boost(payment.issue_id, payment.email)
            else:
                await self.user_service.set_premium(payment.email)

            logfire.info(
                "Payment applied",
                session_id=payment.session_id,
                kind=payment.kind.value,
                amount=payment.amount,
            )
            return saved, True

    async def total_revenue(self) -> int:
        """Sum of all confirmed payments in minor units."""
        return await self.payment_repository.total_amount()
