"""
Business logic for payments.

Payments are recorded against an existing user and appointment with
status ``pending``.  Settlement with a payment provider is not part
of this service.
"""

import logging
from typing import List

from ..schemas.payment import Payment, PaymentCreate, PaymentStatus
from .base import BaseService
from .validation import ensure_exists, require_fields, validate_positive

logger = logging.getLogger(__name__)


class PaymentService(BaseService):
    """Service for recording payments."""

    def make_payment(self, data: PaymentCreate) -> Payment:
        """Record a new payment.

        The amount must be a positive whole number.  The paying user
        and the appointment must both exist; otherwise ``NotFound``
        names the missing id.
        """
        require_fields(data, "user_id", "appointment_id", "amount")
        validate_positive(data.amount, "Payment amount must be positive")

        with self.repositories.lock:
            ensure_exists(self.repositories.users, data.user_id, "User")
            ensure_exists(self.repositories.appointments, data.appointment_id, "Appointment")
            payment = Payment(
                **self._stamp(),
                user_id=data.user_id,
                appointment_id=data.appointment_id,
                amount=data.amount,
                status=PaymentStatus.PENDING,
            )
            self.repositories.payments.insert(payment.id, payment)
        logger.info(
            "Payment %s of %s recorded for appointment %s",
            payment.id,
            payment.amount,
            payment.appointment_id,
        )
        return payment

    def list_payments(self) -> List[Payment]:
        """List payments in the order they were made."""
        return self._listing(self.repositories.payments.values(), "No payments found")
