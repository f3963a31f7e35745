"""Payment methods and receipts."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from .base import Entity
from .people import Patient


class PaymentMethod(ABC):
    """A way of turning a bill total into the amount to be paid."""

    @abstractmethod
    def process_payment(self, amount: float) -> float:
        """Return the amount the payer owes for ``amount``."""


class NormalPayment(PaymentMethod):
    """Payment of the full amount."""

    def process_payment(self, amount: float) -> float:
        return amount


class InsurancePayment(PaymentMethod):
    """Payment reduced by the insurance coverage percentage."""

    def __init__(self, coverage_percent: float = 0.0) -> None:
        self.coverage_percent = coverage_percent

    def process_payment(self, amount: float) -> float:
        return amount * (100 - self.coverage_percent) / 100


def payment_method_for(patient: Patient) -> PaymentMethod:
    """Choose insurance payment if the patient holds a valid card."""
    card = patient.insurance_card
    if card is not None and card.is_valid():
        return InsurancePayment(card.coverage_percent)
    return NormalPayment()


@dataclass
class Receipt(Entity):
    """A receipt for a medical record's total price."""

    record_id: str = ""
    total_price: float = 0.0
    status: str = "false"
    created_date: date = field(default_factory=date.today)
    payment_method: PaymentMethod | None = field(
        default=None, compare=False, repr=False
    )

    def set_payment_method(self, method: PaymentMethod) -> None:
        """Choose how the total is to be paid."""
        self.payment_method = method

    def process_payment(self) -> float:
        """Return the amount due; raises RuntimeError if no method is set."""
        if self.payment_method is None:
            raise RuntimeError("No payment method has been set yet")
        return self.payment_method.process_payment(self.total_price)

    def clone(self) -> Receipt:
        """Return a copy without the payment method."""
        method, self.payment_method = self.payment_method, None
        try:
            return copy.deepcopy(self)
        finally:
            self.payment_method = method