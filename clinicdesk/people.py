"""People: patients, staff and their insurance."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import date

from .base import Entity


@dataclass
class Person(Entity):
    """A person with contact details and a date of birth."""

    gender: str = ""
    address: str = ""
    phone: str = ""
    dob: date = field(default_factory=date.today)

    def age(self) -> int:
        """Return the difference between the current year and the birth year."""
        return date.today().year - self.dob.year


@dataclass
class Employee(Person):
    """A member of staff."""

    education: str = ""
    base_salary: float = 0.0


@dataclass
class Doctor(Employee):
    """A doctor with a specialty and a practising licence."""

    specialty: str = ""
    license: str = ""


@dataclass
class Nurse(Employee):
    """A nurse with an assigned duty."""

    duty: str = ""


@dataclass
class HealthInsurance(Entity):
    """A health insurance card covering a percentage of costs."""

    issue_date: date = field(default_factory=date.today)
    expiry_date: date = field(default_factory=date.today)
    coverage_percent: float = 0.0

    def is_valid(self) -> bool:
        """Return True if the card expires strictly after today."""
        return self.expiry_date > date.today()


@dataclass
class Patient(Person):
    """A patient with symptoms and an optional insurance card."""

    symptoms: list[str] = field(default_factory=list)
    insurance_card: HealthInsurance | None = None

    def clone(self) -> Patient:
        """Return a deep copy, including symptoms and insurance card."""
        return copy.deepcopy(self)