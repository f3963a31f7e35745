"""Catalogue entities: medicines and departments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .base import Entity


@dataclass
class Medicine(Entity):
    """A medicine held in stock."""

    unit: str = ""
    price_per_unit: float = 0.0
    quantity: int = 0


@dataclass
class Department(Entity):
    """A hospital department."""

    head_id: str = ""
    foundation_date: date = field(default_factory=date.today)
    description: str = ""