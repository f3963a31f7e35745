"""Base entity types shared by all domain objects."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar

_T = TypeVar("_T", bound="Entity")


@dataclass
class Entity:
    """An object identified by an id and carrying a display name."""

    id: str = ""
    name: str = ""

    def clone(self: _T) -> _T:
        """Return an independent deep copy."""
        return copy.deepcopy(self)


@dataclass
class BillableComponent(Entity, ABC):
    """An entity that contributes a fee to a bill."""

    @abstractmethod
    def calculate_fee(self) -> float:
        """Return the fee this component adds to a bill."""