"""In-memory repositories and the managers that query them."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .base import Entity
from .catalog import Department, Medicine
from .people import Employee, Patient

_T = TypeVar("_T", bound=Entity)


class Op(Enum):
    """Comparison applied by a filter between a field and a value."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    CONTAINS = "contains"


_COMPARATORS: dict[Op, Callable[[Any, Any], bool]] = {
    Op.EQ: operator.eq,
    Op.NE: operator.ne,
    Op.LT: operator.lt,
    Op.LE: operator.le,
    Op.GT: operator.gt,
    Op.GE: operator.ge,
    Op.CONTAINS: lambda field_value, value: value in field_value,
}


@dataclass(frozen=True)
class Filter:
    """A condition on one field of an entity.

    ``getter`` is either an attribute name or a callable taking the entity.
    """

    getter: Callable[[Any], Any] | str
    value: Any
    op: Op = Op.EQ

    def matches(self, item: Any) -> bool:
        """Return whether ``item`` satisfies the condition."""
        if isinstance(self.getter, str):
            field_value = getattr(item, self.getter)
        else:
            field_value = self.getter(item)
        return _COMPARATORS[self.op](field_value, self.value)


class InMemoryRepository(Generic[_T]):
    """A collection of entities keyed by id, kept in insertion order."""

    def __init__(self, items: Iterable[_T] = ()) -> None:
        self._items: dict[str, _T] = {}
        for item in items:
            self.add(item)

    def add(self, item: _T) -> None:
        """Store ``item``; raises ValueError if its id is already present."""
        if item.id in self._items:
            raise ValueError(f"duplicate id: {item.id!r}")
        self._items[item.id] = item

    def remove_by_id(self, item_id: str) -> None:
        """Remove the entity with ``item_id``, if there is one."""
        self._items.pop(item_id, None)

    def remove_by_ids(self, ids: Iterable[str]) -> None:
        """Remove every entity whose id is in ``ids``."""
        for item_id in ids:
            self.remove_by_id(item_id)

    def update(self, item: _T) -> None:
        """Replace the stored entity with a copy of ``item``; KeyError if absent."""
        if item.id not in self._items:
            raise KeyError(item.id)
        self._items[item.id] = item.clone()

    def data(self) -> list[_T]:
        """Return the stored entities in insertion order."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[_T]:
        return iter(self.data())


class Manager(Generic[_T]):
    """Adds, removes, updates and searches the entities of one repository."""

    def __init__(self, repository: InMemoryRepository[_T]) -> None:
        self._repository = repository

    def add(self, item: _T) -> None:
        """Add an entity to the repository."""
        self._repository.add(item)

    def remove_by_id(self, item_id: str) -> None:
        """Remove the entity with ``item_id``."""
        self._repository.remove_by_id(item_id)

    def remove_by_ids(self, ids: Iterable[str]) -> None:
        """Remove all entities whose ids are given."""
        self._repository.remove_by_ids(ids)

    def update(self, item: _T) -> None:
        """Replace the stored entity that has the same id."""
        self._repository.update(item)

    def find(self, filters: Iterable[Filter]) -> list[_T]:
        """Return the entities matching every filter, in repository order."""
        conditions = list(filters)
        return [
            item
            for item in self._repository.data()
            if all(condition.matches(item) for condition in conditions)
        ]

    def get_all(self) -> list[_T]:
        """Return every stored entity."""
        return self._repository.data()


class PatientManager(Manager[Patient]):
    """Manager of patients."""


class EmployeeManager(Manager[Employee]):
    """Manager of employees."""


class DepartmentManager(Manager[Department]):
    """Manager of departments."""


class MedicineManager(Manager[Medicine]):
    """Manager of medicines."""