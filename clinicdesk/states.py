"""Examination states of a medical record."""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import ClassVar


class StateName(Enum):
    """Names of the examination states."""

    WAITING = "Waiting"
    TEST_PENDING = "TestPending"
    EXAMINING = "Examining"
    COMPLETED = "Completed"
    PAID = "Paid"


class ExaminationState(ABC):
    """A state in the examination workflow and what it permits."""

    state_name: ClassVar[StateName]
    _prescribe: ClassVar[bool] = False
    _order_test: ClassVar[bool] = False
    _complete: ClassVar[bool] = False

    def can_prescribe_medicine(self) -> bool:
        """Return whether medicine may be prescribed in this state."""
        return self._prescribe

    def can_order_clinical_test(self) -> bool:
        """Return whether clinical tests may be ordered in this state."""
        return self._order_test

    def can_complete(self) -> bool:
        """Return whether the examination may be completed in this state."""
        return self._complete

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExaminationState):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(self.state_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WaitingState(ExaminationState):
    """The patient waits to be examined."""

    state_name = StateName.WAITING


class TestPendingState(ExaminationState):
    """Ordered clinical tests have not all been processed yet."""

    state_name = StateName.TEST_PENDING


class ExaminingState(ExaminationState):
    """A doctor is examining the patient."""

    state_name = StateName.EXAMINING
    _prescribe = True
    _order_test = True
    _complete = True


class CompletedState(ExaminationState):
    """The examination is finished."""

    state_name = StateName.COMPLETED


class PaidState(ExaminationState):
    """The bill for the examination has been paid."""

    state_name = StateName.PAID