"""Billable items and the medical record that collects them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import date, datetime, time

from .base import BillableComponent
from .states import CompletedState, ExaminationState, ExaminingState, WaitingState


def _now_time() -> time:
    return datetime.now().time().replace(microsecond=0)


@dataclass
class MedicineUsage(BillableComponent):
    """A quantity of a medicine prescribed within a record."""

    medicine_id: str = ""
    used_quantity: int = 0
    price: float = 0.0
    description: str = ""

    def calculate_fee(self) -> float:
        """Return the unit price times the quantity used."""
        return self.price * self.used_quantity


@dataclass
class ClinicalTest(BillableComponent):
    """A clinical test ordered for a record, with its result."""

    test_id: str = ""
    cost: float = 0.0
    result: str = ""
    completed: bool = False

    def calculate_fee(self) -> float:
        """Return the cost of the test."""
        return self.cost


@dataclass
class MedicalRecord(BillableComponent):
    """A patient's examination record with prescriptions and tests."""

    patient_id: str = ""
    room_id: str = ""
    doctor_id: str = ""
    diagnosis_result: str = ""
    prescribed_medicines: list[MedicineUsage] = field(default_factory=list)
    clinical_tests: list[ClinicalTest] = field(default_factory=list)
    state: ExaminationState = field(default_factory=WaitingState)
    created_date: date = field(default_factory=date.today)
    created_time: time = field(default_factory=_now_time)

    def calculate_fee(self) -> float:
        """Return the total of all prescribed medicines and clinical tests."""
        return sum(item.calculate_fee() for item in self.prescribed_medicines) + sum(
            test.calculate_fee() for test in self.clinical_tests
        )

    def assign_to_room(self, room_id: str) -> None:
        """Assign the record to an examination room."""
        self.room_id = room_id

    def start_examination(self, doctor_id: str) -> None:
        """Begin the examination with the given doctor."""
        self.doctor_id = doctor_id
        self.state = ExaminingState()

    def cancel_examination(self) -> None:
        """Undo a started examination; does nothing if no doctor is assigned."""
        if self.doctor_id:
            self.doctor_id = ""
            self.diagnosis_result = ""
            self.clinical_tests.clear()
            self.prescribed_medicines.clear()
            self.state = WaitingState()

    def prescribe_medicine(self, usage: MedicineUsage) -> None:
        """Add a prescription, replacing one with the same id."""
        for index, existing in enumerate(self.prescribed_medicines):
            if existing.id == usage.id:
                self.prescribed_medicines[index] = usage
                return
        self.prescribed_medicines.append(usage)

    def order_clinical_test(self, test: ClinicalTest) -> None:
        """Add a test, replacing one with the same id and test id."""
        for index, existing in enumerate(self.clinical_tests):
            if existing.id == test.id and existing.test_id == test.test_id:
                self.clinical_tests[index] = test
                return
        self.clinical_tests.append(test)

    def clear_ordered_tests(self) -> None:
        """Remove all ordered clinical tests."""
        self.clinical_tests.clear()

    def complete_examination(self) -> None:
        """Mark the examination as completed."""
        self.state = CompletedState()

    def change_state(self, state: ExaminationState | None) -> None:
        """Move to ``state``; raises ValueError if it is None."""
        if state is None:
            raise ValueError("State cannot be null")
        self.state = state

    def clone(self) -> MedicalRecord:
        """Return a deep copy including prescriptions, tests and state."""
        return copy.deepcopy(self)