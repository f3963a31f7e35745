"""Billing and clinical test processing services."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import TypeVar

from .base import Entity
from .billing import ClinicalTest, MedicalRecord, MedicineUsage
from .managers import InMemoryRepository
from .payment import Receipt, payment_method_for
from .people import Patient
from .states import StateName

_T = TypeVar("_T", bound=Entity)


def _find_by_id(items: Iterable[_T], item_id: str) -> _T | None:
    return next((item for item in items if item.id == item_id), None)


class BillService:
    """Looks up completed records and produces receipts for them."""

    def __init__(
        self,
        records: InMemoryRepository[MedicalRecord],
        patients: InMemoryRepository[Patient],
        rooms: InMemoryRepository,
    ) -> None:
        self._records = records
        self._patients = patients
        self._rooms = rooms

    def _record(self, record_id: str) -> MedicalRecord:
        record = _find_by_id(self._records.data(), record_id)
        if record is None:
            raise KeyError(record_id)
        return record

    def get_all_records(self) -> list[MedicalRecord]:
        """Return copies of all records."""
        return [record.clone() for record in self._records.data()]

    def get_all_records_by_state(
        self, state: StateName = StateName.COMPLETED
    ) -> list[MedicalRecord]:
        """Return copies of the records currently in ``state``."""
        return [
            record.clone()
            for record in self._records.data()
            if record.state.state_name == state
        ]

    def find_patient_by_id(self, patient_id: str) -> Patient | None:
        """Return a copy of the patient with ``patient_id``, or None."""
        patient = _find_by_id(self._patients.data(), patient_id)
        return None if patient is None else patient.clone()

    def get_all_medicine_usages_in_record(self, record_id: str) -> list[MedicineUsage]:
        """Return copies of a record's prescriptions; KeyError if no such record."""
        return [usage.clone() for usage in self._record(record_id).prescribed_medicines]

    def get_all_clinical_tests_in_record(self, record_id: str) -> list[ClinicalTest]:
        """Return copies of a record's clinical tests; KeyError if no such record."""
        return [test.clone() for test in self._record(record_id).clinical_tests]

    def generate_receipt(self, record: MedicalRecord) -> Receipt:
        """Build a receipt for ``record`` with the patient's payment method.

        Raises KeyError if the record's patient is unknown.
        """
        patient = self.find_patient_by_id(record.patient_id)
        if patient is None:
            raise KeyError(record.patient_id)
        now = datetime.now()
        receipt_id = f"HD-{date.today():%d/%m/%Y}-{now:%H:%M:%S}"
        receipt = Receipt(
            id=receipt_id,
            name=patient.name,
            record_id=record.id,
            total_price=record.calculate_fee(),
        )
        receipt.set_payment_method(payment_method_for(patient))
        return receipt


class TestProcessingService:
    """Finds records and clinical tests awaiting or done with processing."""

    __test__ = False

    def __init__(self, records: InMemoryRepository[MedicalRecord]) -> None:
        self._records = records

    def get_medical_records_have_tests(self) -> list[MedicalRecord]:
        """Return copies of the records with at least one clinical test."""
        return [record.clone() for record in self._records.data() if record.clinical_tests]

    def get_medical_records_by_test_state(self, completed: bool = False) -> list[MedicalRecord]:
        """Return records with tests, split on whether they still await test results."""
        return [
            record
            for record in self.get_medical_records_have_tests()
            if (record.state.state_name != StateName.TEST_PENDING) == completed
        ]

    def get_clinical_tests_by_state(
        self, record_id: str, completed: bool = False
    ) -> list[ClinicalTest]:
        """Return copies of a record's tests with the given completion flag.

        Raises KeyError if there is no record with ``record_id``.
        """
        record = _find_by_id(self._records.data(), record_id)
        if record is None:
            raise KeyError(record_id)
        return [test.clone() for test in record.clinical_tests if test.completed == completed]

    def find_clinical_test_by_id(self, test_id: str) -> ClinicalTest:
        """Return a copy of the clinical test with ``test_id`` from any record.

        Raises LookupError if no record holds it.
        """
        for record in self._records.data():
            test = _find_by_id(record.clinical_tests, test_id)
            if test is not None:
                return test.clone()
        raise LookupError("Not Found Clinical Test")