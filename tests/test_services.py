from datetime import date, timedelta

import pytest

from clinicdesk.billing import ClinicalTest, MedicalRecord, MedicineUsage
from clinicdesk.managers import InMemoryRepository
from clinicdesk.payment import InsurancePayment, NormalPayment
from clinicdesk.people import HealthInsurance, Patient
from clinicdesk.services import BillService
from clinicdesk.services import TestProcessingService as ProcessingService
from clinicdesk.states import CompletedState, ExaminingState, StateName, TestPendingState


def _records():
    pending = MedicalRecord(id="R1", patient_id="P1")
    pending.order_clinical_test(ClinicalTest(id="C1", name="Blood", test_id="T1", cost=50.0))
    pending.order_clinical_test(
        ClinicalTest(id="C2", name="Xray", test_id="T2", cost=30.0, result="ok", completed=True)
    )
    pending.change_state(TestPendingState())

    done = MedicalRecord(id="R2", patient_id="P2")
    done.prescribe_medicine(
        MedicineUsage(id="U1", name="Aspirin", medicine_id="M1", used_quantity=2, price=10.0)
    )
    done.order_clinical_test(
        ClinicalTest(id="C3", name="Urine", test_id="T3", cost=20.0, completed=True)
    )
    done.change_state(ExaminingState())
    done.complete_examination()

    bare = MedicalRecord(id="R3", patient_id="P1")
    return InMemoryRepository([pending, done, bare])


def _patients():
    card = HealthInsurance(
        id="I1",
        issue_date=date.today() - timedelta(days=10),
        expiry_date=date.today() + timedelta(days=365),
        coverage_percent=80.0,
    )
    return InMemoryRepository(
        [
            Patient(id="P1", name="Alice"),
            Patient(id="P2", name="Bob", insurance_card=card),
        ]
    )


@pytest.fixture
def bill_service():
    return BillService(_records(), _patients(), InMemoryRepository())


@pytest.fixture
def processing_service():
    return ProcessingService(_records())


def test_get_all_records_returns_copies(bill_service):
    records = bill_service.get_all_records()
    assert [r.id for r in records] == ["R1", "R2", "R3"]
    records[0].patient_id = "changed"
    assert bill_service.get_all_records()[0].patient_id == "P1"


def test_records_by_state_defaults_to_completed(bill_service):
    assert [r.id for r in bill_service.get_all_records_by_state()] == ["R2"]
    pending = bill_service.get_all_records_by_state(StateName.TEST_PENDING)
    assert [r.id for r in pending] == ["R1"]


def test_find_patient(bill_service):
    assert bill_service.find_patient_by_id("P2").name == "Bob"
    assert bill_service.find_patient_by_id("missing") is None


def test_usages_and_tests_in_record(bill_service):
    usages = bill_service.get_all_medicine_usages_in_record("R2")
    assert [u.id for u in usages] == ["U1"]
    tests = bill_service.get_all_clinical_tests_in_record("R1")
    assert [t.id for t in tests] == ["C1", "C2"]


def test_usages_in_missing_record_raises(bill_service):
    with pytest.raises(KeyError):
        bill_service.get_all_medicine_usages_in_record("R9")


def test_generate_receipt_with_insurance(bill_service):
    record = bill_service.get_all_records_by_state()[0]
    receipt = bill_service.generate_receipt(record)
    assert receipt.id.startswith("HD-")
    assert receipt.name == "Bob"
    assert receipt.record_id == "R2"
    assert receipt.total_price == record.calculate_fee()
    assert receipt.status == "false"
    assert receipt.process_payment() == pytest.approx(
        InsurancePayment(80.0).process_payment(record.calculate_fee())
    )


def test_generate_receipt_without_insurance_pays_in_full(bill_service):
    record = bill_service.get_all_records()[0]
    receipt = bill_service.generate_receipt(record)
    assert receipt.process_payment() == NormalPayment().process_payment(record.calculate_fee())


def test_generate_receipt_unknown_patient_raises(bill_service):
    with pytest.raises(KeyError):
        bill_service.generate_receipt(MedicalRecord(id="R9", patient_id="P9"))


def test_records_with_tests(processing_service):
    ids = [r.id for r in processing_service.get_medical_records_have_tests()]
    assert ids == ["R1", "R2"]


def test_records_by_test_state(processing_service):
    assert [r.id for r in processing_service.get_medical_records_by_test_state()] == ["R1"]
    assert [r.id for r in processing_service.get_medical_records_by_test_state(True)] == ["R2"]


def test_clinical_tests_by_state(processing_service):
    assert [t.id for t in processing_service.get_clinical_tests_by_state("R1")] == ["C1"]
    assert [t.id for t in processing_service.get_clinical_tests_by_state("R1", True)] == ["C2"]


def test_clinical_tests_by_state_missing_record(processing_service):
    with pytest.raises(KeyError):
        processing_service.get_clinical_tests_by_state("R9")


def test_find_clinical_test_by_id(processing_service):
    test = processing_service.find_clinical_test_by_id("C3")
    assert test.test_id == "T3"
    assert test.completed is True


def test_find_clinical_test_returns_copy():
    records = _records()
    service = ProcessingService(records)
    found = service.find_clinical_test_by_id("C1")
    found.result = "changed"
    assert records.data()[0].clinical_tests[0].result == ""


def test_find_missing_clinical_test_raises(processing_service):
    with pytest.raises(LookupError, match="Not Found Clinical Test"):
        processing_service.find_clinical_test_by_id("C9")


def test_completed_state_record_counts_as_tests_done():
    record = MedicalRecord(id="R5")
    record.order_clinical_test(ClinicalTest(id="C5", test_id="T5"))
    record.change_state(CompletedState())
    service = ProcessingService(InMemoryRepository([record]))
    assert [r.id for r in service.get_medical_records_by_test_state(True)] == ["R5"]