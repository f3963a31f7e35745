# clinicdesk

clinicdesk models the everyday work of a small clinic. A patient gets a medical record, and the record is assigned to an examination room. A doctor examines the patient, orders clinical tests and prescribes medicines. At the end a receipt is produced, and any valid health insurance card is applied to it.

The package is a library. It has no command-line entry point.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `clinicdesk.config`: `Config(file_path)` reads a file of `key=value` lines when `load_from_file()` is called. If the file is missing or unreadable, the config is left unchanged. Only the text between the first and second `=` becomes the value. `get(prop)` returns `"null"` for a key that is not present.
- `clinicdesk.base`: `Entity` is a dataclass with `id` and `name`. Its `clone()` returns a deep copy. `BillableComponent` is the abstract entity that defines `calculate_fee()`.
- `clinicdesk.people`: `Person` has `age()`, which is the current year minus the birth year. The module also holds `Employee`, `Doctor`, `Nurse`, `Patient` and `HealthInsurance`. `HealthInsurance.is_valid()` is true when the expiry date is strictly after today.
- `clinicdesk.catalog`: `Medicine` and `Department`.
- `clinicdesk.states`: `StateName` and the `ExaminationState` classes `WaitingState`, `TestPendingState`, `ExaminingState`, `CompletedState` and `PaidState`. Each state reports `can_prescribe_medicine()`, `can_order_clinical_test()` and `can_complete()`. Only `ExaminingState` allows any of the three.
- `clinicdesk.billing`: `MedicineUsage` has a fee of price × quantity. `ClinicalTest` has a fee equal to its cost. `MedicalRecord` has a fee equal to the sum of its prescriptions and tests. A record has these methods:
  - `assign_to_room`
  - `start_examination`
  - `cancel_examination`
  - `prescribe_medicine`, which replaces a prescription with the same id
  - `order_clinical_test`, which replaces a test with the same id and test id
  - `clear_ordered_tests`
  - `complete_examination`
  - `change_state`, which raises `ValueError` when given `None`
- `clinicdesk.payment`: `PaymentMethod`, `NormalPayment` and `InsurancePayment`. `InsurancePayment` charges `(100 - coverage) %` of the amount. `payment_method_for(patient)` chooses insurance payment when the patient's card is valid and normal payment otherwise. `Receipt.process_payment()` raises `RuntimeError` if no payment method has been set.
- `clinicdesk.managers`: `InMemoryRepository` keeps entities keyed by id, in insertion order.
  - `add` raises `ValueError` on a duplicate id.
  - `update` raises `KeyError` for an unknown id.
  - The managers are `Manager`, `PatientManager`, `EmployeeManager`, `DepartmentManager` and `MedicineManager`. They add, remove and update entities.
  - `find(filters)` keeps the entities that match every `Filter`. A filter is built from a getter, a value and an `Op` comparison. The getter is an attribute name or a callable. The comparisons are `EQ`, `NE`, `LT`, `LE`, `GT`, `GE` and `CONTAINS`.
- `clinicdesk.services`:
  - `BillService` lists records, optionally filtered by state, and looks up patients. It also returns copies of a record's prescriptions and tests. `generate_receipt(record)` builds a `Receipt` that carries the patient's payment method.
  - `TestProcessingService` finds the records that have tests and splits them by whether they still await results. It also finds tests by completion state or by id. `find_clinical_test_by_id` raises `LookupError` when no record holds the test.

## Example

```python
from clinicdesk.billing import ClinicalTest, MedicalRecord, MedicineUsage
from clinicdesk.payment import InsurancePayment, Receipt

record = MedicalRecord(id="MR-001", patient_id="BN-001")
record.assign_to_room("P-101")
record.start_examination("BS-001")
record.prescribe_medicine(
    MedicineUsage("MEUSE-1", "Paracetamol", "T-001", 2, 5000.0, "after meals")
)
record.order_clinical_test(ClinicalTest("CLSUSE-1", "Blood test", "XN-001", 120000.0))
record.complete_examination()

receipt = Receipt("HD-1", "Nguyen Van A", record.id, record.calculate_fee())
receipt.set_payment_method(InsurancePayment(80.0))
print(receipt.process_payment())  # 26000.0
```

## What it does not do

- It stores data in memory only. Nothing is saved to files or a database, so data is lost when the process ends.
- It has no examination-room model and no patient registration workflow.
- It has no user interface and no command-line tool.