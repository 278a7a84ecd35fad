"""Module: medication_records."""

from __future__ import annotations

import uuid
from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from dogiguard.api.v1.routes.deps import get_db
from dogiguard.db.models.medication_record import MedicationRecord
from dogiguard.medication.compliance import timing_status
from dogiguard.services import medication_records as records_service

router = APIRouter()


class MedicationRecordCreatePayload(BaseModel):
    medication_name: str = Field(min_length=1)
    recorded_date: date
    scheduled_date: date | None = None
    # Omitted: inferred from the pet's primary medication name.
    is_primary_medication: bool | None = None
    dosage: str | None = None
    notes: str | None = None
    recorded_by: str | None = None


class MedicationRecordUpdatePayload(BaseModel):
    medication_name: str | None = Field(default=None, min_length=1)
    recorded_date: date | None = None
    scheduled_date: date | None = None
    is_primary_medication: bool | None = None
    dosage: str | None = None
    notes: str | None = None
    recorded_by: str | None = None


# -------------------------
# Helpers
# -------------------------
def _parse_uuid(value: str, field_name: str = "id") -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {field_name} (must be UUID)")


def _load_pet(db: Session, pet_id: str):
    pet = records_service.get_pet(db, _parse_uuid(pet_id, "pet_id"))
    if not pet:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


def _load_record(db: Session, record_id: str) -> MedicationRecord:
    record = records_service.get_record(db, _parse_uuid(record_id, "record_id"))
    if not record:
        raise HTTPException(status_code=404, detail="Medication record not found")
    return record


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise HTTPException(status_code=400, detail="start must be on or before end")


def serialize_record(record: MedicationRecord) -> dict:
    return {
        "id": str(record.record_id),
        "pet_id": str(record.pet_id),
        "medication_name": record.medication_name,
        "recorded_date": record.recorded_date,
        "scheduled_date": record.scheduled_date,
        "is_primary_medication": record.is_primary_medication,
        "dosage": record.dosage,
        "notes": record.notes,
        "recorded_by": record.recorded_by,
        "timing_status": timing_status(record).value,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }


# -------------------------
# Endpoints
# -------------------------

@router.get("/pets/{pet_id}/medication-records", summary="List medication records for a pet")
def list_medication_records(
    pet_id: str,
    limit: int | None = Query(default=None, gt=0),
    start: date | None = Query(default=None),
    end: date | None = Query(default=None),
    on: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)

    if on is not None:
        rows = records_service.list_records_for_date(db, pet.pet_id, on)
    elif start is not None or end is not None:
        if start is None or end is None:
            raise HTTPException(status_code=400, detail="start and end must be given together")
        _check_range(start, end)
        rows = records_service.list_records_in_range(db, pet.pet_id, start, end)
    else:
        rows = records_service.list_records(db, pet.pet_id, limit)

    return [serialize_record(r) for r in rows]


@router.post("/pets/{pet_id}/medication-records", summary="Record a medication dose", status_code=201)
def create_medication_record(
    pet_id: str,
    payload: MedicationRecordCreatePayload,
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    record = records_service.record_medication(
        db,
        pet,
        medication_name=payload.medication_name.strip(),
        recorded_date=payload.recorded_date,
        scheduled_date=payload.scheduled_date,
        is_primary_medication=payload.is_primary_medication,
        dosage=payload.dosage,
        notes=payload.notes,
        recorded_by=payload.recorded_by,
    )
    return {
        "record": serialize_record(record),
        "last_dose_date": pet.last_dose_date,
        "next_due_date": pet.next_due_date,
    }


@router.get("/pets/{pet_id}/medication-records/stats", summary="Medication compliance statistics")
def get_medication_stats(
    pet_id: str,
    start_date: date | None = Query(default=None),
    medication_name: str | None = Query(default=None),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    stats = records_service.get_medication_stats(
        db,
        pet.pet_id,
        start_date=start_date,
        today=today,
        medication_name=medication_name,
    )
    return [asdict(s) for s in stats]


@router.get("/pets/{pet_id}/medication-records/summary", summary="Per-day medication summary for a calendar")
def get_daily_summary(
    pet_id: str,
    start: date = Query(...),
    end: date = Query(...),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    _check_range(start, end)
    pet = _load_pet(db, pet_id)
    summary = records_service.get_daily_summary(db, pet, start, end, today)
    return {day.isoformat(): asdict(s) for day, s in summary.items()}


@router.get("/pets/{pet_id}/medication-records/last-dose", summary="Most recent dose of a medication")
def get_last_dose(
    pet_id: str,
    medication_name: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    return {
        "medication_name": medication_name,
        "last_dose_date": records_service.get_last_dose_date(db, pet.pet_id, medication_name),
    }


@router.get("/pets/{pet_id}/medication-records/next-dose", summary="Projected next dose of a medication")
def get_next_dose(
    pet_id: str,
    medication_name: str | None = Query(default=None),
    interval_days: int | None = Query(default=None, gt=0),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    name = medication_name or pet.primary_medication_name
    if not name:
        raise HTTPException(status_code=400, detail="medication_name is required for pets without a primary medication")

    interval = interval_days or pet.dose_interval_days
    return {
        "medication_name": name,
        "interval_days": interval,
        "last_dose_date": records_service.get_last_dose_date(db, pet.pet_id, name),
        "next_dose_date": records_service.get_next_dose_date(db, pet.pet_id, name, interval, today),
    }


@router.post("/pets/{pet_id}/medication-records/migrate", summary="Seed records from the pet's stored schedule")
def migrate_medication_records(
    pet_id: str,
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    record = records_service.migrate_existing_data(db, pet)
    return {
        "migrated": record is not None,
        "record": serialize_record(record) if record is not None else None,
    }


@router.put("/medication-records/{record_id}", summary="Update a medication record")
def update_medication_record(
    record_id: str,
    payload: MedicationRecordUpdatePayload,
    db: Session = Depends(get_db),
):
    record = _load_record(db, record_id)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("medication_name"):
        changes["medication_name"] = changes["medication_name"].strip()
    if "medication_name" in changes and not changes["medication_name"]:
        raise HTTPException(status_code=400, detail="medication_name cannot be empty")
    if "recorded_date" in changes and changes["recorded_date"] is None:
        raise HTTPException(status_code=400, detail="recorded_date cannot be cleared")
    if "is_primary_medication" in changes and changes["is_primary_medication"] is None:
        del changes["is_primary_medication"]

    record = records_service.update_record(db, record, changes)
    return serialize_record(record)


@router.delete("/medication-records/{record_id}", summary="Delete a medication record")
def delete_medication_record(
    record_id: str,
    db: Session = Depends(get_db),
):
    record = _load_record(db, record_id)
    records_service.delete_record(db, record)
    return {"id": record_id, "status": "deleted"}
