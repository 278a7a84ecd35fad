"""Module: medication_records.

Data access for dose records and the bookkeeping that keeps a pet's primary
medication schedule consistent with them. Every function takes the caller's
Session and commits its own writes.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, timedelta

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from dogiguard.core.config import settings
from dogiguard.db.models.medication_record import MedicationRecord
from dogiguard.db.models.pet import Pet
from dogiguard.medication.compliance import MedicationStats, medication_stats
from dogiguard.medication.schedule import next_dose_date, projected_due_date
from dogiguard.medication.summary import DailySummary, daily_summary

logger = logging.getLogger(__name__)

MIGRATION_NOTE = "Migrated from existing data"

# Fields a caller may change on an existing record.
UPDATABLE_FIELDS = (
    "medication_name",
    "recorded_date",
    "scheduled_date",
    "is_primary_medication",
    "dosage",
    "notes",
    "recorded_by",
)


def get_pet(db: Session, pet_id: uuid.UUID) -> Pet | None:
    return db.execute(select(Pet).where(Pet.pet_id == pet_id)).scalar_one_or_none()


def get_record(db: Session, record_id: uuid.UUID) -> MedicationRecord | None:
    return db.execute(
        select(MedicationRecord).where(MedicationRecord.record_id == record_id)
    ).scalar_one_or_none()


def sync_primary_schedule(db: Session, pet: Pet) -> None:
    """
    Recompute last/next dose dates from the pet's primary-medication records.

    When no primary record exists the stored schedule is left untouched, so a
    schedule entered on the profile survives until the first logged dose.
    """
    last = db.execute(
        select(func.max(MedicationRecord.recorded_date)).where(
            MedicationRecord.pet_id == pet.pet_id,
            MedicationRecord.is_primary_medication.is_(True),
        )
    ).scalar_one_or_none()
    if last is None:
        return

    pet.last_dose_date = last
    pet.next_due_date = next_dose_date(last, pet.dose_interval_days)
    logger.info(
        "Primary schedule for pet %s: last=%s next=%s",
        pet.pet_id,
        pet.last_dose_date,
        pet.next_due_date,
    )


def record_medication(
    db: Session,
    pet: Pet,
    *,
    medication_name: str,
    recorded_date: date,
    scheduled_date: date | None = None,
    is_primary_medication: bool | None = None,
    dosage: str | None = None,
    notes: str | None = None,
    recorded_by: str | None = None,
) -> MedicationRecord:
    # Doses of the profile's primary medication count as primary unless the caller says otherwise.
    if is_primary_medication is None:
        is_primary_medication = medication_name == pet.primary_medication_name

    record = MedicationRecord(
        pet_id=pet.pet_id,
        medication_name=medication_name,
        recorded_date=recorded_date,
        scheduled_date=scheduled_date,
        is_primary_medication=is_primary_medication,
        dosage=dosage,
        notes=notes,
        recorded_by=recorded_by,
    )
    db.add(record)
    db.flush()

    if record.is_primary_medication:
        sync_primary_schedule(db, pet)

    db.commit()
    db.refresh(record)
    logger.info("Recorded %s for pet %s on %s", medication_name, pet.pet_id, recorded_date)
    return record


def list_records(db: Session, pet_id: uuid.UUID, limit: int | None = None) -> list[MedicationRecord]:
    stmt = (
        select(MedicationRecord)
        .where(MedicationRecord.pet_id == pet_id)
        .order_by(desc(MedicationRecord.recorded_date), desc(MedicationRecord.created_at))
    )
    if limit:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def list_records_in_range(
    db: Session, pet_id: uuid.UUID, start: date, end: date
) -> list[MedicationRecord]:
    stmt = (
        select(MedicationRecord)
        .where(
            MedicationRecord.pet_id == pet_id,
            MedicationRecord.recorded_date >= start,
            MedicationRecord.recorded_date <= end,
        )
        .order_by(desc(MedicationRecord.recorded_date), desc(MedicationRecord.created_at))
    )
    return list(db.execute(stmt).scalars().all())


def list_records_for_date(db: Session, pet_id: uuid.UUID, day: date) -> list[MedicationRecord]:
    return list_records_in_range(db, pet_id, day, day)


def update_record(db: Session, record: MedicationRecord, changes: dict) -> MedicationRecord:
    was_primary = record.is_primary_medication
    for field_name, value in changes.items():
        if field_name in UPDATABLE_FIELDS:
            setattr(record, field_name, value)
    db.flush()

    if was_primary or record.is_primary_medication:
        pet = get_pet(db, record.pet_id)
        if pet is not None:
            sync_primary_schedule(db, pet)

    db.commit()
    db.refresh(record)
    return record


def delete_record(db: Session, record: MedicationRecord) -> None:
    pet_id = record.pet_id
    record_id = record.record_id
    was_primary = record.is_primary_medication
    db.delete(record)
    db.flush()

    if was_primary:
        pet = get_pet(db, pet_id)
        if pet is not None:
            sync_primary_schedule(db, pet)

    db.commit()
    logger.info("Deleted medication record %s for pet %s", record_id, pet_id)


def get_last_dose_date(db: Session, pet_id: uuid.UUID, medication_name: str) -> date | None:
    return db.execute(
        select(func.max(MedicationRecord.recorded_date)).where(
            MedicationRecord.pet_id == pet_id,
            MedicationRecord.medication_name == medication_name,
        )
    ).scalar_one_or_none()


def get_next_dose_date(
    db: Session,
    pet_id: uuid.UUID,
    medication_name: str,
    interval_days: int,
    today: date | None = None,
) -> date:
    last = get_last_dose_date(db, pet_id, medication_name)
    return projected_due_date(last, interval_days, today)


def get_medication_stats(
    db: Session,
    pet_id: uuid.UUID,
    start_date: date | None = None,
    today: date | None = None,
    medication_name: str | None = None,
) -> list[MedicationStats]:
    if start_date is None:
        start_date = (today or date.today()) - timedelta(days=settings.stats_lookback_days)

    records = db.execute(
        select(MedicationRecord)
        .where(
            MedicationRecord.pet_id == pet_id,
            MedicationRecord.recorded_date >= start_date,
        )
        .order_by(MedicationRecord.recorded_date)
    ).scalars().all()
    return medication_stats(records, medication_filter=medication_name)


def get_daily_summary(
    db: Session, pet: Pet, start: date, end: date, today: date | None = None
) -> dict[date, DailySummary]:
    records = list_records_in_range(db, pet.pet_id, start, end)
    return daily_summary(
        records,
        start=start,
        end=end,
        primary_due_date=pet.next_due_date,
        primary_medication_name=pet.primary_medication_name,
        today=today,
    )


def migrate_existing_data(db: Session, pet: Pet) -> MedicationRecord | None:
    """
    Seed the record log from the schedule stored on the pet profile.

    Creates one primary record dated at the profile's last dose, unless the
    pet already has a primary record or no schedule to migrate. Returns the
    new record, or None when nothing was written.
    """
    if not pet.primary_medication_name or pet.last_dose_date is None:
        return None

    existing = db.execute(
        select(MedicationRecord.record_id)
        .where(
            MedicationRecord.pet_id == pet.pet_id,
            MedicationRecord.is_primary_medication.is_(True),
        )
        .limit(1)
    ).first()
    if existing is not None:
        return None

    logger.info("Migrating stored schedule for pet %s into medication records", pet.pet_id)
    return record_medication(
        db,
        pet,
        medication_name=pet.primary_medication_name,
        recorded_date=pet.last_dose_date,
        is_primary_medication=True,
        notes=MIGRATION_NOTE,
    )
