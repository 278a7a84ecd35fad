"""Module: pets."""

from __future__ import annotations

import logging
import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from dogiguard.api.v1.routes.deps import get_db
from dogiguard.core.config import settings
from dogiguard.db.models.medication_record import MedicationRecord
from dogiguard.db.models.pet import Pet
from dogiguard.medication.dates import calculate_age, format_date
from dogiguard.medication.dday import dday_badge
from dogiguard.medication.schedule import next_dose_date
from dogiguard.services.medication_records import sync_primary_schedule

logger = logging.getLogger(__name__)

router = APIRouter()


class PetPayload(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    species: str = "dog"
    breed: str | None = None
    weight_kg: float | None = Field(default=None, gt=0, le=100)
    date_of_birth: date | None = None
    current_medications: list[str] = Field(default_factory=list)
    primary_medication_name: str | None = None
    last_dose_date: date | None = None
    # Only used when there is no last dose to derive it from.
    next_due_date: date | None = None
    dose_interval_days: int | None = Field(default=None, gt=0)


# -------------------------
# Helpers
# -------------------------
def _parse_uuid(value: str, field_name: str = "id") -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {field_name} (must be UUID)")


def _normalize_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned if cleaned else None


def _load_pet(db: Session, pet_id: str) -> Pet:
    pid = _parse_uuid(pet_id, "pet_id")
    pet = db.execute(select(Pet).where(Pet.pet_id == pid)).scalar_one_or_none()
    if not pet:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


def _apply_payload(pet: Pet, payload: PetPayload) -> None:
    pet.name = payload.name.strip()
    pet.species = payload.species.strip() or "dog"
    pet.breed = _normalize_optional(payload.breed)
    pet.weight_kg = payload.weight_kg
    pet.date_of_birth = payload.date_of_birth
    pet.current_medications = [m.strip() for m in payload.current_medications if m.strip()]
    pet.primary_medication_name = _normalize_optional(payload.primary_medication_name)
    pet.dose_interval_days = payload.dose_interval_days or settings.default_interval_days
    pet.last_dose_date = payload.last_dose_date

    if payload.last_dose_date is not None:
        pet.next_due_date = next_dose_date(payload.last_dose_date, pet.dose_interval_days)
    else:
        pet.next_due_date = payload.next_due_date


def serialize_pet(pet: Pet, locale: str | None = None, today: date | None = None) -> dict:
    locale = locale or settings.default_locale
    today = today or date.today()

    badge = None
    if pet.next_due_date is not None:
        b = dday_badge(pet.next_due_date, today)
        badge = {"days": b.offset, "status": b.tier.value, "color": b.color}

    return {
        "id": str(pet.pet_id),
        "name": pet.name,
        "species": pet.species,
        "breed": pet.breed,
        "weight_kg": float(pet.weight_kg) if pet.weight_kg is not None else None,
        "date_of_birth": pet.date_of_birth,
        "age": calculate_age(pet.date_of_birth, today) if pet.date_of_birth else None,
        "current_medications": list(pet.current_medications or []),
        "primary_medication_name": pet.primary_medication_name,
        "dose_interval_days": pet.dose_interval_days,
        "last_dose_date": pet.last_dose_date,
        "next_due_date": pet.next_due_date,
        "last_dose_display": format_date(pet.last_dose_date, locale) if pet.last_dose_date else None,
        "next_due_display": format_date(pet.next_due_date, locale) if pet.next_due_date else None,
        "dday": badge,
        "created_at": pet.created_at,
    }


# -------------------------
# Endpoints
# -------------------------

@router.get("", summary="List pets with their medication D-Day")
def list_pets(
    limit: int = 200,
    offset: int = 0,
    locale: str | None = Query(default=None),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    stmt = select(Pet).order_by(Pet.name).offset(offset).limit(limit)
    pets = db.execute(stmt).scalars().all()
    return [serialize_pet(p, locale, today) for p in pets]


@router.post("", summary="Create pet", status_code=201)
def create_pet(
    payload: PetPayload,
    locale: str | None = Query(default=None),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    pet = Pet()
    _apply_payload(pet, payload)
    db.add(pet)
    db.commit()
    db.refresh(pet)

    logger.info("Created pet %s", pet.pet_id)
    return serialize_pet(pet, locale, today)


@router.get("/{pet_id}", summary="Get pet detail")
def get_pet(
    pet_id: str,
    locale: str | None = Query(default=None),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return serialize_pet(_load_pet(db, pet_id), locale, today)


@router.put("/{pet_id}", summary="Update pet details")
def update_pet(
    pet_id: str,
    payload: PetPayload,
    locale: str | None = Query(default=None),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    _apply_payload(pet, payload)
    db.flush()
    # Logged primary doses win over dates typed into the profile.
    sync_primary_schedule(db, pet)
    db.commit()
    db.refresh(pet)

    return serialize_pet(pet, locale, today)


@router.delete("/{pet_id}", summary="Delete pet and its medication history")
def delete_pet(
    pet_id: str,
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    db.execute(delete(MedicationRecord).where(MedicationRecord.pet_id == pet.pet_id))
    db.delete(pet)
    db.commit()

    logger.info("Deleted pet %s", pet_id)
    return {"id": pet_id, "status": "deleted"}


@router.get("/{pet_id}/dday", summary="Days until the next primary medication dose")
def get_pet_dday(
    pet_id: str,
    locale: str | None = Query(default=None),
    today: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    pet = _load_pet(db, pet_id)
    if pet.next_due_date is None:
        raise HTTPException(status_code=404, detail="Pet has no scheduled medication")

    badge = dday_badge(pet.next_due_date, today)
    return {
        "pet_id": str(pet.pet_id),
        "medication_name": pet.primary_medication_name,
        "next_due_date": pet.next_due_date,
        "next_due_display": format_date(pet.next_due_date, locale or settings.default_locale),
        "days": badge.offset,
        "status": badge.tier.value,
        "color": badge.color,
    }
