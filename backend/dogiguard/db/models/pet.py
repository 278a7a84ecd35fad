"""Module: pet."""

import uuid
from datetime import date, datetime

from sqlalchemy import JSON, Date, DateTime, Integer, Numeric, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from dogiguard.db.base import Base
from dogiguard.medication.schedule import DEFAULT_INTERVAL_DAYS


# Dog profile plus the schedule of its primary (recurring) medication.
class Pet(Base):
    __tablename__ = "pets"

    # Primary Key
    pet_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )

    # Basic Info
    name: Mapped[str] = mapped_column(String, nullable=False)
    species: Mapped[str] = mapped_column(String, nullable=False, default="dog")
    breed: Mapped[str] = mapped_column(String, nullable=True)
    weight_kg: Mapped[float] = mapped_column(Numeric(5, 2), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=True)
    current_medications: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Primary medication schedule. next_due_date is always last_dose_date + dose_interval_days.
    primary_medication_name: Mapped[str] = mapped_column(String, nullable=True)
    last_dose_date: Mapped[date] = mapped_column(Date, nullable=True)
    next_due_date: Mapped[date] = mapped_column(Date, nullable=True, index=True)
    dose_interval_days: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=DEFAULT_INTERVAL_DAYS,
        server_default=text(str(DEFAULT_INTERVAL_DAYS))
    )

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )
