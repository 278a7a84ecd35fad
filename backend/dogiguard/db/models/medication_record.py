"""Module: medication_record."""

import uuid
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, String, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from dogiguard.db.base import Base


# One administered dose: what was given to which pet, when, and when it had been due.
class MedicationRecord(Base):
    __tablename__ = "medication_records"

    record_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    pet_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    medication_name: Mapped[str] = mapped_column(String, nullable=False)
    # Date the dose was actually given.
    recorded_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    # Date the dose had originally been due; NULL for ad hoc doses.
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=True)
    is_primary_medication: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    dosage: Mapped[str] = mapped_column(String, nullable=True)
    notes: Mapped[str] = mapped_column(String, nullable=True)
    recorded_by: Mapped[str] = mapped_column(String, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Aggregation helpers read the owning pet under the name subject_id.
    @property
    def subject_id(self) -> uuid.UUID:
        return self.pet_id

    @property
    def id(self) -> uuid.UUID:
        return self.record_id
