# backend/dogiguard/db/models/__init__.py

from dogiguard.db.models.pet import Pet
from dogiguard.db.models.medication_record import MedicationRecord
