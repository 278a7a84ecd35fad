from datetime import date

from dogiguard.db.models.pet import Pet
from dogiguard.services import medication_records as service


def test_primary_dose_moves_schedule_forward(db, pet):
    service.record_medication(
        db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 14), is_primary_medication=True
    )
    assert pet.last_dose_date == date(2025, 2, 14)
    assert pet.next_due_date == date(2025, 3, 16)


def test_primary_flag_is_inferred_from_profile(db, pet):
    record = service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 16))
    assert record.is_primary_medication is True
    assert pet.next_due_date == date(2025, 3, 18)

    other = service.record_medication(db, pet, medication_name="Apoquel", recorded_date=date(2025, 2, 20))
    assert other.is_primary_medication is False
    assert pet.next_due_date == date(2025, 3, 18)


def test_backdated_primary_dose_does_not_rewind_schedule(db, pet):
    service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 3, 1))
    service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 1, 30))
    assert pet.last_dose_date == date(2025, 3, 1)
    assert pet.next_due_date == date(2025, 3, 31)


def test_schedule_uses_pet_interval(db):
    pet = Pet(name="Coco", primary_medication_name="Bravecto", dose_interval_days=90, current_medications=[])
    db.add(pet)
    db.commit()

    service.record_medication(db, pet, medication_name="Bravecto", recorded_date=date(2025, 1, 1))
    assert pet.next_due_date == date(2025, 4, 1)


def test_deleting_latest_primary_dose_restores_previous(db, pet):
    service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 14))
    latest = service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 3, 16))
    assert pet.next_due_date == date(2025, 4, 15)

    service.delete_record(db, latest)
    db.refresh(pet)
    assert pet.last_dose_date == date(2025, 2, 14)
    assert pet.next_due_date == date(2025, 3, 16)
    assert service.get_record(db, latest.record_id) is None


def test_editing_primary_dose_date_resyncs(db, pet):
    record = service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 14))
    service.update_record(db, record, {"recorded_date": date(2025, 2, 18), "notes": "given late"})
    db.refresh(pet)
    assert record.notes == "given late"
    assert pet.next_due_date == date(2025, 3, 20)


def test_update_ignores_unknown_fields(db, pet):
    record = service.record_medication(db, pet, medication_name="Apoquel", recorded_date=date(2025, 2, 1))
    service.update_record(db, record, {"pet_id": None, "dosage": "16mg"})
    assert record.pet_id == pet.pet_id
    assert record.dosage == "16mg"


def test_listing_orders_newest_first_and_filters(db, pet):
    for day in (date(2025, 1, 1), date(2025, 2, 1), date(2025, 3, 1)):
        service.record_medication(db, pet, medication_name="Apoquel", recorded_date=day)

    assert [r.recorded_date for r in service.list_records(db, pet.pet_id)] == [
        date(2025, 3, 1), date(2025, 2, 1), date(2025, 1, 1),
    ]
    assert len(service.list_records(db, pet.pet_id, limit=2)) == 2
    in_range = service.list_records_in_range(db, pet.pet_id, date(2025, 1, 15), date(2025, 3, 1))
    assert [r.recorded_date for r in in_range] == [date(2025, 3, 1), date(2025, 2, 1)]
    on_day = service.list_records_for_date(db, pet.pet_id, date(2025, 2, 1))
    assert [r.recorded_date for r in on_day] == [date(2025, 2, 1)]


def test_last_and_next_dose_dates(db, pet):
    assert service.get_last_dose_date(db, pet.pet_id, "Apoquel") is None
    assert service.get_next_dose_date(db, pet.pet_id, "Apoquel", 14, today=date(2025, 5, 1)) == date(2025, 5, 1)

    service.record_medication(db, pet, medication_name="Apoquel", recorded_date=date(2025, 4, 1))
    service.record_medication(db, pet, medication_name="Apoquel", recorded_date=date(2025, 4, 20))
    assert service.get_last_dose_date(db, pet.pet_id, "Apoquel") == date(2025, 4, 20)
    assert service.get_next_dose_date(db, pet.pet_id, "Apoquel", 14) == date(2025, 5, 4)


def test_stats_default_to_one_year_window(db, pet):
    service.record_medication(
        db, pet, medication_name="Heartgard Plus", recorded_date=date(2023, 1, 1), scheduled_date=date(2022, 12, 1)
    )
    service.record_medication(
        db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 1, 1), scheduled_date=date(2025, 1, 1)
    )
    service.record_medication(
        db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 5), scheduled_date=date(2025, 1, 31)
    )

    [stats] = service.get_medication_stats(db, pet.pet_id, today=date(2025, 3, 1))
    assert stats.total_doses == 2
    assert stats.on_time_doses == 1
    assert stats.delayed_doses == 1
    assert stats.average_interval_days == 35
    assert stats.compliance_rate == 50

    [all_time] = service.get_medication_stats(db, pet.pet_id, start_date=date(2020, 1, 1))
    assert all_time.total_doses == 3


def test_daily_summary_marks_next_due_date(db, pet):
    service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 14))
    summary = service.get_daily_summary(db, pet, date(2025, 2, 1), date(2025, 3, 31), today=date(2025, 3, 1))
    assert summary[date(2025, 2, 14)].total_completed == 1
    assert summary[date(2025, 3, 16)].medications[0].status == "scheduled"


def test_migration_seeds_one_primary_record(db, pet):
    record = service.migrate_existing_data(db, pet)
    assert record is not None
    assert record.recorded_date == date(2025, 1, 15)
    assert record.is_primary_medication is True
    assert record.notes == service.MIGRATION_NOTE
    assert pet.next_due_date == date(2025, 2, 14)

    assert service.migrate_existing_data(db, pet) is None
    assert len(service.list_records(db, pet.pet_id)) == 1


def test_migration_skips_pets_without_schedule(db):
    pet = Pet(name="Dubu", current_medications=[])
    db.add(pet)
    db.commit()
    assert service.migrate_existing_data(db, pet) is None


def test_unflagging_only_primary_dose_keeps_schedule(db, pet):
    record = service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 14))
    assert pet.next_due_date == date(2025, 3, 16)

    service.update_record(db, record, {"is_primary_medication": False})
    db.refresh(pet)
    assert record.is_primary_medication is False
    assert pet.last_dose_date == date(2025, 2, 14)
    assert pet.next_due_date == date(2025, 3, 16)


def test_deleting_only_primary_dose_keeps_schedule(db, pet):
    record = service.record_medication(db, pet, medication_name="Heartgard Plus", recorded_date=date(2025, 2, 14))

    service.delete_record(db, record)
    db.refresh(pet)
    assert service.list_records(db, pet.pet_id) == []
    assert pet.last_dose_date == date(2025, 2, 14)
    assert pet.next_due_date == date(2025, 3, 16)
