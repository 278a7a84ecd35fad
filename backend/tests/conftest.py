import os

# Settings are read at import time; point them at a throwaway database first.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dogiguard.api.v1.routes.deps import get_db
from dogiguard.db.base import Base
from dogiguard.db.init_db import init_db
from dogiguard.db.models.pet import Pet
from dogiguard.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def pet(db):
    pet = Pet(
        name="Bori",
        species="dog",
        date_of_birth=date(2019, 6, 15),
        current_medications=["Heartgard Plus", "Apoquel"],
        primary_medication_name="Heartgard Plus",
        last_dose_date=date(2025, 1, 15),
        next_due_date=date(2025, 2, 14),
        dose_interval_days=30,
    )
    db.add(pet)
    db.commit()
    db.refresh(pet)
    return pet
