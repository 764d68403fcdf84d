"""Pytest fixtures: a throwaway SQLite database wired into the app's dependencies."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, sessionmaker

import database.models  # noqa: F401  registers the tables on Base.metadata
from database.init import Base, get_db, get_session_factory
from database.models import Room
from main import app


@pytest.fixture
def rent_due():
    """Tenant id -> amount returned by the GetTotalRentDue function."""
    return {}


@pytest.fixture
def engine(tmp_path, rent_due):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'rental.db'}",
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_connection.create_function(
            "GetTotalRentDue", 1, lambda tenant_id: rent_due.get(tenant_id)
        )

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
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
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def owner(client):
    payload = {
        "OwnerID": 2,
        "name": "Meera Nair",
        "phone": "9000000001",
        "email": "meera@example.com",
        "address": "12 MG Road, Pune",
    }
    response = client.post("/Owner", json=payload)
    assert response.status_code == 201
    return payload


@pytest.fixture
def property_id(client, owner):
    response = client.post(
        "/Property",
        json={"name": "Lakeview PG", "location": "Pune", "TotalRooms": 10, "OwnerID": owner["OwnerID"]},
    )
    assert response.status_code == 201
    return response.json()["PropertyID"]


@pytest.fixture
def room_id(session_factory, property_id):
    """Room 5 of the seeded property."""
    with session_factory() as session:
        session.add(
            Room(
                RoomID=5,
                BedCount=3,
                OccupiedBeds=0,
                RentAmount=100,
                RoomType="Shared",
                PropertyID=property_id,
            )
        )
        session.commit()
    return 5


@pytest.fixture
def tenant_payload(owner, room_id):
    def build(**overrides):
        payload = {
            "firstName": "Asha",
            "lastName": "Rao",
            "phones": ["111"],
            "emails": ["a@x.com"],
            "CheckInDate": "2024-01-01",
            "RoomID": room_id,
            "OwnerID": owner["OwnerID"],
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def tenant_id(client, tenant_payload):
    response = client.post("/Tenant", json=tenant_payload())
    assert response.status_code == 201
    return response.json()["tenant"]["TenantID"]


@pytest.fixture
def fail_bulk_delete(monkeypatch):
    """Make ``Query.delete`` raise for one mapped model, leaving the others intact."""

    def install(model):
        original = Query.delete

        def delete(self, *args, **kwargs):
            if self.column_descriptions[0]["entity"] is model:
                raise SQLAlchemyError(f"{model.__tablename__} delete failed")
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Query, "delete", delete)

    return install
