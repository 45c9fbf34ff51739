"""
Shared fixtures: a throwaway SQLite database per test, seeded reference rows
and an API client bound to the same database.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from logistics.core import Base, build_engine, get_db
from logistics.models import Warehouse, Resource, Order


@pytest.fixture
def engine(tmp_path):
    test_engine = build_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def warehouses(db):
    north = Warehouse(code="W1", name="North Depot", location="Sector 1")
    south = Warehouse(code="W2", name="South Depot", location="Sector 7")
    db.add_all([north, south])
    db.commit()
    return north.id, south.id


@pytest.fixture
def resource_id(db):
    resource = Resource(code="FUEL-D", name="Diesel (20L jerrycan)", resource_type="FUEL", criticality="HIGH")
    db.add(resource)
    db.commit()
    return resource.id


@pytest.fixture
def other_resource_id(db):
    resource = Resource(code="RAT-MRE", name="Ration pack", resource_type="RATIONS", criticality="MEDIUM")
    db.add(resource)
    db.commit()
    return resource.id


@pytest.fixture
def order_id(db):
    order = Order(reference="ORD-0001", unit_code="3RD-BN")
    db.add(order)
    db.commit()
    return order.id


@pytest.fixture
def client(session_factory):
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
