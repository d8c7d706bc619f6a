"""
Pytest configuration and shared fixtures.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tradevault.core.config import reset_settings
from tradevault.core.database import reset_engine
from tradevault.core.models import Base
from tradevault.search.records import AssetRecord, InvestmentRecord, UserRecord


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    """
    Clean environment for testing.

    Removes all app-related env vars to ensure clean state.
    """
    env_vars = [
        "DATABASE_URL",
        "SEARCH_USE_DATABASE",
        "SEARCH_DEFAULT_LIMIT",
        "SUGGESTION_DEFAULT_LIMIT",
        "SEED_DEMO_DATA",
        "LOG_LEVEL",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)

    # Reset settings and engine singletons
    reset_settings()
    reset_engine()

    yield

    # Reset again after test
    reset_settings()
    reset_engine()


@pytest.fixture(scope="function")
def test_engine():
    """
    In-memory SQLite engine shared across threads.

    StaticPool keeps a single connection so the TestClient's worker thread
    sees the same database as the test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """
    Create an in-memory SQLite database for testing.

    Fresh database for each test.
    """
    Base.metadata.create_all(bind=test_engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def empty_db(test_engine):
    """Session on a database with no tables, so every query fails."""
    db = sessionmaker(bind=test_engine)()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Record factories
# =============================================================================


def _make_asset(id="a-1", name="Test Asset", **kwargs):
    return AssetRecord(
        id=id,
        name=name,
        type=kwargs.get("type", "container"),
        value=kwargs.get("value", "$10,000"),
        apr=kwargs.get("apr", "10.0%"),
        risk=kwargs.get("risk", "Medium"),
        status=kwargs.get("status", "active"),
        created_at=kwargs.get("created_at", "2024-01-01T00:00:00Z"),
        description=kwargs.get("description"),
        route=kwargs.get("route"),
        cargo=kwargs.get("cargo"),
        issuer_id=kwargs.get("issuer_id"),
    )


def _make_user(id="u-1", first_name="Test", last_name="User", **kwargs):
    return UserRecord(
        id=id,
        email=kwargs.get("email", f"{id}@example.com"),
        first_name=first_name,
        last_name=last_name,
        role=kwargs.get("role", "investor"),
        status=kwargs.get("status", "active"),
        country=kwargs.get("country", "UAE"),
        created_at=kwargs.get("created_at", "2024-01-01T00:00:00Z"),
        phone=kwargs.get("phone"),
        kyc_status=kwargs.get("kyc_status"),
    )


def _make_investment(id="i-1", amount=1000.0, **kwargs):
    return InvestmentRecord(
        id=id,
        user_id=kwargs.get("user_id", "u-1"),
        asset_id=kwargs.get("asset_id", "a-1"),
        amount=amount,
        status=kwargs.get("status", "pending"),
        investment_type=kwargs.get("investment_type", "primary"),
        created_at=kwargs.get("created_at", "2024-01-01T00:00:00Z"),
        expected_return=kwargs.get("expected_return"),
    )


@pytest.fixture
def make_asset():
    return _make_asset


@pytest.fixture
def make_user():
    return _make_user


@pytest.fixture
def make_investment():
    return _make_investment


@pytest.fixture
def sample_assets():
    """Three assets with distinct dates and values."""
    return [
        _make_asset(
            "asset-1",
            "Jebel Ali-Dubai Container",
            type="container",
            value="$45,000",
            route="Jebel Ali Port → Dubai",
            cargo="Electronics & Luxury Goods",
            created_at="2024-01-15T10:00:00Z",
        ),
        _make_asset(
            "asset-2",
            "Dubai Marina Office Tower",
            type="property",
            value="$350,000",
            route="Dubai Marina, UAE",
            cargo="Commercial Real Estate",
            created_at="2024-01-08T09:15:00Z",
        ),
        _make_asset(
            "asset-3",
            "Abu Dhabi Diamond Vault",
            type="vault",
            value="$15,000",
            route="Abu Dhabi Global Market",
            cargo="Diamonds & Precious Stones",
            status="pending",
            created_at="2024-01-09T12:15:00Z",
        ),
    ]


@pytest.fixture
def sample_users():
    return [
        _make_user("u-1", "Alice", "Johnson", role="investor", country="UAE",
                   created_at="2024-01-10T09:00:00Z"),
        _make_user("u-2", "Alicia", "Jones", role="issuer", country="Oman",
                   created_at="2024-01-12T09:00:00Z"),
    ]


@pytest.fixture
def sample_investments():
    return [
        _make_investment("i-1", 50000.0, asset_id="asset-1", user_id="u-1",
                         status="completed", created_at="2024-01-15T10:00:00Z"),
        _make_investment("i-2", 75000.0, asset_id="asset-2", user_id="u-1",
                         status="pending", investment_type="secondary",
                         created_at="2024-01-20T09:15:00Z"),
    ]
