"""
Pytest configuration and fixtures for backend tests.

Provides shared fixtures for:
- Test database sessions (in-memory SQLite with foreign keys enforced)
- A fixed clock for deadline checks
- Sample data factories for events, registrations and volunteer applications
- FastAPI test clients authenticated as an organizer
"""

import os
import pytest
from datetime import date, datetime, timedelta
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
os.environ['EVENTDESK_DB_URL'] = 'sqlite:///:memory:'
os.environ['JWT_SECRET_KEY'] = 'test-secret-key-for-organizer-tokens-0123456789'

from backend.src.models import Base, Event, Registration, VolunteerApplication
from backend.src.middleware.auth import OrganizerContext


FIXED_NOW = datetime(2026, 10, 18, 12, 0, 0)


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(scope='function')
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )

    # Foreign key enforcement is per connection in SQLite
    def _fk_pragma_on_connect(dbapi_con, con_record):
        dbapi_con.execute('pragma foreign_keys=ON')

    event.listen(engine, 'connect', _fk_pragma_on_connect)

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope='function')
def test_db_session(test_db_engine):
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ============================================================================
# Clock and Identity Fixtures
# ============================================================================

@pytest.fixture
def fixed_clock():
    """Clock returning a constant 'now' so deadline checks are deterministic."""
    return lambda: FIXED_NOW


@pytest.fixture
def organizer():
    """The authenticated organizer used by most tests."""
    return OrganizerContext(user_id=7, email="organizer@example.com")


@pytest.fixture
def other_organizer():
    """An organizer who must never see the first organizer's events."""
    return OrganizerContext(user_id=8, email="someone-else@example.com")


# ============================================================================
# Sample Data Factories
# ============================================================================

@pytest.fixture
def sample_event_data():
    """Factory for valid event field sets (deadline after FIXED_NOW)."""
    def _create(
        name='Beach Cleanup',
        description='Bring gloves',
        event_date=date(2026, 11, 20),
        venue='North Pier',
        category='Community',
        created_by=7,
        deadline=FIXED_NOW + timedelta(days=1),
        max_participants=40,
    ):
        return {
            'name': name,
            'description': description,
            'date': event_date,
            'venue': venue,
            'category': category,
            'created_by': created_by,
            'deadline': deadline,
            'max_participants': max_participants,
        }
    return _create


@pytest.fixture
def sample_event(test_db_session, sample_event_data):
    """Factory for creating Event rows directly, bypassing the service."""
    def _create(event_id, **kwargs):
        event_row = Event(event_id=event_id, **sample_event_data(**kwargs))
        test_db_session.add(event_row)
        test_db_session.commit()
        test_db_session.refresh(event_row)
        return event_row
    return _create


@pytest.fixture
def sample_registration(test_db_session):
    """Factory for creating Registration rows."""
    def _create(event_id, user_id):
        registration = Registration(event_id=event_id, user_id=user_id)
        test_db_session.add(registration)
        test_db_session.commit()
        return registration
    return _create


@pytest.fixture
def sample_volunteer_application(test_db_session):
    """Factory for creating VolunteerApplication rows."""
    def _create(event_id, user_id, status='pending'):
        application = VolunteerApplication(
            event_id=event_id, user_id=user_id, status=status
        )
        test_db_session.add(application)
        test_db_session.commit()
        return application
    return _create


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================

def _make_client(test_db_session, ctx=None, clock=None):
    """Build a TestClient bound to the test session.

    When ``ctx`` is given, authentication is replaced by that organizer;
    otherwise the real bearer-token dependency stays in place.
    """
    from fastapi.testclient import TestClient
    from backend.src.main import app
    from backend.src.db.database import get_db
    from backend.src.middleware.auth import require_auth
    from backend.src.api.events import get_event_service
    from backend.src.services.event_service import EventService

    def get_test_db():
        yield test_db_session

    app.dependency_overrides[get_db] = get_test_db
    if ctx is not None:
        app.dependency_overrides[require_auth] = lambda: ctx
    if clock is not None:
        app.dependency_overrides[get_event_service] = (
            lambda: EventService(db=test_db_session, clock=clock)
        )
    return TestClient(app)


@pytest.fixture
def test_client(test_db_session, organizer, fixed_clock):
    """Test client authenticated as `organizer`, sharing the test session."""
    from backend.src.main import app

    with _make_client(test_db_session, organizer, fixed_clock) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def act_as():
    """Switch the organizer that `test_client` is authenticated as."""
    from backend.src.main import app
    from backend.src.middleware.auth import require_auth

    def _switch(ctx):
        app.dependency_overrides[require_auth] = lambda: ctx
    return _switch


@pytest.fixture
def unauthenticated_client(test_db_session, fixed_clock):
    """Test client with the real bearer-token authentication in place."""
    from backend.src.main import app

    with _make_client(test_db_session, clock=fixed_clock) as client:
        yield client

    app.dependency_overrides.clear()
