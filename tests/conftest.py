"""
Pytest configuration and shared fixtures for the incident reporting test suite.
"""
import tempfile

import pytest

from app import create_app
from config import Config
from extensions import db


class TestConfig(Config):
    """Test configuration class."""
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SECRET_KEY = 'test-secret-key'
    BASE_URL = 'http://localhost'
    BASE_UPLOAD_DIR = tempfile.mkdtemp()
    STORAGE_PUBLIC_URL = 'http://localhost/storage'
    FORCE_HTTPS = False
    SESSION_COOKIE_SECURE = False
    UPLOAD_WORKERS = 3


TEST_USER_ID = 'user-123'


@pytest.fixture(scope='session')
def app():
    """Create application for the tests."""
    app = create_app(config_obj=TestConfig)

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture(scope='session')
def models(app):
    return app.models


@pytest.fixture(scope='function')
def client(app):
    """Create a test client for the Flask application."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a database session for testing."""
    with app.app_context():
        db.create_all()

    yield db.session

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def request_ctx(app):
    """Request context for code that flashes messages or builds URLs."""
    with app.test_request_context('/reports/new', method='POST') as ctx:
        yield ctx


@pytest.fixture
def authenticated_client(client):
    """Create an authenticated test client."""
    with client.session_transaction() as sess:
        sess['user_id'] = TEST_USER_ID
    return client


@pytest.fixture
def categories(db_session, models):
    """Two main categories with their subcategories."""
    MainCategory = models['MainCategory']
    Subcategory = models['Subcategory']

    theft = MainCategory(name='Theft')
    harassment = MainCategory(name='Harassment')
    db_session.add_all([theft, harassment])
    db_session.flush()

    burglary = Subcategory(main_category_id=theft.id, name='Burglary')
    pickpocketing = Subcategory(main_category_id=theft.id, name='Pickpocketing')
    vehicle = Subcategory(main_category_id=theft.id, name='Vehicle theft')
    online = Subcategory(main_category_id=harassment.id, name='Online')
    db_session.add_all([burglary, pickpocketing, vehicle, online])
    db_session.commit()

    return {
        'theft': theft.id,
        'harassment': harassment.id,
        'burglary': burglary.id,
        'pickpocketing': pickpocketing.id,
        'vehicle': vehicle.id,
        'online': online.id,
    }


@pytest.fixture
def sample_report(db_session, models, categories):
    """A stored report with two subcategory assignments."""
    Report = models['Report']
    CategoryAssignment = models['CategoryAssignment']

    report = Report(
        title='Bike stolen',
        description='My bike was taken from the rack.',
        incident_date='2026-09-14',
        incident_time='18:30',
        location='Main library',
        main_category_id=categories['theft'],
        user_id=TEST_USER_ID,
    )
    db_session.add(report)
    db_session.flush()
    db_session.add_all([
        CategoryAssignment(report_id=report.id, subcategory_id=categories['burglary'],
                           main_category_id=categories['theft']),
        CategoryAssignment(report_id=report.id, subcategory_id=categories['vehicle'],
                           main_category_id=categories['theft']),
    ])
    db_session.commit()
    return report

