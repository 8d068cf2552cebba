import pytest
from datetime import datetime
from unittest.mock import patch
from flask import g

from waterwatch import create_app, db
from waterwatch.models import User, WaterTest
from waterwatch.services.notification_service import NotificationService


@pytest.fixture
def app():
    """Flask app bound to a fresh in-memory database"""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    @app.before_request
    def reset_login_user():
        # The test app context outlives requests; drop the cached caller
        g.pop('_login_user', None)

    return app.test_client()


@pytest.fixture
def make_user(app):
    """Factory for persisted users"""
    counter = {'n': 0}

    def _make_user(role='asha', number=None, name=None):
        counter['n'] += 1
        user = User(
            name=name or f'{role} {counter["n"]}',
            email=f'{role}{counter["n"]}@example.org',
            role=role,
            number=number
        )
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {'Authorization': f'Bearer {user.generate_auth_token()}'}
    return _auth_headers


@pytest.fixture
def asha(make_user):
    return make_user('asha', number='+919876543210')


@pytest.fixture
def admin(make_user):
    return make_user('admin')


@pytest.fixture
def make_water_test(app):
    """Factory for water tests inserted directly, bypassing the API"""
    def _make_water_test(owner, **fields):
        values = {
            'waterbody_name': 'Rani Talab',
            'location': 'Ward 4, Rewa',
            'date_time': datetime(2025, 9, 11, 10, 0),
            'photo_url': 'https://img.example.org/rani.jpg',
            'notes': 'Clear water',
            'quality': 'good',
            'asha_id': owner.id,
        }
        values.update(fields)
        record = WaterTest(**values)
        db.session.add(record)
        db.session.commit()
        return record
    return _make_water_test


@pytest.fixture
def payload():
    """Valid create request body"""
    return {
        'waterbodyName': 'Rani Talab',
        'waterbodyId': 'WB-102',
        'dateTime': '2025-09-11T10:00:00Z',
        'location': 'Ward 4, Rewa',
        'latitude': 24.53,
        'longitude': 81.30,
        'photoUrl': 'https://img.example.org/rani.jpg',
        'notes': 'Greenish tint near the ghat',
        'quality': 'good'
    }


@pytest.fixture
def sent_messages():
    """Capture SMS/WhatsApp sends instead of calling Twilio"""
    with patch.object(NotificationService, 'send_sms', return_value='SMxxxx') as sms, \
            patch.object(NotificationService, 'send_whatsapp', return_value='SMyyyy') as whatsapp:
        yield {'sms': sms, 'whatsapp': whatsapp}
