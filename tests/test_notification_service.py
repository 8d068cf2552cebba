from unittest.mock import patch, Mock

import pytest
from twilio.base.exceptions import TwilioRestException

from waterwatch.models.notification_log import NotificationLog
from waterwatch.services.notification_service import NotificationService


@pytest.fixture
def twilio_app(app):
    app.config.update(
        SMS_ENABLED=True,
        WHATSAPP_ENABLED=True,
        TWILIO_ACCOUNT_SID='ACtest',
        TWILIO_AUTH_TOKEN='token',
        TWILIO_PHONE_NUMBER='+15005550006',
        TWILIO_WHATSAPP_NUMBER='+14155238886',
    )
    return app


@pytest.fixture
def twilio_client():
    with patch('waterwatch.services.notification_service.Client') as client_cls:
        client = client_cls.return_value
        client.messages.create.return_value = Mock(sid='SM123', status='queued')
        yield client


def test_disabled_sms_is_logged_not_sent(app, twilio_client):
    service = NotificationService()

    assert service.send_sms('+919876543210', 'hello') is None
    twilio_client.messages.create.assert_not_called()
    assert NotificationLog.query.count() == 0


def test_validate_phone_number_normalises_to_e164(app):
    service = NotificationService()

    assert service.validate_phone_number('+91 98765 43210') == '+919876543210'
    assert service.validate_phone_number('098765 43210') == '+919876543210'
    assert service.validate_phone_number('+911234567890') == '+911234567890'
    assert service.validate_phone_number('invalid') is None
    assert service.validate_phone_number('+9112') is None


def test_send_sms_records_queued_message(twilio_app, twilio_client, asha, make_water_test):
    record = make_water_test(asha, quality='high')
    service = NotificationService()

    sid = service.send_sms('+919876543210', 'alert body', water_test_id=record.id, user_id=asha.id)

    assert sid == 'SM123'
    twilio_client.messages.create.assert_called_once_with(
        body='alert body', from_='+15005550006', to='+919876543210'
    )
    log = NotificationLog.query.one()
    assert log.notification_type == 'sms'
    assert log.status == 'queued'
    assert log.twilio_message_sid == 'SM123'
    assert log.sent_at is not None
    assert log.water_test_id == record.id
    assert log.user_id == asha.id


def test_send_whatsapp_uses_whatsapp_addresses(twilio_app, twilio_client):
    service = NotificationService()

    service.send_whatsapp('+919876543210', 'alert body')

    twilio_client.messages.create.assert_called_once_with(
        body='alert body', from_='whatsapp:+14155238886', to='whatsapp:+919876543210'
    )
    assert NotificationLog.query.one().recipient_phone == 'whatsapp:+919876543210'


def test_twilio_error_marks_log_failed(twilio_app, twilio_client):
    twilio_client.messages.create.side_effect = TwilioRestException(
        400, 'https://api.twilio.com/Messages', msg='unreachable', code=21211
    )
    service = NotificationService()

    assert service.send_sms('+919876543210', 'alert body') is None

    log = NotificationLog.query.one()
    assert log.status == 'failed'
    assert log.twilio_error_code == '21211'
    assert log.failed_at is not None


def test_missing_credentials_skip_delivery(app):
    app.config['SMS_ENABLED'] = True
    service = NotificationService()

    assert service.client is None
    assert service.send_sms('+919876543210', 'alert body') is None
    assert NotificationLog.query.count() == 0
