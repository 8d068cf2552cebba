from datetime import datetime, timezone, timedelta
from unittest.mock import Mock

import pytest

from waterwatch import db
from waterwatch.models import LeaderAlert, GlobalAlert
from waterwatch.services.alert_service import AlertService, is_valid_phone_number, format_alert_datetime


@pytest.mark.parametrize('number, expected', [
    ('+911234567890', True),
    ('+123456789012345', True),
    ('+123456789', False),
    ('+1234567890123456', False),
    ('911234567890', False),
    ('+91 12345 67890', False),
    ('invalid', False),
    ('', False),
    (None, False),
    (911234567890, False),
])
def test_is_valid_phone_number(number, expected):
    assert is_valid_phone_number(number) is expected


def test_format_alert_datetime_treats_naive_values_as_utc():
    assert format_alert_datetime(datetime(2025, 9, 11, 10, 0)) == 'Thu, 11 Sep 2025, 03:30 PM'


def test_format_alert_datetime_converts_aware_values():
    value = datetime(2025, 9, 11, 23, 45, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert format_alert_datetime(value) == 'Thu, 11 Sep 2025, 11:45 PM'
    assert format_alert_datetime(value, 'UTC') == 'Thu, 11 Sep 2025, 06:15 PM'


def test_good_quality_adds_no_alerts(app, asha, make_user, make_water_test):
    make_user('leader', number='+911234567890')
    record = make_water_test(asha, quality='good')

    assert AlertService().create_in_app_alerts(record) == []
    db.session.commit()
    assert LeaderAlert.query.count() == 0
    assert GlobalAlert.query.count() == 0


def test_medium_quality_returns_leaders_as_recipients(app, asha, make_user, make_water_test):
    leader = make_user('leader', number='+911234567890')
    record = make_water_test(asha, quality='medium')

    recipients = AlertService().create_in_app_alerts(record)
    db.session.commit()

    assert [tuple(row) for row in recipients] == [(leader.id, '+911234567890')]
    assert LeaderAlert.query.one().leader_id == leader.id


def test_notify_skips_invalid_numbers_and_isolates_failures(app, asha, make_water_test):
    record = make_water_test(asha, quality='high')
    notifier = Mock()
    notifier.send_sms.side_effect = [RuntimeError('timeout'), 'SM1']

    attempted = AlertService(notifier=notifier).notify(record, [
        ('u1', '+911111111111'),
        ('u2', None),
        ('u3', 'bogus'),
        ('u4', '+912222222222'),
    ])

    assert attempted == 2
    assert notifier.send_sms.call_count == 2
    notifier.send_whatsapp.assert_called_once()
    assert notifier.send_whatsapp.call_args.args[0] == '+912222222222'
    assert notifier.send_whatsapp.call_args.kwargs == {'water_test_id': record.id, 'user_id': 'u4'}


def test_build_message_uses_configured_timezone(app, asha, make_water_test):
    app.config['ALERT_TIMEZONE'] = 'UTC'
    record = make_water_test(asha, quality='medium')

    message = AlertService(notifier=Mock()).build_message(record)

    assert message == (
        '⚠️ Medium Water Quality Alert\n'
        'Waterbody: Rani Talab\n'
        'Location: Ward 4, Rewa\n'
        'Date: Thu, 11 Sep 2025, 10:00 AM'
    )


def test_notify_without_recipients_does_not_build_notifier(app, asha, make_water_test):
    record = make_water_test(asha, quality='high')
    service = AlertService()

    assert service.notify(record, []) == 0
    assert service._notifier is None
