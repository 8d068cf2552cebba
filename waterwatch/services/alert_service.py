"""
Alert Service
Raises in-app alerts for risky water tests and fans them out over SMS and WhatsApp.

medium -> one LeaderAlert per leader, messages to leaders
high   -> one GlobalAlert, messages to every user
good   -> nothing
"""
import re
from datetime import timezone
from zoneinfo import ZoneInfo
from flask import current_app

from waterwatch import db
from waterwatch.models.user import User
from waterwatch.models.alerts import LeaderAlert, GlobalAlert
from waterwatch.services.notification_service import NotificationService

E164_PATTERN = re.compile(r'^\+\d{10,15}$')

MESSAGE_HEADINGS = {
    'medium': '⚠️ Medium Water Quality Alert',
    'high': '🚨 HIGH RISK ALERT',
}


def is_valid_phone_number(number):
    """True for strings of the form +<10-15 digits>"""
    return isinstance(number, str) and E164_PATTERN.match(number) is not None


def format_alert_datetime(value, tz_name='Asia/Kolkata'):
    """
    Render a timestamp for alert messages, e.g. 'Thu, 11 Sep 2025, 03:30 PM'

    Naive datetimes are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(tz_name)).strftime('%a, %d %b %Y, %I:%M %p')


class AlertService:
    """Tiered alerting for newly created water tests"""

    def __init__(self, notifier=None):
        self._notifier = notifier

    @property
    def notifier(self):
        if self._notifier is None:
            self._notifier = NotificationService()
        return self._notifier

    def create_in_app_alerts(self, record):
        """
        Add the alert rows for a water test to the current session

        The caller commits; ``record`` must already be flushed so it has an id.

        Args:
            record: Newly created WaterTest

        Returns:
            List of (user_id, number) rows to notify by SMS/WhatsApp
        """
        if record.quality == 'medium':
            leaders = db.session.query(User.id, User.number).filter(User.role == 'leader').all()
            if leaders:
                db.session.add_all([
                    LeaderAlert(
                        leader_id=leader_id,
                        message=f'⚠️ Medium Water Quality at {record.waterbody_name}',
                        water_test_id=record.id
                    )
                    for leader_id, _ in leaders
                ])
            return leaders

        if record.quality == 'high':
            db.session.add(GlobalAlert(
                message=f'🚨 High Risk Water Quality detected at {record.waterbody_name}',
                water_test_id=record.id
            ))
            return db.session.query(User.id, User.number).all()

        return []

    def build_message(self, record):
        """SMS/WhatsApp body for a medium or high quality test"""
        tz_name = current_app.config.get('ALERT_TIMEZONE', 'Asia/Kolkata')
        return (
            f"{MESSAGE_HEADINGS[record.quality]}\n"
            f"Waterbody: {record.waterbody_name}\n"
            f"Location: {record.location}\n"
            f"Date: {format_alert_datetime(record.date_time, tz_name)}"
        )

    def notify(self, record, recipients):
        """
        Send SMS then WhatsApp to every recipient with a valid number, one at a time

        A failure for one recipient is logged and does not stop the others.

        Returns:
            Number of recipients a send was attempted for
        """
        if not recipients:
            return 0

        message = self.build_message(record)
        attempted = 0
        for user_id, number in recipients:
            if not is_valid_phone_number(number):
                current_app.logger.warning(f"Skipping invalid {record.quality} alert number: {number} (user {user_id})")
                continue

            attempted += 1
            try:
                self.notifier.send_sms(number, message, water_test_id=record.id, user_id=user_id)
                self.notifier.send_whatsapp(number, message, water_test_id=record.id, user_id=user_id)
            except Exception as e:
                db.session.rollback()
                current_app.logger.error(f"Alert delivery to {number} failed for water test {record.id}: {e}")

        current_app.logger.info(
            f"{record.quality} alert for water test {record.id}: {attempted} of {len(recipients)} recipients messaged"
        )
        return attempted
