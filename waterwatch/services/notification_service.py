"""
Notification Service
Handles SMS and WhatsApp alert delivery via Twilio.
"""
from datetime import datetime
from flask import current_app
import phonenumbers
from phonenumbers import NumberParseException
from twilio.rest import Client
from twilio.base.exceptions import TwilioRestException

from waterwatch import db
from waterwatch.models.notification_log import NotificationLog


class NotificationService:
    """Service for sending notifications via Twilio (SMS, WhatsApp)"""

    def __init__(self):
        """Initialize Twilio client if credentials are configured"""
        self.account_sid = current_app.config.get('TWILIO_ACCOUNT_SID')
        self.auth_token = current_app.config.get('TWILIO_AUTH_TOKEN')
        self.phone_number = current_app.config.get('TWILIO_PHONE_NUMBER')
        self.whatsapp_number = current_app.config.get('TWILIO_WHATSAPP_NUMBER')
        self.client = None

        if self.account_sid and self.auth_token:
            self.client = Client(self.account_sid, self.auth_token)
            current_app.logger.info("Twilio client initialized successfully")
        else:
            current_app.logger.warning("Twilio credentials not configured")

    def validate_phone_number(self, phone_number, default_region="IN"):
        """
        Validate and format phone number to E.164 format

        Args:
            phone_number: Phone number string
            default_region: Default country code (default: India)

        Returns:
            Formatted phone number in E.164 format or None if invalid
        """
        try:
            parsed = phonenumbers.parse(phone_number, default_region)
            # Length check only; numbering-plan validity is left to Twilio
            if not phonenumbers.is_possible_number(parsed):
                current_app.logger.warning(f"Invalid phone number: {phone_number}")
                return None
            return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
        except NumberParseException as e:
            current_app.logger.error(f"Phone number parse error for {phone_number}: {e}")
            return None

    def send_sms(self, to_phone, message, water_test_id=None, user_id=None):
        """
        Send SMS via Twilio

        Args:
            to_phone: Recipient phone number
            message: SMS message content
            water_test_id: Optional water test that triggered the message
            user_id: Optional recipient user id

        Returns:
            Twilio message SID if successful, None otherwise
        """
        if not current_app.config.get('SMS_ENABLED'):
            current_app.logger.info(f"SMS disabled. Would send to {to_phone}: {message}")
            return None

        to_phone = self.validate_phone_number(to_phone)
        if not to_phone:
            current_app.logger.error("Invalid phone number for SMS")
            return None

        return self._deliver('sms', self.phone_number, to_phone, message, water_test_id, user_id)

    def send_whatsapp(self, to_phone, message, water_test_id=None, user_id=None):
        """
        Send WhatsApp message via Twilio

        Args:
            to_phone: Recipient phone number
            message: WhatsApp message content
            water_test_id: Optional water test that triggered the message
            user_id: Optional recipient user id

        Returns:
            Twilio message SID if successful, None otherwise
        """
        if not current_app.config.get('WHATSAPP_ENABLED'):
            current_app.logger.info(f"WhatsApp disabled. Would send to {to_phone}: {message}")
            return None

        validated_phone = self.validate_phone_number(to_phone)
        if not validated_phone:
            return None

        # WhatsApp requires whatsapp: prefix on both ends
        from_number = self.whatsapp_number or ''
        if not from_number.startswith('whatsapp:'):
            from_number = f'whatsapp:{from_number}'

        return self._deliver('whatsapp', from_number, f'whatsapp:{validated_phone}', message,
                             water_test_id, user_id)

    def _deliver(self, notification_type, from_number, to_phone, message, water_test_id, user_id):
        """Send one message and record the attempt in NotificationLog"""
        if not self.client:
            current_app.logger.error("Twilio client not initialized")
            return None

        log = NotificationLog(
            notification_type=notification_type,
            recipient_phone=to_phone,
            message_content=message,
            water_test_id=water_test_id,
            user_id=user_id,
            status='pending'
        )
        db.session.add(log)
        db.session.commit()

        try:
            twilio_message = self.client.messages.create(
                body=message,
                from_=from_number,
                to=to_phone
            )

            log.twilio_message_sid = twilio_message.sid
            log.status = twilio_message.status
            log.sent_at = datetime.utcnow()
            db.session.commit()

            current_app.logger.info(f"{notification_type} sent: {twilio_message.sid} to {to_phone}")
            return twilio_message.sid

        except TwilioRestException as e:
            log.status = 'failed'
            log.error_message = str(e)
            log.twilio_error_code = str(e.code) if e.code is not None else None
            log.failed_at = datetime.utcnow()
            db.session.commit()
            current_app.logger.error(f"{notification_type} failed: {e}")
            return None
        except Exception as e:
            log.status = 'failed'
            log.error_message = str(e)
            log.failed_at = datetime.utcnow()
            db.session.commit()
            current_app.logger.error(f"Unexpected error sending {notification_type}: {e}")
            return None
