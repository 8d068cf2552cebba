"""
Notification Log Model
Tracks all SMS and WhatsApp notifications sent via Twilio
"""
from datetime import datetime
from waterwatch import db


class NotificationLog(db.Model):
    """Log of all notifications sent via Twilio (SMS, WhatsApp)"""
    __tablename__ = 'notification_log'

    id = db.Column(db.Integer, primary_key=True)
    notification_type = db.Column(db.String(20), nullable=False, index=True)  # 'sms', 'whatsapp'
    recipient_phone = db.Column(db.String(40))
    message_content = db.Column(db.Text)
    status = db.Column(db.String(20), default='pending', index=True)  # pending, queued, sent, delivered, failed
    twilio_message_sid = db.Column(db.String(100), unique=True, index=True)
    twilio_error_code = db.Column(db.String(10))
    error_message = db.Column(db.Text)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    sent_at = db.Column(db.DateTime)
    failed_at = db.Column(db.DateTime)

    # Related entities
    water_test_id = db.Column(db.String(36), db.ForeignKey('water_tests.id', ondelete='SET NULL'),
                              nullable=True, index=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=True)

    def __repr__(self):
        return f'<NotificationLog {self.id} {self.notification_type} to {self.recipient_phone} status={self.status}>'
