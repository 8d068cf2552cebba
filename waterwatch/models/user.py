"""
User Model - Submitters, leaders and administrators
"""
from waterwatch import db
from flask import current_app
from flask_login import UserMixin
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from datetime import datetime
import uuid

SUBMITTER_ROLES = ('asha', 'admin', 'leader')


class User(UserMixin, db.Model):
    """User account model"""

    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(120))
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    role = db.Column(db.String(20), nullable=False, default='asha', index=True)  # asha, leader, admin
    number = db.Column(db.String(20))  # E.164 phone number for SMS/WhatsApp alerts
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def generate_auth_token(self):
        """Sign the user id into a bearer token"""
        serializer = URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt='auth-token')
        return serializer.dumps(self.id)

    @staticmethod
    def verify_auth_token(token):
        """
        Resolve a bearer token to its user

        Returns:
            User or None if the token is invalid, expired or unknown
        """
        serializer = URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt='auth-token')
        try:
            user_id = serializer.loads(token, max_age=current_app.config['AUTH_TOKEN_MAX_AGE'])
        except (SignatureExpired, BadSignature):
            return None
        return db.session.get(User, user_id)

    def __repr__(self):
        return f'<User {self.email} ({self.role})>'
