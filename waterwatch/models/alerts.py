"""
Alert Models - In-app alerts raised by water tests
"""
from waterwatch import db
from datetime import datetime
import uuid


class LeaderAlert(db.Model):
    """Per-leader alert raised by a medium quality test"""

    __tablename__ = 'leader_alerts'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    leader_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    # Kept when the test is deleted
    water_test_id = db.Column(db.String(36), db.ForeignKey('water_tests.id', ondelete='SET NULL'),
                              index=True)
    is_read = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f'<LeaderAlert {self.id} leader={self.leader_id}>'


class GlobalAlert(db.Model):
    """System-wide alert raised by a high risk test"""

    __tablename__ = 'global_alerts'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    message = db.Column(db.Text, nullable=False)
    water_test_id = db.Column(db.String(36), db.ForeignKey('water_tests.id', ondelete='SET NULL'),
                              index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f'<GlobalAlert {self.id}>'
