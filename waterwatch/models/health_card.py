"""
Health Card Model - Derived per-waterbody quality summary
"""
from waterwatch import db
from datetime import datetime
import uuid


class HealthCard(db.Model):
    """Summary of all water tests recorded for one waterbody"""

    __tablename__ = 'health_cards'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Waterbody identity
    waterbody_name = db.Column(db.String(200), nullable=False, index=True)
    waterbody_id = db.Column(db.String(64), unique=True, index=True)
    location = db.Column(db.String(255))
    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)

    # Aggregates
    total_tests = db.Column(db.Integer, default=0)
    good_count = db.Column(db.Integer, default=0)
    medium_count = db.Column(db.Integer, default=0)
    high_count = db.Column(db.Integer, default=0)
    latest_quality = db.Column(db.String(10))
    last_tested_at = db.Column(db.DateTime)
    status = db.Column(db.String(20), default='no_data')  # safe, caution, unsafe, no_data

    # Metadata
    updated_by_id = db.Column(db.String(36), db.ForeignKey('users.id'))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, index=True)

    def __repr__(self):
        return f'<HealthCard {self.waterbody_name}: {self.status}>'

    def to_dict(self):
        """Convert health card to dictionary"""
        return {
            'id': self.id,
            'waterbodyName': self.waterbody_name,
            'waterbodyId': self.waterbody_id,
            'location': self.location,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'totalTests': self.total_tests,
            'qualityCounts': {
                'good': self.good_count,
                'medium': self.medium_count,
                'high': self.high_count
            },
            'latestQuality': self.latest_quality,
            'lastTestedAt': self.last_tested_at.isoformat() if self.last_tested_at else None,
            'status': self.status,
            'updatedById': self.updated_by_id,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None
        }
