"""
WaterWatch - Database Models
"""
from waterwatch.models.user import User
from waterwatch.models.water_test import WaterTest
from waterwatch.models.alerts import LeaderAlert, GlobalAlert
from waterwatch.models.health_card import HealthCard
from waterwatch.models.notification_log import NotificationLog

__all__ = [
    # Core Models
    'User',
    'WaterTest',

    # Alerts
    'LeaderAlert',
    'GlobalAlert',

    # Derived summaries
    'HealthCard',

    # Communication & Notifications
    'NotificationLog',
]
