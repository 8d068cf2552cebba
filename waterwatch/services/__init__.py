"""
WaterWatch Services - Alerting, notification delivery and health cards
"""
from waterwatch.services.alert_service import AlertService
from waterwatch.services.notification_service import NotificationService
from waterwatch.services.health_card_service import HealthCardService

__all__ = ['AlertService', 'NotificationService', 'HealthCardService']
