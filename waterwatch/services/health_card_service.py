"""
Health Card Service
Keeps one summary card per waterbody in step with its submitted water tests.
"""
from flask import current_app
from sqlalchemy import func

from waterwatch import db
from waterwatch.models.health_card import HealthCard
from waterwatch.models.water_test import WaterTest

STATUS_BY_QUALITY = {
    'good': 'safe',
    'medium': 'caution',
    'high': 'unsafe',
}


class HealthCardService:
    """Create-or-update of waterbody health cards"""

    @staticmethod
    def find_card(waterbody_name, waterbody_id=None, location=None):
        """
        Find the card for a waterbody

        Cards are matched on waterbody_id when one is known, otherwise on
        (waterbody_name, location).
        """
        if waterbody_id:
            return HealthCard.query.filter_by(waterbody_id=waterbody_id).first()
        return HealthCard.query.filter_by(
            waterbody_name=waterbody_name,
            waterbody_id=None,
            location=location
        ).first()

    @staticmethod
    def tests_for(card):
        """Query of the water tests summarised by a card"""
        if card.waterbody_id:
            return WaterTest.query.filter_by(waterbody_id=card.waterbody_id)
        return WaterTest.query.filter_by(
            waterbody_name=card.waterbody_name,
            waterbody_id=None,
            location=card.location
        )

    @staticmethod
    def recompute(card):
        """Refresh counts, latest quality and status from stored tests"""
        tests = HealthCardService.tests_for(card)

        counts = dict(
            tests.with_entities(WaterTest.quality, func.count(WaterTest.id))
            .group_by(WaterTest.quality)
            .all()
        )
        card.good_count = counts.get('good', 0)
        card.medium_count = counts.get('medium', 0)
        card.high_count = counts.get('high', 0)
        card.total_tests = card.good_count + card.medium_count + card.high_count

        latest = tests.order_by(WaterTest.date_time.desc(), WaterTest.created_at.desc()).first()
        if latest is None:
            card.latest_quality = None
            card.last_tested_at = None
            card.status = 'no_data'
        else:
            card.latest_quality = latest.quality
            card.last_tested_at = latest.date_time
            card.status = STATUS_BY_QUALITY[latest.quality]
        return card

    @staticmethod
    def create_or_update(waterbody_name, waterbody_id=None, location=None,
                         latitude=None, longitude=None, user=None):
        """
        Upsert the health card of a waterbody and commit it

        Args:
            waterbody_name: Waterbody display name
            waterbody_id: Optional external waterbody reference
            location: Free-text location
            latitude, longitude: Optional coordinates; kept when not supplied
            user: User whose submission triggered the update

        Returns:
            The HealthCard
        """
        card = HealthCardService.find_card(waterbody_name, waterbody_id, location)
        if card is None:
            card = HealthCard(
                waterbody_name=waterbody_name,
                waterbody_id=waterbody_id or None,
                location=location
            )
            db.session.add(card)
        else:
            card.waterbody_name = waterbody_name
            if location:
                card.location = location

        if latitude is not None:
            card.latitude = latitude
        if longitude is not None:
            card.longitude = longitude
        if user is not None:
            card.updated_by_id = user.id

        db.session.flush()
        HealthCardService.recompute(card)
        db.session.commit()

        current_app.logger.info(
            f"Health card for {card.waterbody_name} updated: {card.total_tests} tests, status={card.status}"
        )
        return card
