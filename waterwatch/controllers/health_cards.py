"""Health card routes - Read-only waterbody summaries"""
from flask import Blueprint, jsonify
from flask_login import login_required
from waterwatch import db
from waterwatch.errors import NotFoundError
from waterwatch.models.health_card import HealthCard

health_cards_bp = Blueprint('health_cards', __name__, url_prefix='/api/health-cards')


@health_cards_bp.route('/', methods=['GET'])
@login_required
def list_health_cards():
    """All health cards, most recently updated first"""
    cards = HealthCard.query.order_by(HealthCard.updated_at.desc()).all()
    return jsonify([card.to_dict() for card in cards])


@health_cards_bp.route('/<card_id>', methods=['GET'])
@login_required
def get_health_card(card_id):
    card = db.session.get(HealthCard, card_id)
    if card is None:
        raise NotFoundError('health card not found')
    return jsonify(card.to_dict())
