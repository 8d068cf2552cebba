"""
Request authentication and the shared authorization predicate
"""
from flask import jsonify

from waterwatch import login_manager
from waterwatch.models.user import User


@login_manager.request_loader
def load_user_from_request(req):
    """Load the caller from an 'Authorization: Bearer <token>' header"""
    header = req.headers.get('Authorization', '')
    if not header.startswith('Bearer '):
        return None
    user = User.verify_auth_token(header[len('Bearer '):].strip())
    if user is None or not user.is_active:
        return None
    return user


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'message': 'unauthorized'}), 401


def is_authorized(role, user_id, owner_id=None, roles=()):
    """
    Decide whether a caller may act on a resource

    Args:
        role: Caller's role
        user_id: Caller's id
        owner_id: Owner of the resource, if the action is ownership-gated
        roles: Roles allowed regardless of ownership

    Returns:
        True if the caller holds one of ``roles`` or owns the resource
    """
    if role in roles:
        return True
    return owner_id is not None and user_id == owner_id
