"""
API error taxonomy and JSON error handlers

Controllers raise these instead of returning jsonify(...), code inline so
that helpers shared by several routes (lookup, ownership check, field
parsing) can stop a request, and every error leaves as the same {message}
body.
"""
from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

from waterwatch import db


class ApiError(Exception):
    """Error with a caller-facing message and HTTP status"""
    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class AuthorizationError(ApiError):
    status_code = 403

    def __init__(self, message='forbidden'):
        super().__init__(message)


class NotFoundError(ApiError):
    status_code = 404


def register_error_handlers(app):
    """Render every error raised inside a request as {message} JSON"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify({'message': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        current_app.logger.exception(f"Unhandled error: {error}")
        return jsonify({'message': 'Internal Server Error'}), 500
