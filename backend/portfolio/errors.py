from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from portfolio.domain.exceptions import DomainError
from portfolio.extensions import db


def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        response = jsonify({
            "error": error.kind,
            "message": error.message
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        current_app.logger.exception("Unhandled error: %s", error)
        response = jsonify({
            "error": "InternalServerError",
            "message": "Internal Server Error",
            "errorDetails": str(error)
        })
        response.status_code = 500
        return response
