# hostprompt/errors.py
"""
Error taxonomy for the JSON API.

Only NotFound, Forbidden, ValidationError and UpstreamModelFailure ever reach a
client. UpstreamVisionFailure and BrandVoiceAnalysisFailure are raised inside
the services and recovered there with a fallback value.
"""
from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


class HostPromptError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self):
        return jsonify({"message": self.message}), self.status_code


class NotFound(HostPromptError):
    status_code = 404
    default_message = "Not found"


class Forbidden(HostPromptError):
    status_code = 403
    default_message = "Not authorized"


class ValidationError(HostPromptError):
    status_code = 400
    default_message = "Invalid request"


class UpstreamModelFailure(HostPromptError):
    status_code = 500
    default_message = "Failed to generate content"


class UpstreamVisionFailure(HostPromptError):
    default_message = "Image analysis failed"


class BrandVoiceAnalysisFailure(HostPromptError):
    default_message = "Brand voice analysis failed"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HostPromptError)
    def _hostprompt_error(err: HostPromptError):
        if err.status_code >= 500:
            app.logger.error("%s: %s", type(err).__name__, err.message)
        return err.to_response()

    @app.errorhandler(HTTPException)
    def _http_error(err: HTTPException):
        return jsonify({"message": err.description or err.name}), err.code

    @app.errorhandler(Exception)
    def _500(err: Exception):
        app.logger.exception("Unhandled exception")
        from hostprompt.monitoring import capture_exception
        capture_exception(err)
        return jsonify({"message": "Internal Server Error"}), 500
