# hostprompt/generator/__init__.py
from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from hostprompt.errors import ValidationError
from hostprompt.extensions import limiter
from hostprompt.services.brand_voice import analyze_brand_voice
from hostprompt.services.content_editor import edit_content
from hostprompt.services.content_request import ContentRequest
from hostprompt.services.generation import generate_content
from hostprompt.services.image_describer import describe_image
from hostprompt.storage import require_property, set_brand_voice

# -----------------------------------------------------------------------------
# Blueprint
# -----------------------------------------------------------------------------
generator_bp = Blueprint("generator_bp", __name__, url_prefix="/api")


def _ai_limit() -> str:
    return current_app.config.get("AI_RATE_LIMIT", "20 per minute")


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@generator_bp.route("/generate-content", methods=["POST"], endpoint="generate_content")
@limiter.limit(_ai_limit)
def generate_content_view():
    content_request = ContentRequest.from_payload(_json_body())
    result = generate_content(content_request)
    return jsonify(result.to_dict())


@generator_bp.route("/edit-content-with-prompt", methods=["POST"], endpoint="edit_content")
@limiter.limit(_ai_limit)
def edit_content_view():
    payload = _json_body()
    content = payload.get("content")
    prompt = payload.get("prompt")
    if not isinstance(content, str) or not content.strip() or not isinstance(prompt, str) or not prompt.strip():
        raise ValidationError("Content and prompt are required")

    prop = require_property(payload.get("propertyId"))
    edited = edit_content(content, prompt, prop, payload.get("contentType") or "")
    return jsonify(originalContent=content, editedContent=edited, prompt=prompt)


@generator_bp.route("/analyze-brand-voice", methods=["POST"], endpoint="analyze_brand_voice")
@limiter.limit(_ai_limit)
def analyze_brand_voice_view():
    payload = _json_body()
    text = payload.get("input")
    input_type = payload.get("inputType")
    property_id = payload.get("propertyId")
    if not text or not input_type or property_id in (None, ""):
        raise ValidationError("Missing required fields")
    if not isinstance(text, str):
        raise ValidationError("input must be a string")

    prop = require_property(property_id)
    result = analyze_brand_voice(text, input_type)
    set_brand_voice(prop, result.brand_voice, result.brand_voice_summary)
    return jsonify(result.to_dict())


@generator_bp.route("/analyze-image", methods=["POST"], endpoint="analyze_image")
@limiter.limit(_ai_limit)
def analyze_image_view():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        payload = {}
    property_name = payload.get("propertyName")
    if not isinstance(property_name, str):
        property_name = None

    image_data = payload.get("imageData")
    if not isinstance(image_data, str) or not image_data.strip():
        return jsonify(
            analysis=describe_image(None, property_name),
            message="Image data is required; generated fallback analysis",
        )

    return jsonify(analysis=describe_image(image_data, property_name), message="Image analyzed successfully")
