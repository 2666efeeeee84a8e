# hostprompt/library/__init__.py
"""Saved-content library. Records are immutable; only create, read and delete."""
from __future__ import annotations

from flask import Blueprint, jsonify, request

from hostprompt import storage
from hostprompt.auth import current_user_id, ensure_owner
from hostprompt.errors import ValidationError
from hostprompt.services.validation import validate_content

library_bp = Blueprint("library_bp", __name__, url_prefix="/api")


@library_bp.route("/contents", methods=["GET"], endpoint="list")
def list_contents():
    items = storage.list_contents_for_user(current_user_id())
    return jsonify([c.as_dict() for c in items])


@library_bp.route("/contents/<int:content_id>", methods=["GET"], endpoint="detail")
def get_content(content_id: int):
    return jsonify(storage.require_content(content_id).as_dict())


@library_bp.route("/properties/<int:property_id>/contents", methods=["GET"], endpoint="for_property")
def list_property_contents(property_id: int):
    storage.require_property(property_id)
    items = storage.list_contents_for_property(property_id)
    return jsonify([c.as_dict() for c in items])


@library_bp.route("/contents", methods=["POST"], endpoint="create")
def save_content():
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("Request body must be JSON")
    fields = validate_content(payload)
    storage.require_property(fields["property_id"])

    item, created = storage.save_content(current_user_id(), fields)
    return jsonify(item.as_dict()), (201 if created else 200)


@library_bp.route("/contents/<int:content_id>", methods=["DELETE"], endpoint="delete")
def delete_content(content_id: int):
    item = storage.require_content(content_id)
    ensure_owner(item.user_id, "content")
    storage.delete_content(item)
    return "", 204
