# hostprompt/properties/__init__.py
from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from hostprompt import storage
from hostprompt.auth import current_user_id, ensure_owner
from hostprompt.errors import ValidationError
from hostprompt.services.validation import validate_photo, validate_photos, validate_property

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Blueprint
# -----------------------------------------------------------------------------
properties_bp = Blueprint("properties_bp", __name__, url_prefix="/api/properties")


def _json_body():
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("Request body must be JSON")
    return payload


def _owned_property(property_id: int):
    prop = storage.require_property(property_id)
    ensure_owner(prop.user_id, "property")
    return prop


# -----------------------------------------------------------------------------
# Properties
# -----------------------------------------------------------------------------
@properties_bp.route("", methods=["GET"], endpoint="list")
def list_properties():
    items = storage.list_properties(current_user_id())
    return jsonify([p.as_dict() for p in items])


@properties_bp.route("/<int:property_id>", methods=["GET"], endpoint="detail")
def get_property(property_id: int):
    return jsonify(storage.require_property(property_id).as_dict())


@properties_bp.route("", methods=["POST"], endpoint="create")
def create_property():
    payload = _json_body()
    fields = validate_property(payload)
    photos = validate_photos(payload.get("photos"))
    prop = storage.create_property(current_user_id(), fields, photos)
    return jsonify(prop.as_dict()), 201


@properties_bp.route("/<int:property_id>", methods=["PUT", "PATCH"], endpoint="update")
def update_property(property_id: int):
    prop = _owned_property(property_id)
    fields = validate_property(_json_body(), partial=request.method == "PATCH")
    if "saved_hashtags" in fields:
        logger.info("Updating property #%s savedHashtags: %s", prop.id, fields["saved_hashtags"])
    storage.update_property(prop, fields)
    return jsonify(prop.as_dict())


@properties_bp.route("/<int:property_id>", methods=["DELETE"], endpoint="delete")
def delete_property(property_id: int):
    prop = _owned_property(property_id)
    storage.delete_property(prop)
    return "", 204


# -----------------------------------------------------------------------------
# Photos
# -----------------------------------------------------------------------------
@properties_bp.route("/<int:property_id>/photos", methods=["GET"], endpoint="photos")
def list_photos(property_id: int):
    prop = storage.require_property(property_id)
    return jsonify([p.as_dict() for p in prop.photos])


@properties_bp.route("/<int:property_id>/photos", methods=["POST"], endpoint="add_photo")
def add_photo(property_id: int):
    prop = _owned_property(property_id)
    data = validate_photo(_json_body())
    photo = storage.add_photo(prop, data["url"], data["name"], data["isPrimary"])
    return jsonify(photo.as_dict()), 201


@properties_bp.route(
    "/<int:property_id>/photos/<int:photo_id>/primary", methods=["POST"], endpoint="set_primary_photo"
)
def set_primary_photo(property_id: int, photo_id: int):
    prop = _owned_property(property_id)
    storage.set_primary_photo(prop, photo_id)
    return jsonify(prop.as_dict())


@properties_bp.route("/<int:property_id>/photos/<int:photo_id>", methods=["DELETE"], endpoint="delete_photo")
def delete_photo(property_id: int, photo_id: int):
    prop = _owned_property(property_id)
    storage.delete_photo(prop, photo_id)
    return "", 204
