# hostprompt/services/validation.py
"""
Payload validation for the CRUD endpoints.

Each validator takes the camelCase JSON body and returns a dict keyed by model
column names, raising ValidationError with a human-readable message on the
first problem found.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from hostprompt.errors import ValidationError

CONTENT_TYPES = (
    "social_media_caption",
    "listing_description",
    "welcome_message",
    "house_rules",
    "guest_reengagement",
    "booking_gap_filler",
    "booking_gap_filler_special",
)

# camelCase key -> column; image is derived from the primary photo
_PROPERTY_TEXT_FIELDS = {
    "name": "name",
    "location": "location",
    "description": "description",
    "status": "status",
    "brandVoice": "brand_voice",
    "brandVoiceSummary": "brand_voice_summary",
    "hostSignature": "host_signature",
}
_PROPERTY_REQUIRED = ("name", "location", "bedrooms", "bathrooms", "description")


def _require_object(payload) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _text(payload: dict, key: str, *, required: bool = False, allow_blank: bool = True) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        if required:
            raise ValidationError(f"{key} is required")
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    value = value.strip()
    if not value and not allow_blank:
        raise ValidationError(f"{key} is required")
    return value


def _int(payload: dict, key: str) -> int:
    value = payload.get(key)
    if isinstance(value, bool):
        raise ValidationError(f"{key} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{key} must be a whole number")
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{key} must be a whole number")
    if number < 0:
        raise ValidationError(f"{key} cannot be negative")
    return number


def _float(payload: dict, key: str) -> float:
    value = payload.get(key)
    if isinstance(value, bool):
        raise ValidationError(f"{key} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{key} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{key} must be a number")
    if number < 0:
        raise ValidationError(f"{key} cannot be negative")
    return number


def _string_list(payload: dict, key: str) -> List[str]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{key} must be a list of strings")
    return [v.strip() for v in value if v.strip()]


def normalize_hashtags(tags: List[str]) -> List[str]:
    """Strip leading '#', drop blanks and duplicates (first occurrence wins)."""
    seen = set()
    out: List[str] = []
    for tag in tags:
        clean = tag.strip().lstrip("#").strip()
        if clean and clean not in seen:
            seen.add(clean)
            out.append(clean)
    return out


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

def validate_property(payload, *, partial: bool = False) -> Dict[str, Any]:
    """
    Full validation for POST/PUT, partial for PATCH (only the keys present are
    checked and returned). Unknown keys are ignored.
    """
    payload = _require_object(payload)

    if not partial:
        for key in _PROPERTY_REQUIRED:
            if payload.get(key) in (None, ""):
                raise ValidationError(f"{key} is required")

    fields: Dict[str, Any] = {}
    for key, column in _PROPERTY_TEXT_FIELDS.items():
        if key not in payload:
            continue
        required = key in _PROPERTY_REQUIRED
        value = _text(payload, key, required=required, allow_blank=not required)
        fields[column] = value if value is not None else ""

    if "bedrooms" in payload:
        fields["bedrooms"] = _int(payload, "bedrooms")
    if "bathrooms" in payload:
        fields["bathrooms"] = _float(payload, "bathrooms")
    if "amenities" in payload:
        fields["amenities"] = _string_list(payload, "amenities")
    if "savedHashtags" in payload:
        fields["saved_hashtags"] = normalize_hashtags(_string_list(payload, "savedHashtags"))
    if "useBrandVoiceDefault" in payload:
        value = payload.get("useBrandVoiceDefault")
        if not isinstance(value, bool):
            raise ValidationError("useBrandVoiceDefault must be true or false")
        fields["use_brand_voice_default"] = value

    if not partial:
        fields.setdefault("status", "active")
        fields["status"] = fields["status"] or "active"
    return fields


def validate_photo(payload) -> Dict[str, Any]:
    payload = _require_object(payload)
    url = _text(payload, "url", required=True, allow_blank=False)
    name = _text(payload, "name") or ""
    is_primary = payload.get("isPrimary", False)
    if not isinstance(is_primary, bool):
        raise ValidationError("isPrimary must be true or false")
    return {"url": url, "name": name, "isPrimary": is_primary}


def validate_photos(value) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError("photos must be a list")
    return [validate_photo(p) for p in value]


# ---------------------------------------------------------------------------
# Saved content
# ---------------------------------------------------------------------------

def validate_content(payload) -> Dict[str, Any]:
    payload = _require_object(payload)

    title = _text(payload, "title", required=True, allow_blank=False)
    content = payload.get("content")
    # body kept verbatim; trailing hashtag spacing is part of it
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("content is required")
    content_type = _text(payload, "contentType", required=True, allow_blank=False)
    if content_type not in CONTENT_TYPES:
        raise ValidationError(f"Unknown contentType: {content_type}")

    if payload.get("propertyId") in (None, ""):
        raise ValidationError("propertyId is required")
    property_id = _int(payload, "propertyId")

    if "keywords" in payload and payload["keywords"] is not None:
        keywords = _string_list(payload, "keywords")
    else:
        raise ValidationError("keywords is required")

    cta = payload.get("ctaEnhancements")
    if cta is not None and not isinstance(cta, dict):
        raise ValidationError("ctaEnhancements must be an object")

    return {
        "title": title,
        "content": content,
        "content_type": content_type,
        "property_id": property_id,
        "keywords": keywords,
        "image_url": _text(payload, "imageUrl"),
        "date_generated": _text(payload, "dateGenerated"),
        "brand_voice": _text(payload, "brandVoice"),
        "cta_enhancements": cta,
    }
