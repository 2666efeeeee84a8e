# hostprompt/storage.py
"""
Property Store and Content Store.

Plain functions over the Flask-SQLAlchemy session. Reads go through
with_retry(); writes commit immediately and roll back on integrity errors.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple, TypeVar

from flask import current_app
from sqlalchemy.exc import IntegrityError, OperationalError

from hostprompt.errors import NotFound, ValidationError
from hostprompt.extensions import db
from hostprompt.models import Content, Property, PropertyPhoto

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Retry helper
# ---------------------------------------------------------------------------

def with_retry(operation: Callable[[], T], attempts: Optional[int] = None, delay: Optional[float] = None) -> T:
    """
    Run a database operation, retrying on OperationalError with exponential
    backoff (delay, 2*delay, 4*delay, ...). The session is rolled back between
    attempts; the last error is re-raised.
    """
    attempts = attempts or int(current_app.config.get("DB_RETRY_ATTEMPTS", 3))
    delay = current_app.config.get("DB_RETRY_DELAY", 1.0) if delay is None else delay

    last_error: Optional[Exception] = None
    for attempt in range(attempts):
        try:
            return operation()
        except OperationalError as e:
            last_error = e
            logger.warning("Database operation failed (attempt %s/%s): %s", attempt + 1, attempts, e)
            db.session.rollback()
            if attempt < attempts - 1:
                time.sleep(delay * (2 ** attempt))
    raise last_error  # type: ignore[misc]


def _commit() -> None:
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning("Integrity error on commit: %s", e.orig)
        raise ValidationError("Request conflicts with existing data") from e


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

def get_property(property_id: int) -> Optional[Property]:
    return with_retry(lambda: db.session.get(Property, property_id))


def require_property(property_id) -> Property:
    try:
        pid = int(property_id)
    except (TypeError, ValueError, OverflowError):
        raise NotFound("Property not found")
    prop = get_property(pid)
    if prop is None:
        raise NotFound("Property not found")
    return prop


def list_properties(user_id: int) -> List[Property]:
    return with_retry(
        lambda: Property.query.filter_by(user_id=user_id).order_by(Property.id.asc()).all()
    )


def create_property(user_id: int, fields: dict, photos: Optional[List[dict]] = None) -> Property:
    prop = Property(user_id=user_id, **fields)
    db.session.add(prop)
    db.session.flush()
    for photo in photos or []:
        _append_photo(prop, photo["url"], photo.get("name") or "", photo.get("isPrimary", False))
    _commit()
    logger.info("Created property #%s for user %s", prop.id, user_id)
    return prop


def update_property(prop: Property, fields: dict) -> Property:
    for key, value in fields.items():
        setattr(prop, key, value)
    _commit()
    return prop


def delete_property(prop: Property) -> None:
    db.session.delete(prop)
    _commit()
    logger.info("Deleted property #%s", prop.id)


def set_brand_voice(prop: Property, brand_voice: str, summary: str) -> Property:
    prop.brand_voice = brand_voice
    prop.brand_voice_summary = summary
    _commit()
    return prop


# ---------------------------------------------------------------------------
# Photos
# ---------------------------------------------------------------------------

def _set_primary(prop: Property, photo: PropertyPhoto) -> None:
    current = prop.primary_photo
    if current is not None and current is not photo:
        current.mark_primary(False)
        # clear the old slot before the new one is claimed
        db.session.flush()
    photo.mark_primary(True)
    prop.image = photo.url


def _append_photo(prop: Property, url: str, name: str, make_primary: bool) -> PropertyPhoto:
    next_position = max((p.position for p in prop.photos), default=-1) + 1
    photo = PropertyPhoto(url=url, name=name, position=next_position)
    photo.mark_primary(False)
    prop.photos.append(photo)
    db.session.flush()
    if make_primary or prop.primary_photo is None:
        _set_primary(prop, photo)
    return photo


def add_photo(prop: Property, url: str, name: str = "", make_primary: bool = False) -> PropertyPhoto:
    photo = _append_photo(prop, url, name, make_primary)
    _commit()
    return photo


def _require_photo(prop: Property, photo_id) -> PropertyPhoto:
    for photo in prop.photos:
        if str(photo.id) == str(photo_id):
            return photo
    raise NotFound("Photo not found")


def set_primary_photo(prop: Property, photo_id) -> PropertyPhoto:
    photo = _require_photo(prop, photo_id)
    _set_primary(prop, photo)
    _commit()
    return photo


def delete_photo(prop: Property, photo_id) -> None:
    photo = _require_photo(prop, photo_id)
    was_primary = photo.is_primary
    prop.photos.remove(photo)
    db.session.flush()
    if was_primary:
        if prop.photos:
            _set_primary(prop, prop.photos[0])
        else:
            prop.image = ""
    _commit()


# ---------------------------------------------------------------------------
# Contents
# ---------------------------------------------------------------------------

def get_content(content_id: int) -> Optional[Content]:
    return with_retry(lambda: db.session.get(Content, content_id))


def require_content(content_id) -> Content:
    try:
        cid = int(content_id)
    except (TypeError, ValueError, OverflowError):
        raise NotFound("Content not found")
    item = get_content(cid)
    if item is None:
        raise NotFound("Content not found")
    return item


def list_contents_for_user(user_id: int) -> List[Content]:
    return with_retry(
        lambda: Content.query.filter_by(user_id=user_id).order_by(Content.id.desc()).all()
    )


def list_contents_for_property(property_id: int) -> List[Content]:
    return with_retry(
        lambda: Content.query.filter_by(property_id=property_id).order_by(Content.id.desc()).all()
    )


def find_duplicate_content(property_id: int, title: str, content: str) -> Optional[Content]:
    return with_retry(
        lambda: Content.query.filter_by(property_id=property_id, title=title, content=content)
        .order_by(Content.id.asc())
        .first()
    )


def save_content(user_id: int, fields: dict) -> Tuple[Content, bool]:
    """
    Persist a generated content record.

    Returns (record, created). Identical (content, title, property_id) is a
    duplicate: nothing is written and the existing record is returned.
    """
    existing = find_duplicate_content(fields["property_id"], fields["title"], fields["content"])
    if existing is not None:
        logger.info("Duplicate save for property #%s ignored (content #%s)", existing.property_id, existing.id)
        return existing, False

    item = Content(user_id=user_id, **fields)
    db.session.add(item)
    _commit()
    return item, True


def delete_content(item: Content) -> None:
    db.session.delete(item)
    _commit()
