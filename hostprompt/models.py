# hostprompt/models.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy import JSON as SAJSON
from sqlalchemy.dialects.mysql import JSON as MySQLJSON

from hostprompt.extensions import db

# Native JSON on MySQL, generic JSON elsewhere (SQLite in tests, Postgres)
JSONType = SAJSON().with_variant(MySQLJSON(), "mysql")


# -------------------------
# Property
# -------------------------
class Property(db.Model):
    __tablename__ = "properties"

    id = db.Column(Integer, primary_key=True)
    user_id = db.Column(Integer, index=True, nullable=False)

    name = db.Column(String(255), nullable=False)
    location = db.Column(String(255), nullable=False)
    bedrooms = db.Column(Integer, nullable=False)
    bathrooms = db.Column(Float, nullable=False)
    description = db.Column(Text, nullable=False)
    image = db.Column(String(1024), nullable=False, default="")  # hero image; follows the primary photo
    status = db.Column(String(32), nullable=False, default="active")

    amenities = db.Column(JSONType, nullable=False, default=list)        # list[str], ordered
    brand_voice = db.Column(String(255), nullable=True, default="")
    brand_voice_summary = db.Column(Text, nullable=True, default="")
    use_brand_voice_default = db.Column(Boolean, nullable=False, default=False)
    saved_hashtags = db.Column(JSONType, nullable=False, default=list)   # list[str], no '#'
    host_signature = db.Column(Text, nullable=False, default="")

    created_at = db.Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    photos = db.relationship(
        "PropertyPhoto",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="PropertyPhoto.position",
    )

    @property
    def primary_photo(self) -> "PropertyPhoto | None":
        for photo in self.photos:
            if photo.is_primary:
                return photo
        return None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "location": self.location,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "description": self.description,
            "image": self.image,
            "status": self.status,
            "amenities": list(self.amenities or []),
            "brandVoice": self.brand_voice or "",
            "brandVoiceSummary": self.brand_voice_summary or "",
            "useBrandVoiceDefault": bool(self.use_brand_voice_default),
            "savedHashtags": list(self.saved_hashtags or []),
            "hostSignature": self.host_signature or "",
            "photos": [p.as_dict() for p in self.photos],
        }

    def __repr__(self) -> str:
        return f"<Property id={self.id} name={self.name!r} user_id={self.user_id}>"


# -------------------------
# PropertyPhoto
# -------------------------
class PropertyPhoto(db.Model):
    __tablename__ = "property_photos"

    id = db.Column(Integer, primary_key=True)
    property_id = db.Column(
        Integer, ForeignKey("properties.id", ondelete="CASCADE"), index=True, nullable=False
    )
    url = db.Column(String(1024), nullable=False)
    name = db.Column(String(255), nullable=False, default="")
    position = db.Column(Integer, nullable=False, default=0)
    is_primary = db.Column(Boolean, nullable=False, default=False)

    # True for the primary photo, NULL otherwise. NULLs never collide in a
    # unique constraint, so this allows exactly one primary per property.
    primary_slot = db.Column(Boolean, nullable=True)

    created_at = db.Column(DateTime, default=datetime.utcnow, nullable=False)

    property = db.relationship("Property", back_populates="photos")

    __table_args__ = (
        UniqueConstraint("property_id", "primary_slot", name="uq_property_primary_photo"),
    )

    def mark_primary(self, value: bool) -> None:
        self.is_primary = bool(value)
        self.primary_slot = True if value else None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "url": self.url,
            "name": self.name or "",
            "isPrimary": bool(self.is_primary),
        }

    def __repr__(self) -> str:
        return f"<PropertyPhoto id={self.id} property_id={self.property_id} primary={self.is_primary}>"


# -------------------------
# Content (saved library)
# -------------------------
class Content(db.Model):
    __tablename__ = "contents"

    id = db.Column(Integer, primary_key=True)
    user_id = db.Column(Integer, index=True, nullable=False)
    property_id = db.Column(Integer, index=True, nullable=False)

    title = db.Column(String(500), nullable=False)
    content = db.Column(Text, nullable=False)
    keywords = db.Column(JSONType, nullable=False, default=list)  # list[str]
    content_type = db.Column(String(64), nullable=False)
    image_url = db.Column(Text, nullable=True)
    date_generated = db.Column(String(64), nullable=True)
    brand_voice = db.Column(String(255), nullable=True)
    cta_enhancements = db.Column(JSONType, nullable=True)  # {urgency, socialProof, benefits, directCTA}

    created_at = db.Column(DateTime, default=datetime.utcnow, nullable=False)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "propertyId": self.property_id,
            "title": self.title,
            "content": self.content,
            "keywords": list(self.keywords or []),
            "contentType": self.content_type,
            "imageUrl": self.image_url,
            "dateGenerated": self.date_generated,
            "brandVoice": self.brand_voice,
            "ctaEnhancements": self.cta_enhancements,
        }

    def __repr__(self) -> str:
        return f"<Content id={self.id} property_id={self.property_id} type={self.content_type!r}>"
