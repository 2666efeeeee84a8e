# hostprompt/services/content_request.py
"""Parsed form of a POST /api/generate-content body."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hostprompt.errors import ValidationError

GENERATION_CONTENT_TYPES = (
    "social_media_caption",
    "listing_description",
    "welcome_message",
    "house_rules",
    "guest_reengagement",
    "booking_gap_filler",
    "booking_gap_filler_special",
)

TONES = ("professional", "friendly", "luxury", "casual", "exciting")
STYLES = ("descriptive", "minimalist", "storytelling", "direct")
DEFAULT_TONE = "professional"
DEFAULT_STYLE = "descriptive"

CONTENT_LENGTHS = ("short", "medium", "long")


def _optional_text(value, key: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value.strip() or None


@dataclass
class BrandVoice:
    tone: str = DEFAULT_TONE
    style: str = DEFAULT_STYLE
    custom_voice: Optional[str] = None
    custom_voice_summary: Optional[str] = None

    @property
    def is_custom(self) -> bool:
        return bool(self.custom_voice)

    @property
    def label(self) -> str:
        if self.is_custom:
            return self.custom_voice  # type: ignore[return-value]
        return f"{self.tone.capitalize()} + {self.style.capitalize()}"

    @classmethod
    def from_payload(cls, data) -> "BrandVoice":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError("brandVoice must be an object")

        custom = _optional_text(data.get("customVoice"), "customVoice")
        if custom:
            return cls(
                tone="custom",
                style="custom",
                custom_voice=custom,
                custom_voice_summary=_optional_text(data.get("customVoiceSummary"), "customVoiceSummary"),
            )

        tone = (_optional_text(data.get("tone"), "tone") or DEFAULT_TONE).lower()
        style = (_optional_text(data.get("style"), "style") or DEFAULT_STYLE).lower()
        if tone not in TONES:
            raise ValidationError(f"Unknown tone: {tone}")
        if style not in STYLES:
            raise ValidationError(f"Unknown style: {style}")
        return cls(tone=tone, style=style)


@dataclass
class CtaEnhancements:
    urgency: bool = False
    social_proof: bool = False
    benefits: bool = False
    direct_cta: bool = False

    @property
    def any(self) -> bool:
        return self.urgency or self.social_proof or self.benefits or self.direct_cta

    def to_dict(self) -> dict:
        return {
            "urgency": self.urgency,
            "socialProof": self.social_proof,
            "benefits": self.benefits,
            "directCTA": self.direct_cta,
        }

    @classmethod
    def from_payload(cls, data) -> "CtaEnhancements":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError("ctaEnhancements must be an object")
        return cls(
            urgency=bool(data.get("urgency")),
            social_proof=bool(data.get("socialProof")),
            benefits=bool(data.get("benefits")),
            direct_cta=bool(data.get("directCTA")),
        )


@dataclass
class PhotoData:
    base64_image: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, data) -> Optional["PhotoData"]:
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValidationError("photoData must be an object")
        photo = cls(
            base64_image=_optional_text(data.get("base64Image"), "base64Image"),
            description=_optional_text(data.get("description"), "description"),
        )
        if not photo.base64_image and not photo.description:
            return None
        return photo


@dataclass
class BookingGap:
    start_date: str
    end_date: str
    special_offer: Optional[str] = None

    @classmethod
    def from_payload(cls, data) -> Optional["BookingGap"]:
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValidationError("bookingGap must be an object")
        start = _optional_text(data.get("startDate"), "startDate")
        end = _optional_text(data.get("endDate"), "endDate")
        if not start or not end:
            raise ValidationError("bookingGap requires startDate and endDate")
        return cls(start, end, _optional_text(data.get("specialOffer"), "specialOffer"))


@dataclass
class ContentRequest:
    property_id: int
    content_type: str
    brand_voice: BrandVoice = field(default_factory=BrandVoice)
    cta: CtaEnhancements = field(default_factory=CtaEnhancements)
    content_length: Optional[str] = None
    custom_word_count: Optional[int] = None
    photo: Optional[PhotoData] = None
    booking_gap: Optional[BookingGap] = None
    image_url: Optional[str] = None
    brand_voice_given: bool = True

    @classmethod
    def from_payload(cls, payload) -> "ContentRequest":
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        raw_id = payload.get("propertyId")
        if raw_id in (None, "") or isinstance(raw_id, bool):
            raise ValidationError("propertyId is required")
        try:
            property_id = int(raw_id)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("propertyId must be a number")

        content_type = payload.get("contentType")
        if content_type not in GENERATION_CONTENT_TYPES:
            raise ValidationError(f"Unknown contentType: {content_type}")

        length = payload.get("contentLength")
        if length in (None, ""):
            length = None
        elif not isinstance(length, str) or length.lower() not in CONTENT_LENGTHS:
            raise ValidationError(f"Unknown contentLength: {length}")
        else:
            length = length.lower()

        word_count = payload.get("customWordCount")
        if word_count in (None, "") or isinstance(word_count, bool):
            word_count = None
        else:
            try:
                word_count = int(word_count)
            except (TypeError, ValueError, OverflowError):
                raise ValidationError("customWordCount must be a whole number")
            if word_count <= 0:
                word_count = None

        return cls(
            property_id=property_id,
            content_type=content_type,
            brand_voice=BrandVoice.from_payload(payload.get("brandVoice")),
            cta=CtaEnhancements.from_payload(payload.get("ctaEnhancements")),
            content_length=length,
            custom_word_count=word_count,
            photo=PhotoData.from_payload(payload.get("photoData")),
            booking_gap=BookingGap.from_payload(payload.get("bookingGap")),
            image_url=_optional_text(payload.get("imageUrl"), "imageUrl"),
            brand_voice_given=payload.get("brandVoice") is not None,
        )
