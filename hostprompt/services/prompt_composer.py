# hostprompt/services/prompt_composer.py
"""
Builds the (system, user) instruction pair for a generation request, and
renders the booking-gap template which needs no model call at all.
"""
from __future__ import annotations

from typing import Optional, Tuple

from hostprompt.models import Property
from hostprompt.services import prompts as P
from hostprompt.services.content_request import BookingGap, ContentRequest
from hostprompt.services.post_processor import ParsedOutput

BOOKING_GAP_SPECIAL = "booking_gap_filler_special"
MAX_CONTEXT_FEATURES = 2


def resolve_content_type(content_type: str, booking_gap: Optional[BookingGap]) -> str:
    """A gap filler that carries dates goes down the template path."""
    if content_type == "booking_gap_filler" and booking_gap is not None:
        return BOOKING_GAP_SPECIAL
    if content_type == BOOKING_GAP_SPECIAL and booking_gap is None:
        return "booking_gap_filler"
    return content_type


def uses_template(content_type: str, booking_gap: Optional[BookingGap]) -> bool:
    return resolve_content_type(content_type, booking_gap) == BOOKING_GAP_SPECIAL


def render_booking_gap(prop: Property, gap: BookingGap) -> ParsedOutput:
    offer_part = P.BOOKING_GAP_OFFER.format(offer=gap.special_offer) if gap.special_offer else ""
    body = P.BOOKING_GAP_BODY.format(
        start=gap.start_date,
        end=gap.end_date,
        name=prop.name,
        location=prop.location,
        offer_part=offer_part,
    )
    return ParsedOutput(
        title=P.BOOKING_GAP_TITLE.format(start=gap.start_date, end=gap.end_date),
        content=body,
        keywords=list(P.BOOKING_GAP_KEYWORDS),
    )


# ---------------------------------------------------------------------------
# System instruction
# ---------------------------------------------------------------------------

def _content_rules(content_type: str, prop: Property) -> str:
    rules = P.CONTENT_TYPE_RULES.get(content_type, "")
    if content_type == "welcome_message":
        if prop.host_signature:
            sign_off = P.WELCOME_SIGN_OFF_SIGNATURE.format(signature=prop.host_signature)
        else:
            sign_off = P.WELCOME_SIGN_OFF_DEFAULT
        rules = rules.format(sign_off=sign_off)
    return rules


def compose_system(content_type: str, prop: Property) -> str:
    parts = [P.BASE_SYSTEM]
    if prop.host_signature:
        parts.append(P.HOST_SIGNATURE_NOTE.format(signature=prop.host_signature))
    parts.append(P.HUMAN_WRITING_GUIDANCE)
    rules = _content_rules(content_type, prop)
    if rules:
        parts.append(rules)
    return "\n\n".join(parts)


# ---------------------------------------------------------------------------
# User instruction
# ---------------------------------------------------------------------------

def _brand_voice_section(request: ContentRequest) -> str:
    voice = request.brand_voice
    out = P.BRAND_VOICE_HEADER
    if voice.is_custom:
        out += P.BRAND_VOICE_CUSTOM.format(voice=voice.custom_voice)
        if voice.custom_voice_summary:
            out += P.BRAND_VOICE_SUMMARY.format(summary=voice.custom_voice_summary)
        out += P.BRAND_VOICE_CUSTOM_NOTE
    else:
        out += P.BRAND_VOICE_TONE_STYLE.format(
            tone=voice.tone.capitalize(), style=voice.style.capitalize()
        )
    return out


def _property_section(content_type: str, prop: Property) -> str:
    out = P.PROPERTY_CONTEXT_HEADER
    out += P.PROPERTY_CONTEXT_NAME.format(name=prop.name, location=prop.location)
    features = list(prop.amenities or [])[:MAX_CONTEXT_FEATURES]
    if features:
        out += P.PROPERTY_CONTEXT_FEATURES.format(features=", ".join(features))
    if content_type == "listing_description":
        out += P.LISTING_CONTEXT_NOTE
    elif content_type == "social_media_caption":
        out += P.CAPTION_CONTEXT_NOTE
    else:
        out += "\n"
    return out


def _secondary_section(request: ContentRequest) -> str:
    out = P.SECONDARY_HEADER
    cta = request.cta
    if cta.any:
        out += P.CTA_PREFIX
        for key, enabled in (
            ("urgency", cta.urgency),
            ("socialProof", cta.social_proof),
            ("benefits", cta.benefits),
            ("directCTA", cta.direct_cta),
        ):
            if enabled:
                out += P.CTA_LINES[key]
        out += "\n"
    return out


def _length_section(request: ContentRequest) -> str:
    if request.custom_word_count:
        return P.LENGTH_HEADER + P.LENGTH_EXACT.format(count=request.custom_word_count) + "\n"
    if request.content_length:
        return P.LENGTH_HEADER + P.LENGTH_PRESETS[request.content_length] + "\n"
    return ""


def compose_user(request: ContentRequest, prop: Property, photo_description: Optional[str]) -> str:
    description = P.CONTENT_TYPE_DESCRIPTIONS.get(request.content_type, P.DEFAULT_CONTENT_TYPE_DESCRIPTION)
    out = P.USER_INTRO.format(description=description)

    out += P.PRIMARY_FOCUS_HEADER
    if photo_description:
        out += P.PRIMARY_FOCUS_PHOTO.format(photo_description=photo_description)
    else:
        out += P.PRIMARY_FOCUS_NO_PHOTO

    out += _brand_voice_section(request)
    out += _property_section(request.content_type, prop)
    out += _secondary_section(request)
    out += _length_section(request)
    out += P.AUTHENTICITY_INSTRUCTIONS
    out += P.FORMATTING_RULES.format(forbidden=", ".join(f'"{w}"' for w in P.FORBIDDEN_WORDS))
    return out


def compose_prompts(
    request: ContentRequest, prop: Property, photo_description: Optional[str] = None
) -> Tuple[str, str]:
    """Return (system_instruction, user_instruction) for one generation call."""
    return (
        compose_system(request.content_type, prop),
        compose_user(request, prop, photo_description),
    )
