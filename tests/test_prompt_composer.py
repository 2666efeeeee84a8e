import pytest

from hostprompt.errors import ValidationError
from hostprompt.models import Property
from hostprompt.services import prompts as P
from hostprompt.services.content_request import BookingGap, ContentRequest
from hostprompt.services.prompt_composer import (
    compose_prompts,
    render_booking_gap,
    resolve_content_type,
)


def _property(**overrides):
    fields = dict(
        id=3,
        name="Driftwood Cottage",
        location="Cannon Beach, Oregon",
        amenities=["WiFi", "Hot tub", "Grill"],
        host_signature="",
        brand_voice="",
        saved_hashtags=[],
    )
    fields.update(overrides)
    return Property(**fields)


def _request(**payload):
    body = {"propertyId": 3, "contentType": "social_media_caption"}
    body.update(payload)
    return ContentRequest.from_payload(body)


def test_system_has_base_and_content_type_rules():
    system, _ = compose_prompts(_request(), _property())
    assert system.startswith(P.BASE_SYSTEM)
    assert "IMPORTANT RESTRICTIONS" in system
    assert "signature" not in system.split("TALK LIKE")[0]


def test_signature_note_and_welcome_sign_off():
    prop = _property(host_signature="Cheers, Sam")
    system, _ = compose_prompts(_request(contentType="welcome_message"), prop)
    assert 'preferred signature or name is: "Cheers, Sam"' in system
    assert 'Always end the welcome message with the host\'s signature: "Cheers, Sam"' in system


def test_welcome_without_signature_uses_default_closing():
    system, _ = compose_prompts(_request(contentType="welcome_message"), _property())
    assert '"Enjoy your stay!"' in system
    assert "{sign_off}" not in system


def test_photo_description_drives_primary_focus():
    _, user = compose_prompts(_request(), _property(), "Two chairs on a deck at sunset.")
    assert "1. PRIMARY FOCUS (90% of content should be based on this):" in user
    assert "Photo Analysis:\nTwo chairs on a deck at sunset." in user
    assert "Make 90% of the content directly reference" in user


def test_no_photo_focuses_on_voice_and_property():
    _, user = compose_prompts(_request(), _property())
    assert P.PRIMARY_FOCUS_NO_PHOTO in user
    assert "Photo Analysis" not in user


def test_custom_voice_is_quoted_verbatim():
    req = _request(brandVoice={"customVoice": "Chatty + Laid-back", "customVoiceSummary": "Like a text from a friend"})
    _, user = compose_prompts(req, _property())
    assert '• CUSTOM BRAND VOICE: "Chatty + Laid-back"' in user
    assert "• VOICE DESCRIPTION: Like a text from a friend" in user
    assert "• Tone:" not in user


def test_tone_and_style_defaults_and_values():
    _, user = compose_prompts(_request(), _property())
    assert "• Tone: Professional\n• Style: Descriptive" in user

    _, user = compose_prompts(_request(brandVoice={"tone": "friendly", "style": "storytelling"}), _property())
    assert "• Tone: Friendly\n• Style: Storytelling" in user


def test_unknown_tone_is_rejected():
    with pytest.raises(ValidationError):
        _request(brandVoice={"tone": "sarcastic", "style": "direct"})


def test_property_context_limits_features_to_two():
    _, user = compose_prompts(_request(contentType="house_rules"), _property())
    assert "• Name: Driftwood Cottage\n• Location: Cannon Beach, Oregon" in user
    assert "• Key features: WiFi, Hot tub\n" in user
    assert "Grill" not in user


def test_content_type_context_notes():
    _, caption = compose_prompts(_request(), _property())
    _, listing = compose_prompts(_request(contentType="listing_description"), _property())
    assert "DO NOT include the property name or location" in caption
    assert "DO NOT make any claims about neighborhood amenities" in listing


def test_cta_lines():
    req = _request(ctaEnhancements={"urgency": True, "directCTA": True})
    _, user = compose_prompts(req, _property())
    assert "4. SECONDARY ELEMENTS (limit to 10% of content):" in user
    assert "Mention limited availability." in user
    assert 'End with a clear instruction like "Book now"' in user
    assert "Reference positive guest experiences." not in user


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"contentLength": "short"}, "Short (around 15 words)"),
        ({"contentLength": "medium"}, "Medium (around 30-50 words)"),
        ({"contentLength": "long"}, "Long (around 75-100+ words)"),
        ({"contentLength": "short", "customWordCount": 42}, "42 words exactly"),
    ],
)
def test_length_control(payload, expected):
    _, user = compose_prompts(_request(**payload), _property())
    assert f"Content Length: {expected}" in user


def test_every_forbidden_word_is_listed():
    _, user = compose_prompts(_request(), _property())
    for word in P.FORBIDDEN_WORDS:
        assert f'"{word}"' in user


def test_booking_gap_template_with_offer():
    out = render_booking_gap(_property(), BookingGap("June 3", "June 7", "20% off"))
    assert out.title == "Available: June 3 - June 7"
    assert out.content == (
        "June 3 to June 7 - Just opened up at Driftwood Cottage! This rare opportunity to stay at our "
        "Cannon Beach, Oregon property won't last long. SPECIAL OFFER: 20% off for these dates only! "
        "Our family-friendly home offers all the comforts you need including WiFi and a fully equipped "
        "kitchen. Don't miss this limited-time availability - book these exclusive dates now before "
        "they're gone! #LastMinuteGetaway #LimitedTimeOffer"
    )
    assert out.keywords == ["limited time", "special offer", "booking gap", "last minute", "availability"]


def test_booking_gap_template_without_offer_keeps_spacing():
    out = render_booking_gap(_property(), BookingGap("June 3", "June 7"))
    assert "won't last long.  Our family-friendly" in out.content
    assert "SPECIAL OFFER" not in out.content


def test_resolve_content_type():
    gap = BookingGap("June 3", "June 7")
    assert resolve_content_type("booking_gap_filler", gap) == "booking_gap_filler_special"
    assert resolve_content_type("booking_gap_filler", None) == "booking_gap_filler"
    assert resolve_content_type("booking_gap_filler_special", None) == "booking_gap_filler"
    assert resolve_content_type("welcome_message", gap) == "welcome_message"
