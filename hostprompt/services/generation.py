# hostprompt/services/generation.py
"""
Generation pipeline for POST /api/generate-content.

    RECEIVED -> [DESCRIBING_PHOTO] -> COMPOSING -> MODEL_CALL
             -> POST_PROCESSING -> DONE | FAILED

The booking-gap template finishes in COMPOSING. Only the model call can fail
the request; photo description degrades to a fallback and post-processing
never raises.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from flask import current_app

from hostprompt import ai_clients
from hostprompt.errors import NotFound, UpstreamModelFailure
from hostprompt.models import Property
from hostprompt.monitoring import capture_exception
from hostprompt.services.content_request import BrandVoice, ContentRequest
from hostprompt.services.image_describer import describe_image
from hostprompt.services.post_processor import apply_hashtag_policy, parse_model_output
from hostprompt.services.prompt_composer import compose_prompts, render_booking_gap, uses_template
from hostprompt.storage import require_property

logger = logging.getLogger(__name__)


class GenerationStage(enum.Enum):
    RECEIVED = "received"
    DESCRIBING_PHOTO = "describing_photo"
    COMPOSING = "composing"
    MODEL_CALL = "model_call"
    POST_PROCESSING = "post_processing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class GeneratedContent:
    title: str
    content: str
    keywords: List[str]
    content_type: str
    property_id: int
    brand_voice: str
    cta_enhancements: dict
    date_generated: str = field(default_factory=lambda: datetime.utcnow().isoformat() + "Z")
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "title": self.title,
            "content": self.content,
            "keywords": list(self.keywords),
            "contentType": self.content_type,
            "propertyId": self.property_id,
            "dateGenerated": self.date_generated,
            "brandVoice": self.brand_voice,
            "ctaEnhancements": dict(self.cta_enhancements),
        }
        if self.image_url:
            out["imageUrl"] = self.image_url
        return out


class _Run:
    """Tracks and logs the stage of one generation request."""

    def __init__(self, property_id: int):
        self.property_id = property_id
        self.stage = GenerationStage.RECEIVED
        logger.info("generation[property=%s] %s", property_id, self.stage.value)

    def advance(self, stage: GenerationStage) -> None:
        logger.info("generation[property=%s] %s -> %s", self.property_id, self.stage.value, stage.value)
        self.stage = stage


def _effective_brand_voice(request: ContentRequest, prop: Property) -> BrandVoice:
    # no explicit voice in the request: fall back to the property's own when it opted in
    if not request.brand_voice_given and prop.use_brand_voice_default and prop.brand_voice:
        return BrandVoice(
            tone="custom",
            style="custom",
            custom_voice=prop.brand_voice,
            custom_voice_summary=prop.brand_voice_summary or None,
        )
    return request.brand_voice


def generate_content(request: ContentRequest) -> GeneratedContent:
    run = _Run(request.property_id)
    try:
        prop = require_property(request.property_id)
    except NotFound:
        run.advance(GenerationStage.FAILED)
        raise
    request.brand_voice = _effective_brand_voice(request, prop)

    def _result(title: str, content: str, keywords: List[str]) -> GeneratedContent:
        return GeneratedContent(
            title=title,
            content=content,
            keywords=keywords,
            content_type=request.content_type,
            property_id=prop.id,
            brand_voice=request.brand_voice.label,
            cta_enhancements=request.cta.to_dict(),
            image_url=request.image_url,
        )

    photo_description: Optional[str] = None
    if request.photo is not None:
        if request.photo.base64_image:
            run.advance(GenerationStage.DESCRIBING_PHOTO)
            photo_description = describe_image(request.photo.base64_image, prop.name)
        else:
            photo_description = request.photo.description

    run.advance(GenerationStage.COMPOSING)
    if uses_template(request.content_type, request.booking_gap):
        parsed = render_booking_gap(prop, request.booking_gap)  # type: ignore[arg-type]
        run.advance(GenerationStage.DONE)
        return _result(parsed.title, parsed.content, parsed.keywords)

    system, user = compose_prompts(request, prop, photo_description)

    run.advance(GenerationStage.MODEL_CALL)
    try:
        raw = ai_clients.chat_completion(
            system,
            user,
            max_tokens=int(current_app.config.get("GENERATION_MAX_TOKENS", 1000)),
        )
    except UpstreamModelFailure as e:
        run.advance(GenerationStage.FAILED)
        logger.error("Content generation failed for property #%s: %s", prop.id, e.message)
        capture_exception(e, property_id=prop.id, content_type=request.content_type)
        raise UpstreamModelFailure() from e

    run.advance(GenerationStage.POST_PROCESSING)
    parsed = parse_model_output(raw, prop.name, request.content_type)
    content, keywords = apply_hashtag_policy(parsed.content, prop.saved_hashtags or [])

    run.advance(GenerationStage.DONE)
    return _result(parsed.title, content, keywords)
