# hostprompt/services/content_editor.py
from __future__ import annotations

import logging

from flask import current_app

from hostprompt import ai_clients
from hostprompt.errors import UpstreamModelFailure
from hostprompt.models import Property
from hostprompt.services import prompts as P

logger = logging.getLogger(__name__)

EDIT_FAILED_MESSAGE = "Failed to edit content with prompt"


def build_edit_prompts(content: str, prompt: str, prop: Property, content_type: str):
    brand_voice_line = P.EDIT_BRAND_VOICE.format(brand_voice=prop.brand_voice) if prop.brand_voice else ""
    system = P.EDIT_SYSTEM.format(
        name=prop.name,
        location=prop.location,
        content_type=content_type or "",
        brand_voice_line=brand_voice_line,
    )
    user = P.EDIT_USER.format(content=content, prompt=prompt)
    return system, user


def edit_content(content: str, prompt: str, prop: Property, content_type: str) -> str:
    """Rewrite content per a free-text instruction; an empty answer keeps the original."""
    system, user = build_edit_prompts(content, prompt, prop, content_type)
    try:
        edited = ai_clients.chat_completion(
            system,
            user,
            temperature=float(current_app.config.get("EDIT_TEMPERATURE", 0.7)),
            allow_empty=True,
        )
    except UpstreamModelFailure as e:
        logger.error("Edit-with-prompt failed for property #%s: %s", prop.id, e.message)
        raise UpstreamModelFailure(EDIT_FAILED_MESSAGE) from e

    return edited.strip() or content
