# hostprompt/services/image_describer.py
from __future__ import annotations

import logging
from typing import Optional

from hostprompt import ai_clients
from hostprompt.errors import UpstreamVisionFailure
from hostprompt.services import prompts as P

logger = logging.getLogger(__name__)


def fallback_description(property_name: Optional[str] = None) -> str:
    return P.VISION_FALLBACK.format(name=property_name or "vacation")


def describe_image(image_data: Optional[str], property_name: Optional[str] = None) -> str:
    """
    Describe what is literally visible in a property photo.

    Never raises: a missing image or any vision failure yields a generic
    description naming the property.
    """
    if not isinstance(image_data, str) or not image_data.strip():
        return fallback_description(property_name)

    try:
        return ai_clients.vision_completion(P.VISION_SYSTEM, P.VISION_PROMPT, image_data)
    except UpstreamVisionFailure as e:
        logger.warning("Image description failed, using fallback: %s", e.message)
        return fallback_description(property_name)
