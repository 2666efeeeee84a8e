# hostprompt/services/brand_voice.py
"""
Brand-voice analysis: free text in, a two-word label plus one-line summary out.

The model is asked for JSON. Anything short of a well-formed answer falls back
to a fixed pair; callers never see an analysis error.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from hostprompt import ai_clients
from hostprompt.errors import BrandVoiceAnalysisFailure, UpstreamModelFailure, ValidationError
from hostprompt.services import prompts as P

logger = logging.getLogger(__name__)

INPUT_TYPES = tuple(P.BRAND_VOICE_PROMPTS)


@dataclass
class BrandVoiceResult:
    brand_voice: str
    brand_voice_summary: str
    fallback: bool = False

    def to_dict(self) -> dict:
        return {"brandVoice": self.brand_voice, "brandVoiceSummary": self.brand_voice_summary}


def fallback_result() -> BrandVoiceResult:
    voice, summary = P.BRAND_VOICE_FALLBACK
    return BrandVoiceResult(voice, summary, fallback=True)


def _parse(raw: str) -> BrandVoiceResult:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise BrandVoiceAnalysisFailure(f"Malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise BrandVoiceAnalysisFailure("Expected a JSON object")
    voice = data.get("brandVoice")
    summary = data.get("brandVoiceSummary")
    if not isinstance(voice, str) or not voice.strip():
        raise BrandVoiceAnalysisFailure("brandVoice missing")
    if not isinstance(summary, str) or not summary.strip():
        raise BrandVoiceAnalysisFailure("brandVoiceSummary missing")
    return BrandVoiceResult(voice.strip(), summary.strip())


def analyze_brand_voice(text: str, input_type: str) -> BrandVoiceResult:
    if input_type not in P.BRAND_VOICE_PROMPTS:
        raise ValidationError(f"inputType must be one of: {', '.join(INPUT_TYPES)}")

    prompt = P.BRAND_VOICE_PROMPTS[input_type].format(input=text)
    try:
        try:
            raw = ai_clients.chat_completion(None, prompt, json_mode=True)
        except UpstreamModelFailure as e:
            raise BrandVoiceAnalysisFailure(e.message) from e
        return _parse(raw)
    except BrandVoiceAnalysisFailure as e:
        logger.warning("Brand voice analysis fell back to default: %s", e.message)
        return fallback_result()
