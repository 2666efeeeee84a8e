# hostprompt/ai_clients.py
"""
Thin transport over the hosted language-model APIs.

Every caller goes through chat_completion() or vision_completion(); which
provider answers is decided by AI_PROVIDER ('openai' by default, 'anthropic'
as the alternative). Failures are raised as UpstreamModelFailure /
UpstreamVisionFailure so the services decide whether to surface or recover.
"""
from __future__ import annotations

import logging
import os
import re
from typing import Optional

import anthropic
from flask import current_app
from openai import OpenAI

from hostprompt.errors import UpstreamModelFailure, UpstreamVisionFailure

logger = logging.getLogger(__name__)

_DATA_URL_RE = re.compile(r"^data:(?P<media_type>[\w/+.-]+);base64,(?P<data>.+)$", re.DOTALL)


def _config(key: str, default=None):
    try:
        return current_app.config.get(key, default)
    except RuntimeError:
        return default


def get_openai_key() -> Optional[str]:
    """
    Central place to read the OpenAI API key.
    Checks environment first, then Flask config.
    """
    return os.getenv("OPENAI_API_KEY") or _config("OPENAI_API_KEY") or None


def get_anthropic_key() -> Optional[str]:
    return os.getenv("ANTHROPIC_API_KEY") or _config("ANTHROPIC_API_KEY") or None


def provider() -> str:
    return (_config("AI_PROVIDER") or "openai").strip().lower()


def ai_available() -> bool:
    """True if the configured provider has an API key."""
    if provider() == "anthropic":
        return bool(get_anthropic_key())
    return bool(get_openai_key())


def to_data_url(image_data: str) -> str:
    """Accept raw base64 or a data URL; always return a data URL."""
    image_data = (image_data or "").strip()
    if image_data.startswith("data:"):
        return image_data
    return f"data:image/jpeg;base64,{image_data}"


def _anthropic_text(resp) -> str:
    # resp.content is a list of blocks; gather their text
    parts = []
    for block in getattr(resp, "content", []) or []:
        text = getattr(block, "text", None)
        if text:
            parts.append(text)
    return "\n".join(parts).strip()


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def chat_completion(
    system: Optional[str],
    user: str,
    *,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
    json_mode: bool = False,
    allow_empty: bool = False,
) -> str:
    """
    Single-turn completion. Returns the stripped text or raises
    UpstreamModelFailure. An empty answer is a failure unless allow_empty.
    """
    max_tokens = max_tokens or int(_config("GENERATION_MAX_TOKENS", 1000))

    if provider() == "anthropic":
        text = _claude_chat(system, user, max_tokens=max_tokens, temperature=temperature, json_mode=json_mode)
    else:
        text = _openai_chat(system, user, max_tokens=max_tokens, temperature=temperature, json_mode=json_mode)

    if not text and not allow_empty:
        raise UpstreamModelFailure("Model returned an empty response")
    return text


def _openai_chat(system, user, *, max_tokens, temperature, json_mode) -> str:
    api_key = get_openai_key()
    if not api_key:
        raise UpstreamModelFailure("OpenAI API key not configured.")

    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": user})

    kwargs = {
        "model": _config("OPENAI_MODEL", "gpt-4o"),
        "messages": messages,
        "max_tokens": max_tokens,
    }
    if temperature is not None:
        kwargs["temperature"] = temperature
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    try:
        resp = OpenAI(api_key=api_key).chat.completions.create(**kwargs)
        text = (resp.choices[0].message.content or "").strip()
    except Exception as e:
        logger.exception("OpenAI chat completion failed")
        raise UpstreamModelFailure(f"OpenAI error: {e}") from e

    return text


def _claude_chat(system, user, *, max_tokens, temperature, json_mode) -> str:
    api_key = get_anthropic_key()
    if not api_key:
        raise UpstreamModelFailure("Anthropic API key not configured.")

    if json_mode:
        user = user + "\n\nRespond with a single JSON object and nothing else."

    kwargs = {
        "model": _config("CLAUDE_MODEL", "claude-3-haiku-20240307"),
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": user}],
    }
    if system:
        kwargs["system"] = system
    if temperature is not None:
        kwargs["temperature"] = temperature

    try:
        resp = anthropic.Anthropic(api_key=api_key).messages.create(**kwargs)
        text = _anthropic_text(resp)
    except Exception as e:
        logger.exception("Anthropic message call failed")
        raise UpstreamModelFailure(f"Anthropic error: {e}") from e

    return text


# ---------------------------------------------------------------------------
# Vision
# ---------------------------------------------------------------------------

def vision_completion(system: str, prompt: str, image_data: str, *, max_tokens: Optional[int] = None) -> str:
    """Describe one image. Returns text or raises UpstreamVisionFailure."""
    max_tokens = max_tokens or int(_config("VISION_MAX_TOKENS", 1000))
    data_url = to_data_url(image_data)

    try:
        if provider() == "anthropic":
            text = _claude_vision(system, prompt, data_url, max_tokens)
        else:
            text = _openai_vision(system, prompt, data_url, max_tokens)
    except UpstreamVisionFailure:
        raise
    except Exception as e:
        logger.exception("Vision call failed")
        raise UpstreamVisionFailure(str(e)) from e

    if not text:
        raise UpstreamVisionFailure("Vision model returned an empty response")
    return text


def _openai_vision(system: str, prompt: str, data_url: str, max_tokens: int) -> str:
    api_key = get_openai_key()
    if not api_key:
        raise UpstreamVisionFailure("OpenAI API key not configured.")

    resp = OpenAI(api_key=api_key).chat.completions.create(
        model=_config("OPENAI_MODEL", "gpt-4o"),
        messages=[
            {"role": "system", "content": system},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            },
        ],
        max_tokens=max_tokens,
    )
    return (resp.choices[0].message.content or "").strip()


def _claude_vision(system: str, prompt: str, data_url: str, max_tokens: int) -> str:
    api_key = get_anthropic_key()
    if not api_key:
        raise UpstreamVisionFailure("Anthropic API key not configured.")

    m = _DATA_URL_RE.match(data_url)
    if not m:
        raise UpstreamVisionFailure("Image is not a base64 data URL")

    resp = anthropic.Anthropic(api_key=api_key).messages.create(
        model=_config("CLAUDE_MODEL", "claude-3-haiku-20240307"),
        max_tokens=max_tokens,
        system=system,
        messages=[
            {
                "role": "user",
                "content": [
                    {
                        "type": "image",
                        "source": {
                            "type": "base64",
                            "media_type": m.group("media_type"),
                            "data": m.group("data"),
                        },
                    },
                    {"type": "text", "text": prompt},
                ],
            }
        ],
    )
    return _anthropic_text(resp)
