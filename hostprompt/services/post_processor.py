# hostprompt/services/post_processor.py
"""
Deterministic cleanup of raw model text.

Nothing in here raises: a pattern that matches nothing is a no-op.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

TRAVEL_WORDS = (
    "vacation", "getaway", "travel", "beach", "mountain", "luxury",
    "cozy", "family", "romantic", "relaxation", "adventure",
)
MAX_FALLBACK_KEYWORDS = 5

_TITLE_RE = re.compile(r"^Title:\s*(.*)(?:\n|$)", re.M | re.I)
_KEYWORDS_LINE_RE = re.compile(r"^Keywords:\s*(.*)(?:\n|$)", re.M | re.I)
_HASHTAG_WORD_RE = re.compile(r"#(\w+)")
# hashtags are removed together with the gap they leave; other whitespace is untouched
_LINE_START_HASHTAGS_RE = re.compile(r"^([ \t]*)(?:#\w+[ \t]*)+", re.M)
_INLINE_HASHTAG_RE = re.compile(r"[ \t]*#\w+")
_TRAILING_BLANKS_RE = re.compile(r"[ \t]+$", re.M)

# (pattern, replacement), applied in order on every pass
_STRIP_RULES = [
    (re.compile(r"Keywords:[\s\S]*$", re.I), ""),
    (re.compile(r"^(?:Content|Caption|Description|Message):[ \t]*", re.I), ""),
    (re.compile(r"^\d+\.?[ \t]+[^:\n]+:[ \t]*", re.M), ""),
    # 1-4 word label; colon must be followed by blank or end so urls and times survive
    (re.compile(r"^[A-Za-z]+(?: [A-Za-z]+){0,3}:(?=[ \t]|$)[ \t]*", re.M), ""),
    (re.compile(r"^[ \t]*#{1,6}[ \t]+", re.M), ""),
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),
    (re.compile(r"__(.+?)__"), r"\1"),
    (re.compile(r"(?<!\*)\*(?![\s*])(.+?)(?<![\s*])\*(?!\*)"), r"\1"),
    (re.compile(r"(?<!\w)_(?![\s_])(.+?)(?<![\s_])_(?!\w)"), r"\1"),
    (re.compile(r"^[ \t]*[-•*][ \t]+", re.M), ""),
    (re.compile(r"^[ \t]*\d+[.)][ \t]+", re.M), ""),
]

_SECTION_SPLIT_RE = re.compile(r"\n\n+")
_KEYWORD_SECTION_RE = re.compile(r"^\d+\.\s+|^[A-Za-z\s]+:\s+|^-\s+|^•\s+")


@dataclass
class ParsedOutput:
    title: str
    content: str
    keywords: List[str] = field(default_factory=list)


def extract_keywords(text: str) -> List[str]:
    """#word tokens first, then travel words present as whole words; unique, max 5."""
    found: List[str] = list(_HASHTAG_WORD_RE.findall(text or ""))
    for word in TRAVEL_WORDS:
        if re.search(rf"\b{word}\b", text or "", re.I):
            found.append(word)

    unique: List[str] = []
    for word in found:
        if word not in unique:
            unique.append(word)
    return unique[:MAX_FALLBACK_KEYWORDS]


def _strip_once(text: str) -> str:
    for pattern, repl in _STRIP_RULES:
        text = pattern.sub(repl, text)
    return text.strip()


def strip_formatting(text: str) -> str:
    """
    Remove markdown and label artifacts.

    Every rule only ever shortens the text, so repeating the pass until
    nothing changes terminates and makes the result idempotent.
    """
    current = text or ""
    while True:
        cleaned = _strip_once(current)
        if cleaned == current:
            return cleaned
        current = cleaned


def drop_trailing_keyword_section(text: str) -> str:
    sections = _SECTION_SPLIT_RE.split(text)
    if len(sections) > 1:
        if _KEYWORD_SECTION_RE.match(sections[-1]):
            sections.pop()
        text = "\n\n".join(sections)
    return text


def parse_model_output(raw: str, default_title: str, content_type: str) -> ParsedOutput:
    """Split raw model text into title, cleaned body and keywords."""
    content = raw or ""
    title = default_title

    m = _TITLE_RE.search(content)
    if m:
        if m.group(1).strip():
            title = m.group(1).strip()
        content = content[: m.start()] + content[m.end():]

    keywords: List[str] = []
    m = _KEYWORDS_LINE_RE.search(content)
    if m:
        keywords = [k.strip() for k in m.group(1).split(",") if k.strip()]
        content = content[: m.start()] + content[m.end():]

    if not keywords:
        keywords = extract_keywords(content)

    content = strip_formatting(content)

    if content_type == "social_media_caption":
        content = drop_trailing_keyword_section(content)

    return ParsedOutput(title=title, content=content, keywords=keywords)


def apply_hashtag_policy(content: str, saved_hashtags: Sequence[str]) -> Tuple[str, List[str]]:
    """
    Saved hashtags are the only keywords. Inline hashtags are always removed;
    saved ones are appended after a blank line as "#tag " each.
    """
    body = _LINE_START_HASHTAGS_RE.sub(r"\1", content or "")
    body = _INLINE_HASHTAG_RE.sub("", body)
    body = _TRAILING_BLANKS_RE.sub("", body)
    body = body.strip()

    tags = [t for t in (saved_hashtags or []) if t]
    if not tags:
        return body, []

    body += "\n\n" + "".join(f"#{tag} " for tag in tags)
    return body, list(tags)
