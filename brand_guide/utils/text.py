"""
HTML to visible plain text conversion.

Turns a raw homepage document into bounded, structure-preserving text that is
safe to embed in a model prompt. Regex and string operations only; JavaScript
is never executed, so client-rendered content is not recovered.
"""

import re

EXTRACTION_TEXT_MAX_LENGTH = 80_000
TRUNCATION_MARKER = "\n[... truncated for length ...]"

_SCRIPT_RE = re.compile(r"<script[\s\S]*?(?:</script>|\Z)", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?(?:</style>|\Z)", re.IGNORECASE)
_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")

_BLOCK_TAGS = (
    "h[1-6]", "p", "div", "br", "li", "tr", "th", "td", "hr", "ul", "ol",
    "section", "article", "header", "footer", "nav", "main", "aside",
    "blockquote", "pre",
)
_BLOCK_TAG_RE = re.compile(
    r"</?(?:" + "|".join(_BLOCK_TAGS) + r")(?:\s[^>]*)?/?>",
    re.IGNORECASE,
)
_ANY_TAG_RE = re.compile(r"<[^>]+>")

_NAMED_ENTITIES = (
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
    (re.compile(r"&quot;", re.IGNORECASE), '"'),
    (re.compile(r"&#39;|&apos;", re.IGNORECASE), "'"),
)
_AMP_RE = re.compile(r"&amp;", re.IGNORECASE)
_DECIMAL_REF_RE = re.compile(r"&#(\d+);")
_HEX_REF_RE = re.compile(r"&#x([0-9a-f]+);", re.IGNORECASE)

_WHITESPACE_RE = re.compile(r"\s+")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def _code_point(value: int, original: str) -> str:
    try:
        return chr(value)
    except (ValueError, OverflowError):
        return original


def decode_entities(text: str) -> str:
    """Decode the common named entities and decimal/hex character references."""
    for pattern, replacement in _NAMED_ENTITIES:
        text = pattern.sub(replacement, text)
    text = _DECIMAL_REF_RE.sub(lambda m: _code_point(int(m.group(1)), m.group(0)), text)
    text = _HEX_REF_RE.sub(lambda m: _code_point(int(m.group(1), 16), m.group(0)), text)
    # &amp; last so "&amp;lt;" stays the literal text "&lt;"
    return _AMP_RE.sub("&", text)


def sanitize_html(html: str, max_length: int = EXTRACTION_TEXT_MAX_LENGTH) -> str:
    """
    Convert HTML into visible plain text for extraction.

    Script/style blocks and comments are removed with their content, block-level
    tags become line breaks, remaining tags are stripped, entities are decoded and
    whitespace is collapsed into paragraphs separated by a blank line.

    Args:
        html: Raw HTML document.
        max_length: Character cap; longer output is cut and gets TRUNCATION_MARKER.

    Returns:
        The sanitized text, at most max_length + len(TRUNCATION_MARKER) characters.
    """
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _COMMENT_RE.sub("", text)

    text = _BLOCK_TAG_RE.sub("\n", text)
    text = _ANY_TAG_RE.sub(" ", text)

    text = decode_entities(text)

    lines = (_WHITESPACE_RE.sub(" ", line).strip() for line in text.split("\n"))
    text = "\n\n".join(line for line in lines if line)
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text).strip()

    if len(text) > max_length:
        text = text[:max_length] + TRUNCATION_MARKER
    return text
