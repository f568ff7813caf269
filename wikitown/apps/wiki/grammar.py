"""Wiki markup grammar shared by the renderer and the serializer.

Syntax::

    **bold text**
    [[Page Name]]                 link; target slug is "page-name"
    {{img:file.png|Caption}}      block image when alone on a line, else inline
    {{audio:file.mp3|Title}}      block audio, only when alone on a line

Captions, alt text and titles are optional. Newlines separate lines.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from django.conf import settings

# Filename: at least one non-blank character, no pipes or braces.
# Label: anything up to the closing "}}", braces included; the block patterns
# anchor it at the end of the line, the inline pattern stops at the first "}}".
# Surrounding whitespace is consumed outside the groups so captures come out trimmed.
_FILE = r"\s*(?P<file>[^|{}\s](?:[^|{}]*?[^|{}\s])?)\s*"
_LABEL = r"(?:\|\s*(?P<label>.*?)\s*)?"

BLOCK_IMAGE_RE = re.compile(rf"^\{{\{{img:{_FILE}{_LABEL}\}}\}}$")
BLOCK_AUDIO_RE = re.compile(rf"^\{{\{{audio:{_FILE}{_LABEL}\}}\}}$")
INLINE_IMAGE_RE = re.compile(rf"\{{\{{img:{_FILE}{_LABEL}\}}\}}")
BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
LINK_RE = re.compile(r"\[\[(.*?)\]\]")

_WHITESPACE_RE = re.compile(r"\s+")

WIKI_URL_PREFIX = "/wiki/"


def page_slug(name: str) -> str:
    """Return the link target slug for a page name.

    Lowercases and collapses whitespace runs into single hyphens, nothing else:
    ``"Ancient Ruins"`` -> ``"ancient-ruins"``.
    """
    return _WHITESPACE_RE.sub("-", name.lower())


def page_url(slug: str) -> str:
    return f"{WIKI_URL_PREFIX}{slug}"


def media_url(filename: str) -> str:
    """URL of a media blob as used in rendered ``src`` attributes."""
    return f"{settings.MEDIA_URL}{filename}"


def _media_path() -> str:
    path = urlsplit(settings.MEDIA_URL).path or "/"
    return path if path.endswith("/") else f"{path}/"


def media_filename(src: str) -> str:
    """Strip everything up to and including the media path from a URL.

    Works for both relative (``/media/a.png``) and absolute
    (``https://host/media/a.png``) URLs; a bare filename is returned unchanged.
    """
    prefix = re.compile(rf"^.*{re.escape(_media_path())}")
    return prefix.sub("", src, count=1)


def image_markup(filename: str, label: str = "") -> str:
    if label:
        return f"{{{{img:{filename}|{label}}}}}"
    return f"{{{{img:{filename}}}}}"


def audio_markup(filename: str, title: str = "") -> str:
    if title:
        return f"{{{{audio:{filename}|{title}}}}}"
    return f"{{{{audio:{filename}}}}}"


def bold_markup(inner: str) -> str:
    return f"**{inner}**"


def link_markup(text: str) -> str:
    return f"[[{text}]]"
