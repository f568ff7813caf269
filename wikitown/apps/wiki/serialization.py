"""Tree -> markup serialization, and editor HTML -> tree parsing.

The rich-text editor submits its ``innerHTML``. ``parse_html`` snapshots it
into an immutable tree once; ``serialize`` then walks that tree. Lossy spots:

- italic has no markup and is dropped (its text is kept);
- links keep only their visible text, so a link whose target was changed
  without changing its text points back at the text's slug after a save.
"""

from __future__ import annotations

import logging
from typing import assert_never

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from . import grammar
from .nodes import (
    Audio,
    Bold,
    Container,
    Figure,
    Fragment,
    Image,
    Italic,
    LineBreak,
    Link,
    Node,
    Text,
)

logger = logging.getLogger(__name__)

_BOLD_TAGS = {"strong", "b"}
_ITALIC_TAGS = {"em", "i"}
_BLOCK_TAGS = {"div", "p"}


def serialize(node: Node) -> str:
    """Serialize a tree to canonical markup, trimmed once at the ends."""
    return _to_markup(node).strip()


def _to_markup(node: Node) -> str:
    if isinstance(node, Text):
        return node.text
    if isinstance(node, Figure):
        return grammar.image_markup(node.filename, node.caption)
    if isinstance(node, Audio):
        return grammar.audio_markup(node.filename, node.title)
    if isinstance(node, Image):
        label = node.alt if node.alt != node.filename else ""
        return grammar.image_markup(node.filename, label)
    if isinstance(node, Bold):
        return grammar.bold_markup(_children_markup(node.children))
    if isinstance(node, Italic):
        return _children_markup(node.children)
    if isinstance(node, Link):
        return grammar.link_markup(node.text)
    if isinstance(node, LineBreak):
        return "\n"
    if isinstance(node, Container):
        return "\n" + _children_markup(node.children)
    if isinstance(node, Fragment):
        return _children_markup(node.children)
    assert_never(node)


def _children_markup(children: tuple[Node, ...]) -> str:
    return "".join(_to_markup(child) for child in children)


# ---------------------------------------------------------------------------
# HTML parsing
# ---------------------------------------------------------------------------


def parse_html(html: str) -> Fragment:
    """Parse editor HTML into a tree.

    Uses the stdlib-backed ``html.parser`` builder so malformed fragments are
    repaired the same way on every platform.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    return Fragment(_parse_children(soup))


def _parse_children(parent: Tag) -> tuple[Node, ...]:
    nodes = []
    for child in parent.children:
        node = _parse_node(child)
        if node is not None:
            nodes.append(node)
    return tuple(nodes)


def _parse_node(el) -> Node | None:
    if isinstance(el, NavigableString):
        # Comments, CDATA, doctypes and processing instructions carry no text.
        if isinstance(el, PreformattedString):
            return None
        return Text(str(el))
    if not isinstance(el, Tag):
        return None

    tag = el.name.lower()
    classes = el.get("class") or []

    if tag == "figure":
        img = el.find("img")
        if img is not None:
            caption = el.find("figcaption")
            return Figure(
                grammar.media_filename(img.get("src", "")),
                caption.get_text() if caption is not None else "",
            )

    if "wiki-audio" in classes:
        return Audio(el.get("data-file", ""), el.get("data-title", ""))

    if tag == "img":
        return Image(grammar.media_filename(el.get("src", "")), el.get("alt", ""))

    if tag in _BOLD_TAGS:
        return Bold(_parse_children(el))

    if tag in _ITALIC_TAGS:
        return Italic(_parse_children(el))

    if tag == "a" and "wiki-link" in classes:
        href = el.get("href", "")
        slug = href.removeprefix(grammar.WIKI_URL_PREFIX)
        return Link(el.get_text(), slug)

    if tag == "br":
        return LineBreak()

    if tag in _BLOCK_TAGS:
        return Container(_parse_children(el))

    return Fragment(_parse_children(el))


def html_to_markup(html: str) -> str:
    """Convert editor HTML to the markup stored on an article."""
    markup = serialize(parse_html(html))
    logger.debug(
        "Serialized editor HTML",
        extra={"html_length": len(html or ""), "markup_length": len(markup)},
    )
    return markup
