"""Markup -> tree rendering, and tree -> HTML for the display and editing surfaces."""

from __future__ import annotations

from collections.abc import Iterator
from typing import assert_never

from django.utils.html import escape, format_html
from django.utils.safestring import SafeString, mark_safe

from . import grammar
from .nodes import (
    Audio,
    Block,
    Bold,
    Container,
    Figure,
    Fragment,
    Image,
    Italic,
    LineBreak,
    Link,
    Node,
    Span,
    Text,
)


def iter_blocks(markup: str) -> Iterator[Block]:
    """Yield one block per line of ``markup``.

    Each line is a standalone image, a standalone audio player, or (fallback)
    a ``Fragment`` of inline spans. Anything that doesn't match the grammar is
    kept as literal text; this never raises.
    """
    for line in (markup or "").split("\n"):
        yield render_line(line)


def render(markup: str) -> Fragment:
    """Render ``markup`` to a tree: blocks separated by ``LineBreak`` markers."""
    children: list[Node] = []
    for block in iter_blocks(markup):
        if children:
            children.append(LineBreak())
        children.append(block)
    return Fragment(tuple(children))


def render_line(line: str) -> Block:
    # Order matters: a whole-line media tag wins over inline parsing.
    match = grammar.BLOCK_IMAGE_RE.match(line)
    if match:
        return Figure(match["file"], match["label"] or "")

    match = grammar.BLOCK_AUDIO_RE.match(line)
    if match:
        return Audio(match["file"], match["label"] or "")

    return Fragment(tuple(render_inline(line)))


def render_inline(text: str) -> Iterator[Span]:
    """Split a line into bold, inline image, link and text spans.

    Bold segments are not scanned for images or links.
    """
    for index, part in enumerate(grammar.BOLD_RE.split(text)):
        if index % 2 == 1:
            yield Bold((Text(part),))
        else:
            yield from _render_images(part)


def _render_images(text: str) -> Iterator[Span]:
    pos = 0
    for match in grammar.INLINE_IMAGE_RE.finditer(text):
        yield from _render_links(text[pos : match.start()])
        filename = match["file"]
        yield Image(filename, match["label"] or filename)
        pos = match.end()
    yield from _render_links(text[pos:])


def _render_links(text: str) -> Iterator[Span]:
    for index, part in enumerate(grammar.LINK_RE.split(text)):
        if index % 2 == 1:
            yield Link(part, grammar.page_slug(part))
        elif part:
            yield Text(part)


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


def to_html(node: Node) -> str:
    """Emit HTML for a tree. Text and attribute values are escaped."""
    if isinstance(node, Text):
        return escape(node.text)
    if isinstance(node, Bold):
        return format_html("<strong>{}</strong>", _children_html(node.children))
    if isinstance(node, Italic):
        return format_html("<em>{}</em>", _children_html(node.children))
    if isinstance(node, Link):
        return format_html(
            '<a href="{}" class="wiki-link">{}</a>', grammar.page_url(node.slug), node.text
        )
    if isinstance(node, Image):
        return format_html(
            '<img src="{}" alt="{}" class="wiki-image-inline">',
            grammar.media_url(node.filename),
            node.alt or node.filename,
        )
    if isinstance(node, Figure):
        img = format_html(
            '<img src="{}" alt="{}" class="wiki-image">',
            grammar.media_url(node.filename),
            node.caption or node.filename,
        )
        caption = format_html("<figcaption>{}</figcaption>", node.caption) if node.caption else ""
        return format_html('<figure class="wiki-figure">{}{}</figure>', img, caption)
    if isinstance(node, Audio):
        title = ""
        if node.title:
            title = format_html('<span class="wiki-audio-title">{}</span>', node.title)
        return format_html(
            '<div class="wiki-audio" data-file="{}" data-title="{}">{}'
            '<audio controls preload="none"><source src="{}"></audio></div>',
            node.filename,
            node.title,
            title,
            grammar.media_url(node.filename),
        )
    if isinstance(node, LineBreak):
        return mark_safe("<br>")
    if isinstance(node, Container):
        return format_html("<div>{}</div>", _children_html(node.children))
    if isinstance(node, Fragment):
        return _children_html(node.children)
    assert_never(node)


def _children_html(children: tuple[Node, ...]) -> SafeString:
    return mark_safe("".join(to_html(child) for child in children))  # noqa: S308


def markup_to_html(markup: str) -> SafeString:
    """Render stored markup straight to HTML, safe for templates."""
    return mark_safe(to_html(render(markup)))  # noqa: S308
