"""Read-side queries for the wiki."""

from __future__ import annotations

from .models import Article
from .nodes import Bold, Container, Figure, Fragment, Image, Italic, Node
from .rendering import iter_blocks


def first_image(markup: str) -> str | None:
    """Return the filename of the first block or inline image in ``markup``."""
    for block in iter_blocks(markup):
        filename = _first_image_in(block)
        if filename:
            return filename
    return None


def _first_image_in(node: Node) -> str | None:
    if isinstance(node, Figure | Image):
        return node.filename
    if isinstance(node, Bold | Italic | Container | Fragment):
        for child in node.children:
            filename = _first_image_in(child)
            if filename:
                return filename
    return None


def category_cards() -> list[dict[str, str | None]]:
    """Build ``{category, image}`` cards for every non-empty category.

    ``image`` comes from the most recently updated article in the category
    that contains an image.
    """
    images: dict[str, str | None] = {}
    articles = (
        Article.objects.exclude(category="")
        .order_by("category", "-updated_at")
        .values_list("category", "content")
    )
    for category, content in articles.iterator():
        if images.get(category):
            continue
        images[category] = first_image(content)
    return [{"category": category, "image": image} for category, image in images.items()]
