"""Node types of the rendered/editable wiki tree.

The same closed set of nodes is produced by the markup renderer and by the
editor HTML parser, and consumed by the HTML emitter and the markup
serializer. Every node is a frozen dataclass holding tuples, so a tree is an
immutable value that can be handed between threads or kept as a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Bold:
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Italic:
    """Italic text from the editor. The markup has no italic marker."""

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Link:
    """Wiki link. Only ``text`` survives serialization."""

    text: str
    slug: str


@dataclass(frozen=True)
class Image:
    """Inline image."""

    filename: str
    alt: str = ""


@dataclass(frozen=True)
class Figure:
    """Block image with an optional caption."""

    filename: str
    caption: str = ""


@dataclass(frozen=True)
class Audio:
    """Block audio player with an optional title."""

    filename: str
    title: str = ""


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class Container:
    """Block container (div/p). Opens a new line when serialized."""

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Fragment:
    """Transparent grouping: a document, a rendered line, or an unknown element."""

    children: tuple[Node, ...] = ()


Span = Text | Bold | Link | Image
Block = Figure | Audio | Fragment
Node = Text | Bold | Italic | Link | Image | Figure | Audio | LineBreak | Container | Fragment
