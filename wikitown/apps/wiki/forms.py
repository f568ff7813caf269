"""Forms for wiki articles."""

from __future__ import annotations

import re

from django import forms
from django.core.exceptions import ValidationError

from .models import Article
from .serialization import html_to_markup

# Lowercase, no whitespace or slashes. Punctuation is allowed because link
# targets keep it ("[[Foo's Bar]]" -> "foo's-bar").
SLUG_RE = re.compile(r"^[^\sA-Z/?#]+$")


def validate_slug(slug: str) -> None:
    if not slug or len(slug) > 200 or not SLUG_RE.match(slug):
        raise ValidationError(f"Invalid page slug: '{slug}'")


class ArticleForm(forms.ModelForm):
    """Validate an article upsert payload.

    The article body arrives either as markup (``content``) or, from the
    rich-text editor, as HTML (``html``) that is serialized to markup here.
    ``content`` wins when both are sent.
    """

    html = forms.CharField(required=False, strip=False)

    class Meta:
        model = Article
        fields = ["title", "content", "summary", "category"]

    def __init__(self, *args, slug: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.slug = slug

    def clean(self):
        cleaned_data = super().clean()
        validate_slug(self.slug)
        if "content" not in self.data and self.data.get("html"):
            cleaned_data["content"] = html_to_markup(cleaned_data.get("html", ""))
        return cleaned_data

    def save(self, commit=True):
        self.instance.slug = self.slug
        return super().save(commit=commit)

    def error_messages_list(self) -> list[str]:
        """Flatten field and non-field errors to ``"field: message"`` strings."""
        messages = []
        for field, errors in self.errors.items():
            for error in errors:
                messages.append(error if field == "__all__" else f"{field}: {error}")
        return messages
