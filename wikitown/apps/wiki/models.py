"""Wiki domain models."""

from __future__ import annotations

from django.db import models

from wikitown.apps.core.models import TimeStampedMixin


class ArticleQuerySet(models.QuerySet):
    """Custom queryset for Article."""

    def search(self, query: str = ""):
        """Case-insensitive search across title, slug, summary, and content.

        Returns the queryset unchanged if query is empty/whitespace.
        Caller is responsible for ordering.
        """
        query = (query or "").strip()
        if not query:
            return self

        return self.filter(
            models.Q(title__icontains=query)
            | models.Q(slug__icontains=query)
            | models.Q(summary__icontains=query)
            | models.Q(content__icontains=query)
        )

    def in_category(self, category: str = ""):
        """Filter to one category; empty means all."""
        category = (category or "").strip()
        if not category:
            return self
        return self.filter(category=category)

    def categories(self) -> list[str]:
        """Distinct non-empty categories, alphabetically."""
        return list(
            self.exclude(category="")
            .order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )


class Article(TimeStampedMixin):
    """A wiki article. ``content`` holds wiki markup."""

    slug = models.CharField(max_length=200, unique=True)
    title = models.CharField(max_length=200)
    content = models.TextField(blank=True)
    summary = models.CharField(max_length=500, blank=True)
    category = models.CharField(max_length=100, blank=True, db_index=True)

    objects = ArticleQuerySet.as_manager()

    class Meta:
        ordering = ["title"]
        indexes = [
            models.Index(fields=["updated_at"], name="article_updated_at_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    def as_summary(self) -> dict:
        return {
            "id": self.pk,
            "slug": self.slug,
            "title": self.title,
            "summary": self.summary,
            "category": self.category,
            "updated_at": self.updated_at.isoformat(),
        }

    def as_record(self) -> dict:
        return {
            "id": self.pk,
            "slug": self.slug,
            "title": self.title,
            "content": self.content,
            "summary": self.summary,
            "category": self.category,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
