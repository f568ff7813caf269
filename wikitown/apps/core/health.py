"""Health check helpers."""

from __future__ import annotations

from django.db import connection

from wikitown.apps.wiki.models import Article


def check_db_and_orm() -> dict:
    """Verify DB connectivity and ORM access by touching the articles table."""
    details: dict[str, object] = {}
    connection.ensure_connection()
    details["db"] = "ok"

    article_count = Article.objects.count()
    details["articles"] = article_count
    return details
