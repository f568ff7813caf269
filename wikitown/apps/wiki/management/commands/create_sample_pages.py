"""Create a handful of linked sample articles (dev only)."""

from django.core.management.base import BaseCommand, CommandError
from django.db import connection

from wikitown.apps.wiki.models import Article

SAMPLE_PAGES = [
    {
        "slug": "main-page",
        "title": "Main Page",
        "category": "",
        "summary": "Start here.",
        "content": (
            "Welcome to **Wikitown**, the community-built encyclopedia.\n"
            "Start with [[Ancient Ruins]] or read about the [[Town Square]]."
        ),
    },
    {
        "slug": "ancient-ruins",
        "title": "Ancient Ruins",
        "category": "Places",
        "summary": "Crumbling walls east of town.",
        "content": (
            "{{img:ruins.jpg|The eastern wall at dusk}}\n"
            "The ruins lie a short walk from the [[Town Square]].\n"
            "Locals say the wind sounds like singing.\n"
            "{{audio:wind.mp3|Wind over the walls}}"
        ),
    },
    {
        "slug": "town-square",
        "title": "Town Square",
        "category": "Places",
        "summary": "The market and the old well.",
        "content": (
            "Market day is **Saturday**. Look for the well {{img:well.png|the old well}} "
            "in the middle of the square."
        ),
    },
]


class Command(BaseCommand):
    help = "Create sample wiki articles (SQLite dev databases only)"

    def handle(self, *args, **options):
        if "sqlite" not in connection.settings_dict["ENGINE"].lower():
            raise CommandError(
                "This command only runs on SQLite databases (local dev environments)"
            )

        for data in SAMPLE_PAGES:
            page_data = data.copy()
            slug = page_data.pop("slug")
            _, created = Article.objects.update_or_create(slug=slug, defaults=page_data)
            verb = "Created" if created else "Updated"
            self.stdout.write(f"{verb} article: {slug}")

        self.stdout.write(self.style.SUCCESS(f"{len(SAMPLE_PAGES)} sample articles ready"))
