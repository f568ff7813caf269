"""Tests for the create_sample_pages management command."""

from io import StringIO

from django.core.management import call_command
from django.test import TestCase, tag

from wikitown.apps.wiki.models import Article
from wikitown.apps.wiki.selectors import category_cards


@tag("models")
class CreateSamplePagesTests(TestCase):
    def test_creates_linked_pages(self):
        out = StringIO()

        call_command("create_sample_pages", stdout=out)

        self.assertEqual(
            sorted(Article.objects.values_list("slug", flat=True)),
            ["ancient-ruins", "main-page", "town-square"],
        )
        self.assertIn("3 sample articles ready", out.getvalue())

    def test_is_idempotent(self):
        call_command("create_sample_pages", stdout=StringIO())
        out = StringIO()

        call_command("create_sample_pages", stdout=out)

        self.assertEqual(Article.objects.count(), 3)
        self.assertIn("Updated article: main-page", out.getvalue())

    def test_sample_category_has_image(self):
        call_command("create_sample_pages", stdout=StringIO())

        cards = category_cards()

        self.assertEqual(len(cards), 1)
        self.assertEqual(cards[0]["category"], "Places")
        self.assertIn(cards[0]["image"], {"ruins.jpg", "well.png"})
