"""Tests for the Article model and queryset."""

from django.db import IntegrityError
from django.test import TestCase, tag

from wikitown.apps.core.test_utils import create_article
from wikitown.apps.wiki.models import Article


@tag("models")
class ArticleQuerySetTests(TestCase):
    def setUp(self):
        self.ruins = create_article(
            title="Ancient Ruins", category="Places", summary="Crumbling walls"
        )
        self.square = create_article(
            title="Town Square", category="Places", content="The old **well**."
        )
        self.mayor = create_article(title="Mayor", category="People")
        self.main = create_article(title="Main Page")

    def test_blank_search_returns_everything(self):
        self.assertEqual(Article.objects.search("   ").count(), 4)

    def test_search_matches_title_case_insensitively(self):
        self.assertEqual(list(Article.objects.search("RUINS")), [self.ruins])

    def test_search_matches_slug(self):
        self.assertEqual(list(Article.objects.search("town-square")), [self.square])

    def test_search_matches_summary(self):
        self.assertEqual(list(Article.objects.search("crumbling")), [self.ruins])

    def test_search_matches_content(self):
        self.assertEqual(list(Article.objects.search("well")), [self.square])

    def test_in_category(self):
        self.assertEqual(
            list(Article.objects.in_category("Places")), [self.ruins, self.square]
        )

    def test_empty_category_means_all(self):
        self.assertEqual(Article.objects.in_category("").count(), 4)

    def test_categories_are_distinct_and_sorted(self):
        self.assertEqual(Article.objects.categories(), ["People", "Places"])


@tag("models")
class ArticleModelTests(TestCase):
    def test_slug_is_unique(self):
        create_article(title="Well", slug="well")

        with self.assertRaises(IntegrityError):
            create_article(title="Another Well", slug="well")

    def test_default_ordering_is_by_title(self):
        create_article(title="B")
        create_article(title="A")

        self.assertEqual([a.title for a in Article.objects.all()], ["A", "B"])

    def test_str(self):
        self.assertEqual(str(create_article(title="Well")), "Well")

    def test_as_record_includes_content_and_timestamps(self):
        article = create_article(title="Well", content="{{img:well.png}}")

        record = article.as_record()

        self.assertEqual(record["content"], "{{img:well.png}}")
        self.assertEqual(record["created_at"], article.created_at.isoformat())
        self.assertEqual(record["updated_at"], article.updated_at.isoformat())

    def test_as_summary_omits_content(self):
        summary = create_article(title="Well", content="x").as_summary()

        self.assertNotIn("content", summary)
        self.assertEqual(summary["slug"], "well")
