"""Wiki views: the JSON page-storage API and the read-only display pages."""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.http import Http404, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import DetailView, ListView, TemplateView

from wikitown.apps.core.api import json_api_view, parse_json_body, require_editor_key

from .forms import ArticleForm
from .models import Article
from .selectors import category_cards

logger = logging.getLogger(__name__)

RECENT_ARTICLES_LIMIT = 10


# ---------------------------------------------------------------------------
# JSON API
# ---------------------------------------------------------------------------


class ArticleListApiView(View):
    """
    GET /api/pages?q=<query>&category=<category>

    Returns article summaries ordered by title.
    """

    @json_api_view
    def get(self, request):
        articles = (
            Article.objects.search(request.GET.get("q", ""))
            .in_category(request.GET.get("category", ""))
            .order_by("title")
        )
        return JsonResponse([a.as_summary() for a in articles], safe=False)


@method_decorator(csrf_exempt, name="dispatch")
class ArticleApiView(View):
    """
    GET /api/pages/<slug>  -> full article record
    PUT /api/pages/<slug>  -> create or replace the article

    PUT expects a JSON object ``{title, content | html, summary, category}``
    and the shared editor key in the ``X-Editor-Key`` header. It replaces the
    whole article: ``summary`` or ``category`` left out of the body are saved
    as empty. Concurrent saves of one slug are last-write-wins.
    """

    @json_api_view
    def get(self, request, slug: str):
        try:
            article = Article.objects.get(slug=slug)
        except Article.DoesNotExist:
            raise Http404("Page not found") from None
        return JsonResponse(article.as_record())

    @json_api_view
    def put(self, request, slug: str):
        require_editor_key(request)
        payload = parse_json_body(request)

        try:
            article, created = _save_article(slug, payload)
        except IntegrityError:
            # Another request created the slug after our lookup; replace its row.
            logger.info("Article insert raced, retrying as update", extra={"slug": slug})
            article, created = _save_article(slug, payload)

        logger.info(
            "Article %s",
            "created" if created else "updated",
            extra={"slug": article.slug, "content_length": len(article.content)},
        )
        return JsonResponse(article.as_record(), status=201 if created else 200)


def _article_for_update(slug: str) -> Article | None:
    return Article.objects.select_for_update().filter(slug=slug).first()


def _save_article(slug: str, payload: dict) -> tuple[Article, bool]:
    """Validate ``payload`` and create or replace the article at ``slug``.

    Returns ``(article, created)``.
    """
    with transaction.atomic():
        existing = _article_for_update(slug)
        form = ArticleForm(data=payload, instance=existing, slug=slug)
        if not form.is_valid():
            raise ValidationError(form.error_messages_list())
        return form.save(), existing is None


class CategoryListApiView(View):
    """
    GET /api/categories

    Returns ``[{category, image}]``; ``image`` is a media filename or null.
    """

    @json_api_view
    def get(self, request):
        return JsonResponse(category_cards(), safe=False)


# ---------------------------------------------------------------------------
# Display pages
# ---------------------------------------------------------------------------


class WikiHomeView(TemplateView):
    """Front page: category cards and recently updated articles."""

    template_name = "wiki/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["categories"] = category_cards()
        context["recent_articles"] = Article.objects.order_by("-updated_at")[
            :RECENT_ARTICLES_LIMIT
        ]
        return context


class ArticleDetailView(DetailView):
    """Display a single article."""

    model = Article
    template_name = "wiki/article_detail.html"
    context_object_name = "article"

    def get_object(self, queryset=None):
        try:
            return Article.objects.get(slug=self.kwargs["slug"])
        except Article.DoesNotExist:
            raise Http404("Page not found") from None


class WikiSearchView(ListView):
    """Search articles, optionally within one category."""

    model = Article
    template_name = "wiki/search.html"
    context_object_name = "articles"
    paginate_by = 20

    def get_queryset(self):
        self.search_query = self.request.GET.get("q", "").strip()
        self.category = self.request.GET.get("category", "").strip()
        if not self.search_query and not self.category:
            return Article.objects.none()
        return (
            Article.objects.search(self.search_query)
            .in_category(self.category)
            .order_by("-updated_at")
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["search_query"] = self.search_query
        context["category"] = self.category
        return context
