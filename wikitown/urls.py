from django.conf import settings
from django.contrib import admin
from django.urls import path, re_path

from wikitown.apps.core.views import healthz
from wikitown.apps.wiki import views as wiki_views
from wikitown.views import serve_media

urlpatterns = [
    #
    # Health check
    #
    path("healthz", healthz, name="healthz"),  # Health check for the hosting platform
    #
    # Django admin
    #
    path("admin/", admin.site.urls),
    #
    # Display pages
    #
    path("", wiki_views.WikiHomeView.as_view(), name="home"),  # Front page
    path("search/", wiki_views.WikiSearchView.as_view(), name="wiki-search"),  # Search results
    path(
        "wiki/<str:slug>",
        wiki_views.ArticleDetailView.as_view(),
        name="wiki-article-detail",
    ),  # Article page; rendered [[links]] point here
    #
    # Page storage API
    #
    path("api/pages", wiki_views.ArticleListApiView.as_view(), name="api-article-list"),
    path(
        "api/pages/<str:slug>",
        wiki_views.ArticleApiView.as_view(),
        name="api-article",
    ),  # GET: fetch article; PUT: create or replace (editor key required)
    path(
        "api/categories",
        wiki_views.CategoryListApiView.as_view(),
        name="api-category-list",
    ),
]

media_url = settings.MEDIA_URL.lstrip("/")
if media_url:
    urlpatterns += [
        re_path(rf"^{media_url}(?P<path>.*)$", serve_media, name="media"),  # Serve media blobs
    ]
