from django.apps import AppConfig


class WikiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wikitown.apps.wiki"
    verbose_name = "Wiki"
