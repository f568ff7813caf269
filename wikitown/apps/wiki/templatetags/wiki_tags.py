"""Wiki-specific template tags."""

from django import template

from wikitown.apps.wiki.rendering import markup_to_html

register = template.Library()


@register.filter
def render_wiki(markup):
    """Render wiki markup to HTML.

    Usage::

        {% load wiki_tags %}
        {{ article.content|render_wiki }}
    """
    if not markup:
        return ""
    return markup_to_html(markup)
