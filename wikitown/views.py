"""Project-level views."""
from __future__ import annotations

from django.core.exceptions import SuspiciousFileOperation
from django.http import Http404, HttpResponse

from wikitown.apps.core.media import MEDIA_CACHE_CONTROL, fetch_media


def serve_media(request, path: str):
    """Serve a media blob from default storage with its extension-derived type."""
    if not path:
        raise Http404("Media not found.")

    try:
        blob = fetch_media(path)
    except (ValueError, SuspiciousFileOperation) as exc:
        raise Http404("Invalid media path.") from exc

    if blob is None:
        raise Http404("Media not found.")

    response = HttpResponse(blob.content, content_type=blob.content_type)
    response["Content-Length"] = len(blob.content)
    response["Cache-Control"] = MEDIA_CACHE_CONTROL
    return response
