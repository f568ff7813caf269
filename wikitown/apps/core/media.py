"""Media type configuration and lookup.

Single source of truth for the MIME types of served media blobs. Types are
looked up by file extension only; the blob's bytes are never sniffed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from django.core.files.storage import default_storage

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    # Images
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".avif": "image/avif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    # Audio
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".oga": "audio/ogg",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".opus": "audio/opus",
    # Video
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".mov": "video/quicktime",
    # Documents
    ".pdf": "application/pdf",
    ".txt": "text/plain",
}

# Filenames are never reused for new content.
MEDIA_CACHE_CONTROL = "public, max-age=31536000, immutable"


def content_type_for(filename: str) -> str:
    """Return the MIME type for ``filename``, by extension (case-insensitive)."""
    return CONTENT_TYPES.get(PurePosixPath(filename).suffix.lower(), DEFAULT_CONTENT_TYPE)


@dataclass(frozen=True)
class MediaBlob:
    """A media file's bytes and content type."""

    filename: str
    content: bytes
    content_type: str


def fetch_media(filename: str) -> MediaBlob | None:
    """Read a media blob from default storage, or None if it doesn't exist.

    Raises:
        SuspiciousFileOperation: If ``filename`` escapes the storage root.
    """
    if not default_storage.exists(filename):
        return None
    try:
        with default_storage.open(filename, "rb") as fh:
            content = fh.read()
    except IsADirectoryError:
        return None
    return MediaBlob(filename=filename, content=content, content_type=content_type_for(filename))
