"""Tests for the serve_media view that serves stored media blobs."""

import shutil
import tempfile
from pathlib import Path

from django.test import TestCase, override_settings, tag

from wikitown.apps.core.test_utils import SuppressRequestLogsMixin


@tag("views")
@override_settings(MEDIA_URL="/media/")
class ServeMediaViewTests(SuppressRequestLogsMixin, TestCase):
    """Tests for the serve_media view."""

    def setUp(self):
        """Create a temporary directory with test files."""
        self.temp_dir = tempfile.mkdtemp()
        self.media_root = Path(self.temp_dir)

        (self.media_root / "ruins.jpg").write_bytes(b"\xff\xd8\xff\xe0")  # JPEG magic bytes
        (self.media_root / "well.PNG").write_bytes(b"\x89PNG")
        (self.media_root / "wind.mp3").write_bytes(b"ID3")
        (self.media_root / "notes.xyz").write_bytes(b"???")
        (self.media_root / "uploads").mkdir()

    def tearDown(self):
        """Clean up temporary files."""
        shutil.rmtree(self.temp_dir)

    def get(self, path):
        with override_settings(MEDIA_ROOT=self.media_root):
            return self.client.get(path)

    def test_serves_file_with_correct_content_type(self):
        response = self.get("/media/ruins.jpg")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "image/jpeg")
        self.assertEqual(response.content, b"\xff\xd8\xff\xe0")

    def test_extension_lookup_is_case_insensitive(self):
        response = self.get("/media/well.PNG")

        self.assertEqual(response["Content-Type"], "image/png")

    def test_serves_audio(self):
        response = self.get("/media/wind.mp3")

        self.assertEqual(response["Content-Type"], "audio/mpeg")

    def test_unknown_extension_is_octet_stream(self):
        response = self.get("/media/notes.xyz")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "application/octet-stream")

    def test_serves_file_with_cache_control_header(self):
        """Media files include immutable Cache-Control header for 1 year."""
        response = self.get("/media/ruins.jpg")

        self.assertEqual(response["Cache-Control"], "public, max-age=31536000, immutable")

    def test_serves_file_with_content_length(self):
        response = self.get("/media/ruins.jpg")

        self.assertEqual(response["Content-Length"], "4")

    def test_missing_file_returns_404(self):
        response = self.get("/media/nonexistent.jpg")

        self.assertEqual(response.status_code, 404)

    def test_directory_traversal_blocked(self):
        response = self.get("/media/../../../etc/passwd")

        self.assertEqual(response.status_code, 404)

    def test_directory_traversal_encoded_blocked(self):
        # %2e = '.', %2f = '/'
        response = self.get("/media/%2e%2e/%2e%2e/etc/passwd")

        self.assertEqual(response.status_code, 404)

    def test_directory_returns_404(self):
        response = self.get("/media/uploads/")

        self.assertEqual(response.status_code, 404)

    def test_empty_path_returns_404(self):
        response = self.get("/media/")

        self.assertEqual(response.status_code, 404)
