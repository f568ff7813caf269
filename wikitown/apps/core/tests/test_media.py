"""Tests for media type lookup."""

from django.test import SimpleTestCase, tag

from wikitown.apps.core.media import DEFAULT_CONTENT_TYPE, content_type_for


@tag("unit")
class ContentTypeForTests(SimpleTestCase):
    def test_known_types(self):
        cases = {
            "a.jpg": "image/jpeg",
            "a.jpeg": "image/jpeg",
            "a.png": "image/png",
            "a.gif": "image/gif",
            "a.webp": "image/webp",
            "a.svg": "image/svg+xml",
            "a.mp3": "audio/mpeg",
            "a.wav": "audio/wav",
            "a.ogg": "audio/ogg",
            "a.m4a": "audio/mp4",
            "a.mp4": "video/mp4",
            "a.pdf": "application/pdf",
        }
        for filename, expected in cases.items():
            with self.subTest(filename=filename):
                self.assertEqual(content_type_for(filename), expected)

    def test_uppercase_extension(self):
        self.assertEqual(content_type_for("A.JPG"), "image/jpeg")

    def test_unknown_extension(self):
        self.assertEqual(content_type_for("a.xyz"), DEFAULT_CONTENT_TYPE)

    def test_no_extension(self):
        self.assertEqual(content_type_for("README"), "application/octet-stream")

    def test_only_last_extension_counts(self):
        self.assertEqual(content_type_for("archive.png.txt"), "text/plain")
