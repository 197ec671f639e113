"""Tests for discordrest/cdn/formats.py"""

import sys
import os
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from discordrest.cdn.formats import (
    ALLOWED_SIZES,
    ALLOWED_STICKER_EXTENSIONS,
    CDNRangeError,
    ImageFormat,
    ImageURLOptions,
    is_animated_hash,
    validate_extension,
    validate_size,
)


class TestValidateExtension(unittest.TestCase):
    """Test validate_extension function."""

    def test_allowed(self):
        for ext in ["webp", "png", "jpg", "jpeg", "gif"]:
            self.assertEqual(validate_extension(ext), ext)

    def test_case_insensitive(self):
        """Test extensions are lower-cased."""
        self.assertEqual(validate_extension("WebP"), "webp")

    def test_enum_member(self):
        self.assertEqual(validate_extension(ImageFormat.GIF), "gif")

    def test_rejected(self):
        """Test unknown extensions raise."""
        for ext in ["tif", "bmp", "json", ""]:
            with self.assertRaises(CDNRangeError, msg=ext):
                validate_extension(ext)

    def test_sticker_allow_list(self):
        """Test lottie is only allowed for stickers."""
        self.assertEqual(validate_extension("json", ALLOWED_STICKER_EXTENSIONS), "json")
        with self.assertRaises(CDNRangeError):
            validate_extension("jpg", ALLOWED_STICKER_EXTENSIONS)


class TestValidateSize(unittest.TestCase):
    """Test validate_size function."""

    def test_none_passthrough(self):
        self.assertIsNone(validate_size(None))

    def test_allowed(self):
        """Test every power of two from 16 to 4096."""
        for size in ALLOWED_SIZES:
            self.assertEqual(validate_size(size), size)

    def test_rejected(self):
        """Test sizes outside the set are never clamped."""
        for size in [0, 5, 8, 100, 8192, -16]:
            with self.assertRaises(CDNRangeError, msg=str(size)):
                validate_size(size)

    def test_bool_rejected(self):
        with self.assertRaises(CDNRangeError):
            validate_size(True)

    def test_float_rejected(self):
        """Test that a float equal to an allowed size still raises."""
        for size in [512.0, 16.0]:
            with self.assertRaises(CDNRangeError, msg=str(size)):
                validate_size(size)

    def test_string_rejected(self):
        with self.assertRaises(CDNRangeError):
            validate_size("512")

    def test_error_details(self):
        """Test the error carries the value and allowed set."""
        with self.assertRaises(CDNRangeError) as ctx:
            validate_size(5)
        self.assertEqual(ctx.exception.kind, "size")
        self.assertEqual(ctx.exception.value, 5)
        self.assertEqual(ctx.exception.allowed, ALLOWED_SIZES)
        self.assertIn("Invalid size provided: 5", str(ctx.exception))


class TestAnimatedHash(unittest.TestCase):
    """Test is_animated_hash function."""

    def test_animated(self):
        self.assertTrue(is_animated_hash("a_bcdef"))

    def test_static(self):
        self.assertFalse(is_animated_hash("abcdef"))
        self.assertFalse(is_animated_hash("A_bcdef"))


class TestImageURLOptions(unittest.TestCase):
    """Test ImageURLOptions defaults."""

    def test_defaults(self):
        options = ImageURLOptions()
        self.assertIsNone(options.extension)
        self.assertIsNone(options.size)
        self.assertFalse(options.force_static)
        self.assertIsNone(options.animated)

    def test_frozen(self):
        options = ImageURLOptions()
        with self.assertRaises(AttributeError):
            options.size = 16


if __name__ == "__main__":
    unittest.main()
