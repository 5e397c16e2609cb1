"""Tests for extension classification."""

from pathlib import Path

import pytest

from samples import NAUGHTY_STRINGS
from stores.extensions import KnownExtension


class TestClassification:
    """Classification of paths against the allow-list."""

    def test_png_is_known(self):
        assert KnownExtension.from_path("a.png") is KnownExtension.PNG

    @pytest.mark.parametrize("path", ["a.PNG", "a.pnG", "a.Png", "A.PnG"])
    def test_case_is_ignored(self, path):
        assert KnownExtension.from_path(path) is KnownExtension.PNG

    def test_uppercase_and_lowercase_match_each_other(self):
        assert KnownExtension.from_path("a.PNG") == KnownExtension.from_path("a.png")

    @pytest.mark.parametrize("path", ["a", "a.pdf", "", "test.pdf", "blaargh!", "file/test/bla.jpg"])
    def test_unknown_extensions_are_rejected(self, path):
        assert KnownExtension.from_path(path) is None

    def test_nested_paths(self):
        assert KnownExtension.from_path("swords/tall.png") is KnownExtension.PNG
        assert KnownExtension.from_path(Path("deep") / "dir.png" / "file") is None

    def test_only_final_extension_counts(self):
        assert KnownExtension.from_path("archive.png.zip") is None
        assert KnownExtension.from_path("archive.zip.png") is KnownExtension.PNG

    def test_hidden_file_name_is_not_an_extension(self):
        assert KnownExtension.from_path(".png") is None

    def test_accepts_path_objects(self, tmp_path):
        assert KnownExtension.from_path(tmp_path / "image.PNG") is KnownExtension.PNG

    @pytest.mark.parametrize("string", NAUGHTY_STRINGS)
    def test_naughty_strings_are_not_known_paths(self, string):
        assert KnownExtension.from_path(string) is None, (
            f"This string managed to pose as a known file path: {string!r}"
        )

    @pytest.mark.parametrize("string", NAUGHTY_STRINGS)
    def test_naughty_strings_with_png_suffix_never_crash(self, string):
        result = KnownExtension.from_path(f"{string}.png")
        assert result in (None, KnownExtension.PNG)


class TestTextConversion:
    """to/from text pair of KnownExtension."""

    def test_as_str(self):
        assert KnownExtension.PNG.as_str() == "png"

    def test_from_str_round_trip(self):
        for extension in KnownExtension:
            assert KnownExtension.from_str(extension.as_str()) is extension

    def test_from_str_ignores_case(self):
        assert KnownExtension.from_str("PNG") is KnownExtension.PNG

    @pytest.mark.parametrize("text", ["", ".png", "jpg", "png "])
    def test_from_str_rejects_unknown(self, text):
        assert KnownExtension.from_str(text) is None
