"""Tests for English/Farsi language detection."""

from lifeos.language import ENGLISH, FARSI, LanguageDetector, detect, farsi_ratio


class TestDetect:

    def test_english_text(self):
        assert detect("hello there") == ENGLISH

    def test_farsi_text(self):
        assert detect("سلام") == FARSI

    def test_empty_text_is_english(self):
        assert detect("") == ENGLISH
        assert detect("", strict=True) == ENGLISH

    def test_lenient_mode_flags_a_single_farsi_character(self):
        assert detect("hello there my friend س") == FARSI

    def test_strict_mode_needs_density(self):
        assert detect("hello there my friend س", strict=True) == ENGLISH
        assert detect("ساعت چنده؟", strict=True) == FARSI

    def test_detector_object(self):
        assert LanguageDetector(strict=True).detect("hello there سل") == ENGLISH
        assert LanguageDetector().detect("hello there سل") == FARSI


class TestFarsiRatio:

    def test_ratio_bounds(self):
        assert farsi_ratio("") == 0.0
        assert farsi_ratio("abc") == 0.0
        assert farsi_ratio("سلام") == 1.0

    def test_mixed_ratio(self):
        assert farsi_ratio("ab سل") == 0.4
