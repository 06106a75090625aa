"""Language detection for English / Farsi input"""

import re

from . import config

# Arabic, Arabic Supplement, Arabic Presentation Forms-A and -B
_FARSI_RE = re.compile(r'[\u0600-\u06FF\u0750-\u077F\uFB50-\uFDFF\uFE70-\uFEFF]')

ENGLISH = "en"
FARSI = "fa"


def farsi_ratio(text: str) -> float:
    """Share of characters in ``text`` that fall in the Farsi/Arabic blocks."""
    if not text:
        return 0.0
    return len(_FARSI_RE.findall(text)) / len(text)


def detect(text: str, strict: bool = False) -> str:
    """
    Classify ``text`` as ``"en"`` or ``"fa"``.

    The lenient mode (used for intent classification) reports Farsi as soon as
    a single Farsi character appears. The strict mode (used by the
    conversational engine) requires the Farsi share to exceed
    ``config.FARSI_DENSITY_THRESHOLD`` so mixed strings stay English.
    """
    if not text:
        return ENGLISH
    if strict:
        count = len(_FARSI_RE.findall(text))
        return FARSI if count > len(text) * config.FARSI_DENSITY_THRESHOLD else ENGLISH
    return FARSI if _FARSI_RE.search(text) else ENGLISH


class LanguageDetector:
    """Thin object wrapper so the detector can be injected and swapped in tests"""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def detect(self, text: str) -> str:
        return detect(text, strict=self.strict)
