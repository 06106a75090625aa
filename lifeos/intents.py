"""Rule-based intent classification for English and Farsi"""

import logging
import re
from typing import Dict, NamedTuple, Tuple

from . import config
from .entities import EntityExtractor
from .language import ENGLISH, detect
from .rules import first_match

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  INTENT NAMES
# ═══════════════════════════════════════════════════════════════════════════════

UNKNOWN = "unknown"
GREETING = "greeting"
GOODBYE = "goodbye"
TIME = "time"
DATE = "date"
WEATHER = "weather"
REMINDER_SET = "reminder_set"
REMINDER_GET = "reminder_get"
NOTE_CREATE = "note_create"
NOTE_GET = "note_get"
CALCULATE = "calculate"
TRANSLATE = "translate"
SEARCH = "search"
HELP = "help"
THANKS = "thanks"

# Intents whose replies read or write the reminder/note store
PERSISTED_INTENTS = frozenset({REMINDER_SET, REMINDER_GET, NOTE_CREATE, NOTE_GET})


class IntentRule(NamedTuple):
    intent: str
    patterns: Tuple["re.Pattern", ...]

    def matches(self, text: str) -> bool:
        return any(p.search(text) for p in self.patterns)


def _rule(intent: str, *patterns: str, flags: int = 0) -> IntentRule:
    return IntentRule(intent, tuple(re.compile(p, flags) for p in patterns))


# ═══════════════════════════════════════════════════════════════════════════════
# § 2  PATTERN TABLES (declaration order is precedence)
# ═══════════════════════════════════════════════════════════════════════════════

ENGLISH_RULES: Tuple[IntentRule, ...] = (
    _rule(GREETING,
          r'\b(hello|hi|hey|good morning|good afternoon|good evening|howdy|greetings)\b',
          flags=re.I),
    _rule(GOODBYE,
          r'\b(bye|goodbye|see you|farewell|take care|later|good night)\b',
          flags=re.I),
    _rule(TIME,
          r"\b(what time|current time|time is it|what's the time|tell me the time)\b",
          r'\b(time\?)\b',
          flags=re.I),
    _rule(DATE,
          r"\b(what date|current date|date today|what's the date|what day is it|what day)\b",
          r'\b(date\?)\b',
          flags=re.I),
    _rule(WEATHER,
          r'\b(weather|temperature|forecast|is it raining|will it rain|sunny|cloudy)\b',
          r"\b(what's the weather|how's the weather)\b",
          flags=re.I),
    _rule(REMINDER_SET,
          r"\b(remind me|set reminder|create reminder|add reminder|don't let me forget)\b",
          r'\b(remind me to|remind me at|remind me in)\b',
          flags=re.I),
    _rule(REMINDER_GET,
          r'\b(what are my reminders|show reminders|list reminders|my reminders)\b',
          r'\b(any reminders|do i have reminders)\b',
          flags=re.I),
    _rule(NOTE_CREATE,
          r'\b(take note|write note|create note|save note|note that|remember that)\b',
          r'\b(note down|jot down)\b',
          flags=re.I),
    _rule(NOTE_GET,
          r'\b(what are my notes|show notes|list notes|my notes|read notes)\b',
          r'\b(any notes|do i have notes)\b',
          flags=re.I),
    IntentRule(CALCULATE, (
        re.compile(r"\b(calculate|compute|what is|what's|how much is|sum of|product of)\b", re.I),
        re.compile(r'\b(\d+\s*[+\-*/]\s*\d+)\b'),
        re.compile(r'\b(plus|minus|times|divided by|multiplied by)\b', re.I),
    )),
    _rule(TRANSLATE,
          r'\b(translate|how do you say|what is.*in|say.*in)\b',
          r'\b(translate to|translate from)\b',
          flags=re.I),
    _rule(SEARCH,
          r'\b(search for|look up|find|google|what is|who is|where is|when is|why is|how to)\b',
          r'\b(tell me about|information about)\b',
          flags=re.I),
    _rule(HELP,
          r'\b(help|what can you do|what do you do|how do you work|commands)\b',
          r'\b(assist me|i need help|can you help)\b',
          flags=re.I),
    _rule(THANKS,
          r'\b(thanks|thank you|appreciate it|grateful|cheers)\b',
          flags=re.I),
)

FARSI_RULES: Tuple[IntentRule, ...] = (
    _rule(GREETING, r'(سلام|درود|صبح بخیر|عصر بخیر|شب بخیر|خوش آمدی|سلام علیکم)'),
    _rule(GOODBYE, r'(خداحافظ|بدرود|خوش بگذره|موفق باشی|شب بخیر|به سلامت)'),
    _rule(TIME, r'(ساعت چنده|ساعت چند است|زمان چنده|چه ساعتیه|ساعت رو بگو)'),
    _rule(DATE, r'(امروز چندمه|تاریخ چنده|تاریخ امروز|چندمین روز|چه روزیه)'),
    _rule(WEATHER, r'(هوا چطوره|آب و هوا|دما|باران|آفتابی|ابری|هواشناسی)'),
    _rule(REMINDER_SET, r'(یادم بنداز|یادآوری|یادآور|یادم بده|فراموش نکنم)'),
    _rule(REMINDER_GET, r'(یادآوری هام|یادآوری ها|چی یادم دادی|یادآوری های من)'),
    _rule(NOTE_CREATE, r'(یادداشت|یادداشت کن|بنویس|ثبت کن|به خاطر بسپار)'),
    _rule(NOTE_GET, r'(یادداشت هام|یادداشت ها|چی نوشتم|یادداشت های من)'),
    _rule(CALCULATE, r'(محاسبه|حساب کن|چند میشه|جمع|تفریق|ضرب|تقسیم)'),
    _rule(TRANSLATE, r'(ترجمه|ترجمه کن|چی میشه|به انگلیسی|به فارسی)'),
    _rule(SEARCH, r'(جستجو|پیدا کن|چیست|کیست|کجاست|چگونه|چطور)'),
    _rule(HELP, r'(کمک|راهنما|چیکار میتونی بکنی|چجوری کار میکنی)'),
    _rule(THANKS, r'(ممنون|متشکرم|سپاس|سپاسگزارم|ممنونم)'),
)

RULES_BY_LANGUAGE = {
    "en": ENGLISH_RULES,
    "fa": FARSI_RULES,
}


# ═══════════════════════════════════════════════════════════════════════════════
# § 3  CLASSIFIER
# ═══════════════════════════════════════════════════════════════════════════════

class IntentResult(NamedTuple):
    intent: str
    confidence: float
    language: str
    original_text: str
    entities: Dict[str, str]

    @property
    def is_unknown(self) -> bool:
        return self.intent == UNKNOWN

    def __repr__(self) -> str:
        return f"IntentResult({self.intent}, conf={self.confidence:.2f}, lang={self.language})"


class IntentClassifier:
    """
    Assigns exactly one intent to an utterance.

    The language's table is walked in declaration order and, inside each
    intent, pattern by pattern; the first pattern found anywhere in the
    normalized text decides. Nothing matching yields ``unknown`` with
    confidence 0.0. Classification never raises.
    """

    def __init__(self, extractor: EntityExtractor = None):
        self.extractor = extractor or EntityExtractor()

    def classify(self, text: str) -> IntentResult:
        try:
            normalized = text.strip().lower()
            language = detect(normalized)
            rules = RULES_BY_LANGUAGE.get(language, ENGLISH_RULES)

            rule = first_match(rules, normalized)
            if rule is not None:
                logger.debug(f"Intent matched: {rule.intent} for text: {text}")
                return IntentResult(
                    intent=rule.intent,
                    confidence=config.INTENT_CONFIDENCE,
                    language=language,
                    original_text=text,
                    entities=self.extractor.extract(normalized, rule.intent),
                )

            logger.debug(f"No intent matched for text: {text}")
            return IntentResult(UNKNOWN, 0.0, language, text, {})

        except Exception as e:
            logger.error(f"Error classifying intent: {e}")
            return IntentResult(UNKNOWN, 0.0, ENGLISH, text, {})
