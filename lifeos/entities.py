"""Entity extraction for classified intents"""

import logging
import re
from datetime import datetime, timedelta
from typing import Dict, Optional

from . import config

logger = logging.getLogger(__name__)

# ── Time expressions (first match wins) ──────────────────────────────────────
_TIME_PATTERNS = (
    re.compile(r'\b(at|in)\s+(\d+)\s*(minutes?|hours?|days?|seconds?)\b', re.I),
    re.compile(r'\b(at)\s+(\d{1,2}):?(\d{2})?\s*(am|pm)?\b', re.I),
    re.compile(r'\b(tomorrow|today|tonight|morning|afternoon|evening)\b', re.I),
)

# ── Arithmetic: number operator number ───────────────────────────────────────
_MATH_RE = re.compile(r'(\d+(?:\.\d+)?)\s*([+\-*/])\s*(\d+(?:\.\d+)?)')

_CLOCK_RE = re.compile(r'\bat\s+(\d{1,2}):?(\d{2})?\s*(am|pm)?\b', re.I)
_DIGITS_RE = re.compile(r'\d+')

_UNIT_SECONDS = (
    ('second', 1, 300),      # default when no number: 5 minutes
    ('minute', 60, 300),
    ('hour', 3600, 3600),
    ('day', 86400, 86400),
)


def content_after(text: str, keyword: str) -> Optional[str]:
    """Trimmed text after the first case-insensitive ``keyword``, or None."""
    index = text.lower().find(keyword.lower())
    if index == -1:
        return None
    content = text[index + len(keyword):].strip()
    return content or None


def find_time_expression(text: str) -> Optional[str]:
    for pattern in _TIME_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group()
    return None


def resolve_trigger_time(expression: Optional[str], now: datetime) -> datetime:
    """
    Turn a ``time`` entity into the moment a reminder should fire.

    Relative offsets ("in 10 minutes") are added to ``now``; a clock time
    ("at 5:30 pm") resolves to its next occurrence; "tomorrow" is 24 hours
    ahead. Everything else falls back to one hour from now.
    """
    default = now + timedelta(seconds=config.DEFAULT_REMINDER_DELAY_SECONDS)
    if not expression:
        return default

    lower = expression.lower()
    digits = _DIGITS_RE.search(lower)

    for unit, seconds, fallback in _UNIT_SECONDS:
        if re.search(rf'\b{unit}s?\b', lower):
            if digits:
                return now + timedelta(seconds=int(digits.group()) * seconds)
            return now + timedelta(seconds=fallback)

    clock = _CLOCK_RE.search(lower)
    if clock:
        hour = int(clock.group(1))
        minute = int(clock.group(2) or 0)
        meridiem = clock.group(3)
        if meridiem == 'pm' and hour < 12:
            hour += 12
        elif meridiem == 'am' and hour == 12:
            hour = 0
        if hour > 23 or minute > 59:
            return default
        target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
        if target <= now:
            target += timedelta(days=1)
        return target

    if 'tomorrow' in lower:
        return now + timedelta(days=1)

    return default


class EntityExtractor:
    """
    Pulls structured fields out of an utterance for a given intent.

    Extraction never fails: a field that cannot be found is simply left out of
    the returned mapping.
    """

    def extract(self, text: str, intent: str) -> Dict[str, str]:
        entities: Dict[str, str] = {}

        if intent == 'reminder_set':
            time_expr = find_time_expression(text)
            if time_expr:
                entities['time'] = time_expr
            self._put_content(entities, text, 'remind me to', 'content')
        elif intent == 'note_create':
            self._put_content(entities, text, 'note that', 'content')
            self._put_content(entities, text, 'take note', 'content')
        elif intent == 'calculate':
            m = _MATH_RE.search(text)
            if m:
                entities['expression'] = m.group()
                entities['operand1'] = m.group(1)
                entities['operator'] = m.group(2)
                entities['operand2'] = m.group(3)
        elif intent == 'translate':
            self._put_content(entities, text, 'translate', 'text')

        if entities:
            logger.debug(f"Entities for {intent}: {entities}")
        return entities

    @staticmethod
    def _put_content(entities: Dict[str, str], text: str, keyword: str, key: str):
        content = content_after(text, keyword)
        if content:
            entities[key] = content
