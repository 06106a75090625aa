"""Session memory of facts the user mentions about themselves"""

import logging
import re
from typing import Dict, Optional

from . import config

logger = logging.getLogger(__name__)

USER_NAME = "user_name"
LIKES = "likes"
LOCATION = "location"
JOB = "job"

_NAME_PATTERNS = (
    re.compile(r"my name is (\w+)", re.I),
    re.compile(r"i'm (\w+)", re.I),
    re.compile(r"i am (\w+)", re.I),
    re.compile(r"call me (\w+)", re.I),
)

_NAME_STOPLIST = frozenset({"a", "the", "an", "not", "very", "really", "just", "so", "too"})

_LIKE_TRIGGERS = ("i like", "i love")
_LOCATION_TRIGGERS = ("i live in", "i'm from", "i am from")
_JOB_TRIGGERS = ("my job", "i work", "my profession")

_FACT_LABELS = (
    (USER_NAME, "Your name is {}"),
    (LIKES, "You like {}"),
    (LOCATION, "You're from {}"),
    (JOB, "You work as {}"),
)


def substring_after(text: str, delimiter: str) -> str:
    """Text after the first ``delimiter``; the whole text when it is absent."""
    index = text.find(delimiter)
    if index == -1:
        return text
    return text[index + len(delimiter):]


def _clip(value: str) -> str:
    return value[:config.MAX_FACT_LENGTH].strip()


class ConversationMemory:
    """
    Small key-value store of facts learned from user utterances.

    Keys are ``user_name``, ``likes``, ``location`` and ``job``; a newer value
    always replaces the older one. The store lives as long as the session and
    is emptied by :meth:`clear`.
    """

    def __init__(self):
        self._facts: Dict[str, str] = {}

    def update(self, text: str):
        """Scan one utterance and remember whatever facts it states"""
        if not text:
            return
        lower = text.lower()

        for pattern in _NAME_PATTERNS:
            m = pattern.search(text)
            if m:
                name = m.group(1)
                if len(name) > 1 and name.lower() not in _NAME_STOPLIST:
                    self._remember(USER_NAME, name)

        if any(t in lower for t in _LIKE_TRIGGERS):
            thing = substring_after(substring_after(text, "like "), "love ")
            self._remember(LIKES, _clip(thing))

        if any(t in lower for t in _LOCATION_TRIGGERS):
            place = substring_after(substring_after(text, "in "), "from ")
            self._remember(LOCATION, _clip(place))

        if any(t in lower for t in _JOB_TRIGGERS):
            job = substring_after(substring_after(substring_after(text, "is "), "as "), "work ")
            self._remember(JOB, _clip(job))

    def _remember(self, key: str, value: str):
        if not value or not value.strip():
            return
        if self._facts.get(key) != value:
            logger.debug(f"Remembering {key} = {value!r}")
        self._facts[key] = value

    def get(self, key: str) -> Optional[str]:
        return self._facts.get(key)

    def get_facts(self) -> Dict[str, str]:
        """Snapshot copy of every remembered fact"""
        return dict(self._facts)

    def describe(self) -> Optional[str]:
        """Bullet list of what is known about the user, or None when nothing is"""
        facts = [label.format(self._facts[key]) for key, label in _FACT_LABELS if key in self._facts]
        if not facts:
            return None
        return "Here's what I know:\n" + "\n".join(f"• {fact}" for fact in facts)

    def clear(self):
        self._facts.clear()
        logger.info("Conversation memory cleared")

    def __contains__(self, key: str) -> bool:
        return key in self._facts

    def __len__(self) -> int:
        return len(self._facts)
