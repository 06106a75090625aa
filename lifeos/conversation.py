"""Conversation history: a bounded list of (user, assistant) turns"""

import logging
from collections import deque
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)


class ConversationTurn:
    """One exchange: what the user said and what the assistant answered"""

    __slots__ = ("user_text", "assistant_text", "timestamp")

    def __init__(self, user_text: str, assistant_text: str, timestamp: str = None):
        self.user_text = user_text
        self.assistant_text = assistant_text
        self.timestamp = timestamp or datetime.now().isoformat()

    def as_pair(self) -> Tuple[str, str]:
        return (self.user_text, self.assistant_text)

    def __eq__(self, other):
        if not isinstance(other, ConversationTurn):
            return NotImplemented
        return self.as_pair() == other.as_pair()

    def __repr__(self) -> str:
        return f"ConversationTurn({self.user_text!r}, {self.assistant_text!r})"


class ConversationHistory:
    """Keeps the most recent turns of a session, oldest evicted first"""

    def __init__(self, max_turns: int = None):
        self.max_turns = max_turns or config.MAX_CONVERSATION_HISTORY
        self._turns: deque = deque(maxlen=self.max_turns)
        self.session_start = datetime.now().isoformat()

    def add(self, user_text: str, assistant_text: str) -> ConversationTurn:
        """Append a turn, evicting the oldest one when full"""
        turn = ConversationTurn(user_text, assistant_text)
        self._turns.append(turn)
        return turn

    def turns(self) -> Tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def pairs(self) -> List[Tuple[str, str]]:
        return [turn.as_pair() for turn in self._turns]

    def last(self) -> Optional[ConversationTurn]:
        return self._turns[-1] if self._turns else None

    def get_context_string(self, n: int = 5) -> str:
        """Recent turns as a printable transcript"""
        parts = []
        for turn in list(self._turns)[-n:]:
            parts.append(f"User: {turn.user_text}")
            parts.append(f"Assistant: {turn.assistant_text}")
        return "\n".join(parts)

    def clear(self):
        """Forget every turn"""
        self._turns.clear()
        self.session_start = datetime.now().isoformat()
        logger.info("Conversation history cleared")

    def get_summary(self) -> Dict:
        return {
            "turns": len(self._turns),
            "max_turns": self.max_turns,
            "session_start": self.session_start,
        }

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(tuple(self._turns))
