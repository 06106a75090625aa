"""LifeOS agent: one conversational session"""

import logging
import random
import threading
from datetime import datetime
from typing import Callable, Dict, List, NamedTuple, Optional

from . import config
from . import content
from .conversation import ConversationHistory
from .intents import PERSISTED_INTENTS, IntentClassifier, IntentResult
from .language import detect
from .memory import ConversationMemory
from .responses import ResponseEngine
from .storage import InMemoryStore, Note, PersistenceGateway, Reminder

logger = logging.getLogger(__name__)

HYBRID = "hybrid"
TEMPLATES = "templates"
CONVERSATIONAL = "conversational"
MODES = (HYBRID, TEMPLATES, CONVERSATIONAL)

SOURCE_TEMPLATE = "template"
SOURCE_CONVERSATIONAL = "conversational"


class Utterance(NamedTuple):
    text: str
    language: str
    timestamp: datetime


class LifeOSAgent:
    """
    Owns the state of one session and runs each turn through it.

    Per turn:
      1. Blank input is ignored
      2. Intent classification
      3. Memory update, so this turn's reply already sees new facts
      4. Routing: store-backed intents to templates, the rest to the
         conversational cascade (``mode`` can force either regime)
      5. History append

    Turns are serialized with a lock; two agents share nothing mutable.
    """

    def __init__(self, store: PersistenceGateway = None, rng: random.Random = None,
                 clock: Callable[[], datetime] = None, mode: str = None):
        mode = mode or config.DEFAULT_MODE
        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}; expected one of {', '.join(MODES)}")

        logger.info(f"Initializing LifeOS agent ({mode} mode)...")

        self.mode = mode
        self.clock = clock or datetime.now
        self.store = store if store is not None else InMemoryStore()
        self.memory = ConversationMemory()
        self.history = ConversationHistory(max_turns=config.MAX_CONVERSATION_HISTORY)
        self.classifier = IntentClassifier()
        self.engine = ResponseEngine(
            memory=self.memory, store=self.store,
            rng=rng or random.Random(), clock=self.clock,
        )
        self._lock = threading.Lock()

        self.last_intent: Optional[IntentResult] = None
        self.last_source = ''
        self.last_utterance: Optional[Utterance] = None

        logger.info("LifeOS agent initialized")

    def _route(self, result: IntentResult) -> str:
        if self.mode == TEMPLATES:
            return SOURCE_TEMPLATE
        if self.mode == CONVERSATIONAL:
            return SOURCE_CONVERSATIONAL
        return SOURCE_TEMPLATE if result.intent in PERSISTED_INTENTS else SOURCE_CONVERSATIONAL

    def ask(self, text: str) -> str:
        """Answer one user utterance; never raises"""
        if not text or not text.strip():
            return ""

        with self._lock:
            try:
                self.last_utterance = Utterance(text, detect(text), self.clock())
                result = self.classifier.classify(text)
                self.memory.update(text)

                source = self._route(result)
                if source == SOURCE_TEMPLATE:
                    response = self.engine.respond(result)
                else:
                    response = self.engine.generate(text, self.history.turns())

                self.history.add(text, response)
                self.last_intent = result
                self.last_source = source
                logger.debug(f"{result!r} answered by {source} regime")
                return response

            except Exception:
                logger.exception(f"Unexpected failure answering {text!r}")
                return content.MESSAGES[detect(text)]["error"]

    def get_greeting(self) -> str:
        return content.WELCOME.format(greeting=self.engine.personal_greeting())

    def clear_memory(self):
        """Forget learned facts and the conversation so far"""
        with self._lock:
            self.memory.clear()
            self.history.clear()
            self.last_intent = None
            self.last_source = ''
            self.last_utterance = None

    def reminders(self, limit: int = None) -> List[Reminder]:
        return self.store.list_reminders()[:limit or config.MAX_LISTED_ITEMS]

    def notes(self, limit: int = None) -> List[Note]:
        return self.store.list_notes()[:limit or config.MAX_LISTED_ITEMS]

    def get_summary(self) -> Dict:
        return {
            "mode": self.mode,
            "facts": self.memory.get_facts(),
            "conversation": self.history.get_summary(),
            "last_intent": self.last_intent.intent if self.last_intent else None,
            "last_source": self.last_source,
        }
