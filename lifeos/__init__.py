"""LifeOS — offline bilingual (English/Farsi) conversational assistant core"""

__version__ = "0.1.0"
__author__ = "LifeOS contributors"
__powered_by__ = "Rule-based offline engine"

from .agent import LifeOSAgent
from .calculator import ExpressionEvaluator, evaluate
from .intents import IntentClassifier, IntentResult
from .memory import ConversationMemory
from .responses import ResponseEngine
from .storage import InMemoryStore, JsonFileStore, PersistenceFailure

__all__ = [
    "LifeOSAgent",
    "ResponseEngine",
    "IntentClassifier",
    "IntentResult",
    "ConversationMemory",
    "ExpressionEvaluator",
    "evaluate",
    "InMemoryStore",
    "JsonFileStore",
    "PersistenceFailure",
]
