"""Ordered first-match-wins rule tables"""

from typing import Any, Callable, Iterable, NamedTuple, Optional, Tuple

from .conversation import ConversationTurn


class Turn(NamedTuple):
    """What a conversational rule gets to look at for one user utterance"""
    text: str
    lower: str
    history: Tuple[ConversationTurn, ...] = ()

    @classmethod
    def from_text(cls, text: str, history: Iterable[ConversationTurn] = ()) -> "Turn":
        return cls(text, text.lower().strip(), tuple(history))

    @property
    def last_user(self) -> str:
        return self.history[-1].user_text if self.history else ""

    @property
    def last_assistant(self) -> str:
        return self.history[-1].assistant_text if self.history else ""


class Rule(NamedTuple):
    """A named (predicate, handler) pair; ``handler`` is called as handler(engine, turn)"""
    name: str
    predicate: Callable[[Turn], bool]
    handler: Callable[[Any, Turn], str]

    def matches(self, turn: Turn) -> bool:
        return bool(self.predicate(turn))


def first_match(rules: Iterable, subject) -> Optional[Any]:
    """
    Return the first rule whose ``matches(subject)`` is true, or None.

    Works for any rule type exposing ``matches``; table order is the only
    precedence there is.
    """
    for rule in rules:
        if rule.matches(subject):
            return rule
    return None


# ── Predicate builders ───────────────────────────────────────────────────────

def contains(*phrases: str) -> Callable[[Turn], bool]:
    return lambda turn: any(p in turn.lower for p in phrases)


def starts_with(*prefixes: str) -> Callable[[Turn], bool]:
    return lambda turn: turn.lower.startswith(prefixes)


def equals(*values: str) -> Callable[[Turn], bool]:
    return lambda turn: turn.lower in values


def full_match(pattern) -> Callable[[Turn], bool]:
    return lambda turn: pattern.fullmatch(turn.lower) is not None
