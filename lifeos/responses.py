"""Response generation: conversational rule cascade and intent templates"""

import logging
import random
import re
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from . import config
from . import content
from .calculator import CalculationError, DivisionByZero, ParseError, compute
from .conversation import ConversationTurn
from .entities import resolve_trigger_time
from .intents import (
    CALCULATE, DATE, NOTE_CREATE, NOTE_GET, REMINDER_GET, REMINDER_SET,
    TIME, TRANSLATE, UNKNOWN, WEATHER, IntentResult,
)
from .language import ENGLISH, FARSI, detect
from .memory import USER_NAME, ConversationMemory
from .rules import Rule, Turn, contains, equals, first_match, full_match, starts_with
from .storage import InMemoryStore, PersistenceGateway

logger = logging.getLogger(__name__)

# ── Conversational patterns ──────────────────────────────────────────────────
_GREETING_RE = re.compile(r"^(hi|hello|hey|howdy|greetings|yo|sup|what's up|whats up)\b.*", re.S)
_FINE_RE = re.compile(
    r".*(i'm fine|i am fine|i'm good|i am good|i'm great|i'm ok|i'm okay|doing well|doing good|not bad).*",
    re.S,
)
_MATH_EXPR_RE = re.compile(r".*\d+\s*[+\-*/×÷^%]\s*\d+.*", re.S)
_SQRT_RE = re.compile(r".*square root.*\d+.*", re.S)
_PERCENT_RE = re.compile(r".*\d+.*percent.*\d+.*", re.S)
_YES_RE = re.compile(r"^(yes|yeah|yep|sure|ok|okay|yup|absolutely|definitely|of course)$")
_NO_RE = re.compile(r"^(no|nope|nah|not really|no thanks|no thank you)$")
_DIGIT_RE = re.compile(r"\d")
_DIGITS_RE = re.compile(r"\d+")
_MATH_OP_RE = re.compile(r"[+\-*/×÷]")

_KNOWLEDGE_PREFIXES = ("what is ", "what's ", "define ", "explain ", "tell me about ")
_WHO_PREFIXES = ("who is ", "who was ", "who's ")
_QUESTION_STARTS = (
    "can", "could", "would", "should", "do", "does", "is", "are",
    "will", "was", "were", "have", "has", "did",
)

MAX_COUNT = 20
DEFAULT_COUNT = 10


def _strip_prefixes(text: str, prefixes: Iterable[str]) -> str:
    """Remove each prefix in turn when the text starts with it"""
    for prefix in prefixes:
        if text.startswith(prefix):
            text = text[len(prefix):]
    return text


def _first_topic(table, lower: str, default: str) -> str:
    """Walk a (triggers, reply) table; nested tuples mean every group must hit"""
    for triggers, reply in table:
        if triggers and isinstance(triggers[0], tuple):
            if all(any(t in lower for t in group) for group in triggers):
                return reply
        elif any(t in lower for t in triggers):
            return reply
    return default


# ═══════════════════════════════════════════════════════════════════════════════
# § 1  ENGLISH HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════

def _hello(engine, turn):
    return f"{engine.personal_greeting()} How can I help you today?"


def _good_morning(engine, turn):
    return f"{engine.personal_greeting()} Good morning! ☀️ How can I help?"


def _good_afternoon(engine, turn):
    return f"{engine.personal_greeting()} Good afternoon! How's your day going?"


def _good_evening(engine, turn):
    return f"{engine.personal_greeting()} Good evening! What can I do for you?"


def _reply(text: str) -> Callable:
    return lambda engine, turn: text


def _pick(options: Tuple[str, ...]) -> Callable:
    return lambda engine, turn: engine.pick(options)


def _time(engine, turn):
    return f"It's {engine.now():%I:%M %p}."


def _date(engine, turn):
    return f"Today is {engine.now():%A, %B %d, %Y}."


def _year(engine, turn):
    return f"The current year is {engine.now():%Y}."


def _weekday(engine, turn):
    return f"Today is {engine.now():%A}."


def _math(engine, turn):
    try:
        return compute(turn.lower).rendered
    except ParseError as e:
        return content.MATH_NEED_NUMBER if e.expected == 1 else content.MATH_NEED_TWO_NUMBERS
    except DivisionByZero:
        return content.MATH_DIVIDE_BY_ZERO
    except (CalculationError, ArithmeticError) as e:
        logger.debug(f"Math failed for {turn.lower!r}: {e}")
        return content.MATH_TROUBLE


def _name_recall(engine, turn):
    name = engine.memory.get(USER_NAME)
    return content.NAME_KNOWN.format(name=name) if name else content.NAME_UNKNOWN


def _fact_recall(engine, turn):
    return engine.memory.describe() or content.NOTHING_KNOWN


def _advice(engine, turn):
    return _first_topic(content.ADVICE, turn.lower, content.ADVICE_DEFAULT)


def _knowledge(engine, turn):
    topic = _strip_prefixes(turn.lower, _KNOWLEDGE_PREFIXES).strip()
    if topic.endswith("?"):
        topic = topic[:-1]
    topic = topic.strip()
    for key, value in content.KNOWLEDGE_BASE.items():
        if key in topic:
            return value
    return content.KNOWLEDGE_MISSING.format(topic=topic)


def _who_is(engine, turn):
    person = _strip_prefixes(turn.lower, _WHO_PREFIXES).strip()
    if person.endswith("?"):
        person = person[:-1]
    for key, value in content.PEOPLE.items():
        if key in person:
            return value
    return content.PERSON_MISSING.format(person=person)


def _how_to(engine, turn):
    return _first_topic(content.HOW_TO, turn.lower, content.HOW_TO_DEFAULT)


def _why(engine, turn):
    return _first_topic(content.WHY, turn.lower, content.WHY_DEFAULT)


def _list(engine, turn):
    return _first_topic(content.LISTS, turn.lower, content.LISTS_DEFAULT)


def _repeat(engine, turn):
    return turn.last_assistant if turn.last_assistant.strip() else content.NOTHING_SAID_YET


def _count(engine, turn):
    m = _DIGITS_RE.search(turn.lower)
    limit = min(int(m.group()) if m else DEFAULT_COUNT, MAX_COUNT)
    return ", ".join(str(i) for i in range(1, limit + 1))


def _random_number(engine, turn):
    return f"Your random number is: {engine.rng.randint(1, 100)} 🎲"


def _coin(engine, turn):
    return f"🪙 {engine.pick(('Heads!', 'Tails!'))}"


def _dice(engine, turn):
    return f"🎲 You rolled a {engine.rng.randint(1, 6)}!"


def _default(engine, turn):
    """Last resort: a name-prefixed nudge, phrased for questions or statements"""
    lower = turn.lower
    is_question = lower.endswith("?") or lower.startswith(_QUESTION_STARTS)
    name = engine.memory.get(USER_NAME)
    greeting = f"{name}, " if name else ""
    options = content.DEFAULT_QUESTION if is_question else content.DEFAULT_STATEMENT
    return engine.pick(options).format(greeting=greeting)


# ── Predicates that need more than one test ──────────────────────────────────

def _asks_time(turn):
    lower = turn.lower
    return "time" in lower and (
        "what" in lower or "tell" in lower or "current" in lower or lower.startswith("time")
    )


def _asks_date(turn):
    lower = turn.lower
    return ("date" in lower or "what day" in lower
            or ("today" in lower and "do today" not in lower and "plan" not in lower))


def _asks_what_math(turn):
    lower = turn.lower
    if "calculate" in lower:
        return True
    has_op = _MATH_OP_RE.search(lower) or any(w in lower for w in ("plus", "minus", "times", "divide"))
    return "what is" in lower and bool(_DIGIT_RE.search(lower)) and bool(has_op)


def _asks_name(turn):
    lower = turn.lower
    return "my name" in lower and ("what" in lower or "remember" in lower or "know" in lower)


def _wants_another_joke(turn):
    lower = turn.lower
    return ("another" in lower and "joke" not in turn.last_assistant
            and ("joke" in lower or "joke" in turn.last_user))


def _all(*words: str) -> Callable[[Turn], bool]:
    return lambda turn: all(w in turn.lower for w in words)


# ═══════════════════════════════════════════════════════════════════════════════
# § 2  ENGLISH CASCADE (declaration order is precedence)
# ═══════════════════════════════════════════════════════════════════════════════

ENGLISH_RULES: Tuple[Rule, ...] = (
    Rule("greeting", full_match(_GREETING_RE), _hello),
    Rule("good_morning", contains("good morning"), _good_morning),
    Rule("good_afternoon", contains("good afternoon"), _good_afternoon),
    Rule("good_evening", contains("good evening"), _good_evening),
    Rule("good_night", contains("good night"), _reply("Good night! Sweet dreams! 🌙")),
    Rule("how_are_you",
         contains("how are you", "how're you", "how do you do", "how you doing"),
         _pick(content.HOW_ARE_YOU)),
    Rule("user_is_fine", full_match(_FINE_RE), _pick(content.USER_IS_FINE)),

    Rule("time", _asks_time, _time),
    Rule("date", _asks_date, _date),
    Rule("year", _all("year", "what"), _year),
    Rule("weekday", contains("day of the week", "what day is"), _weekday),

    Rule("math_expression", full_match(_MATH_EXPR_RE), _math),
    Rule("math_question", _asks_what_math, _math),
    Rule("math_words", contains("plus", "minus", "times", "divided"), _math),
    Rule("square_root", full_match(_SQRT_RE), _math),
    Rule("percent", full_match(_PERCENT_RE), _math),

    Rule("identity", contains("your name", "who are you", "what are you"), _reply(content.IDENTITY)),
    Rule("capabilities",
         contains("what can you do", "help", "capabilities", "features"),
         _reply(content.CAPABILITIES)),
    Rule("creator", contains("who made you", "who created you", "who built you"), _reply(content.CREATOR)),

    Rule("name_recall", _asks_name, _name_recall),
    Rule("fact_recall", contains("what do you know about me", "what do you remember"), _fact_recall),

    Rule("weather", contains("weather"), _reply(content.WEATHER_OFFLINE)),
    Rule("translate_farsi", _all("translate", "farsi"), _reply(content.FARSI_PHRASES)),
    Rule("translate_english", _all("translate", "english"), _reply(content.TRANSLATE_TO_ENGLISH)),

    Rule("joke", contains("joke", "funny", "make me laugh", "humor"), _pick(content.JOKES)),
    Rule("another_joke", _wants_another_joke, _pick(content.JOKES)),
    Rule("fact", contains("fact", "tell me something", "did you know", "interesting"), _pick(content.FACTS)),
    Rule("story", contains("story", "tell me a story", "once upon"), _pick(content.STORIES)),
    Rule("motivation", contains("motivat", "inspir", "encourage", "quote"), _pick(content.MOTIVATION)),
    Rule("advice", contains("advice", "suggest", "recommend", "tip"), _advice),

    Rule("knowledge", starts_with("what is", "what's", "define", "explain", "tell me about"), _knowledge),
    Rule("who_is", starts_with("who is", "who was", "who's"), _who_is),
    Rule("how_to", starts_with("how to", "how do", "how can i", "how should"), _how_to),
    Rule("why", starts_with("why"), _why),
    Rule("comparison", contains("difference between", "vs", "versus", "compared to"), _reply(content.COMPARISON)),
    Rule("list", lambda turn: turn.lower.startswith("list") or "give me a list" in turn.lower or "top" in turn.lower,
         _list),

    Rule("thanks", contains("thank", "thanks"), _pick(content.THANKS_REPLIES)),
    Rule("compliment",
         contains("you're smart", "you are smart", "good job", "well done", "awesome", "amazing"),
         _pick(content.COMPLIMENT_REPLIES)),
    Rule("love", contains("i love you", "love you"), _reply(content.LOVE)),
    Rule("funny", contains("you're funny", "you are funny"), _reply(content.FUNNY)),
    Rule("goodbye", contains("bye", "goodbye", "see you", "gotta go", "talk later"), _pick(content.GOODBYE_REPLIES)),
    Rule("yes", full_match(_YES_RE), _pick(content.YES_REPLIES)),
    Rule("no", full_match(_NO_RE), _pick(content.NO_REPLIES)),

    Rule("sad", contains("i'm sad", "i am sad", "i feel sad", "i'm depressed", "feeling down"), _reply(content.SAD)),
    Rule("happy", contains("i'm happy", "i feel happy", "i'm excited"), _reply(content.HAPPY)),
    Rule("bored", contains("i'm bored", "i am bored", "nothing to do"), _reply(content.BORED)),
    Rule("tired", contains("i'm tired", "i am tired", "exhausted"), _reply(content.TIRED)),
    Rule("angry", contains("i'm angry", "i am angry", "frustrated"), _reply(content.ANGRY)),

    Rule("riddle", contains("play a game", "game", "riddle"), _pick(content.RIDDLES)),
    Rule("trivia", contains("trivia", "quiz"), _pick(content.TRIVIA)),
    Rule("tongue_twister", contains("tongue twister"), _pick(content.TONGUE_TWISTERS)),

    Rule("elaborate",
         lambda turn: equals("tell me more", "more", "continue", "go on")(turn) or "elaborate" in turn.lower,
         _reply(content.ELABORATE)),
    Rule("repeat", contains("repeat", "say that again", "what did you say"), _repeat),
    Rule("bare_question", equals("why", "how", "when", "where"), _reply(content.NEED_CONTEXT)),

    Rule("count", contains("count to"), _count),
    Rule("random_number", contains("random number"), _random_number),
    Rule("coin", contains("flip a coin", "coin flip", "heads or tails"), _coin),
    Rule("dice", contains("roll a dice", "roll dice", "throw dice"), _dice),
)


# ═══════════════════════════════════════════════════════════════════════════════
# § 3  FARSI CASCADE
# ═══════════════════════════════════════════════════════════════════════════════

def _fa_time(engine, turn):
    return f"ساعت {engine.now():%H:%M} است."


def _fa_date(engine, turn):
    return f"امروز {engine.now():%A, %d %B %Y} است."


def _fa_coin(engine, turn):
    return f"🪙 {engine.pick(content.FA_COIN_SIDES)}"


def _fa_dice(engine, turn):
    return f"🎲 تاس انداختی: {engine.rng.randint(1, 6)}!"


def _fa_default(engine, turn):
    return content.FA_FALLBACK.format(text=turn.text)


FARSI_RULES: Tuple[Rule, ...] = (
    Rule("greeting", contains("سلام", "درود", "هلو"), _pick(content.FA_GREETINGS)),
    Rule("how_are_you", contains("حالت چطوره", "حال شما", "چطوری", "خوبی"), _pick(content.FA_HOW_ARE_YOU)),
    Rule("time", contains("ساعت"), _fa_time),
    Rule("date", contains("تاریخ", "امروز چندم"), _fa_date),
    Rule("identity", contains("اسمت", "کی هستی", "چی هستی", "نامت"), _reply(content.FA_IDENTITY)),
    Rule("capabilities", contains("چه کارایی", "کمک", "چیکار می‌تونی"), _reply(content.FA_CAPABILITIES)),
    Rule("thanks", contains("ممنون", "مرسی", "تشکر", "دستت درد"), _pick(content.FA_THANKS)),
    Rule("goodbye", contains("خداحافظ", "بای", "می‌رم"), _pick(content.FA_GOODBYE)),
    Rule("joke", contains("جوک", "بخند", "خنده‌دار"), _pick(content.FA_JOKES)),
    Rule("fact", contains("حقیقت", "واقعیت", "می‌دونستی"), _pick(content.FA_FACTS)),
    Rule("motivation", contains("انگیز", "حرف قشنگ", "نقل قول"), _pick(content.FA_MOTIVATION)),
    Rule("weather", contains("هوا", "آب و هوا"), _reply(content.FA_WEATHER_OFFLINE)),
    Rule("story", contains("داستان", "قصه"), _reply(content.FA_STORY)),
    Rule("sad", contains("ناراحت", "غمگین"), _reply(content.FA_SAD)),
    Rule("tired", contains("خسته"), _reply(content.FA_TIRED)),
    Rule("bored", contains("حوصله", "بی‌حوصله"), _reply(content.FA_BORED)),
    Rule("coin", contains("سکه", "شیر یا خط"), _fa_coin),
    Rule("dice", contains("تاس"), _fa_dice),
)

CASCADES = {
    ENGLISH: (ENGLISH_RULES, _default),
    FARSI: (FARSI_RULES, _fa_default),
}


# ═══════════════════════════════════════════════════════════════════════════════
# § 4  ENGINE
# ═══════════════════════════════════════════════════════════════════════════════

class ResponseEngine:
    """
    Turns a user utterance into a reply.

    Two regimes share one engine:

    * :meth:`generate` runs the conversational cascade for the detected
      language. Every rule is tried in order and the first whose predicate
      holds answers; nothing matching falls through to a default reply.
    * :meth:`respond` answers a classified :class:`IntentResult` from fixed
      templates, touching the reminder/note store where the intent asks for it.

    Neither method raises: failures are logged and answered with an apology
    in the utterance's language.
    """

    def __init__(self, memory: ConversationMemory = None, store: PersistenceGateway = None,
                 rng: random.Random = None, clock: Callable[[], datetime] = None):
        self.memory = memory if memory is not None else ConversationMemory()
        self.store = store if store is not None else InMemoryStore()
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    # ── Shared helpers ───────────────────────────────────────────────────────

    def now(self) -> datetime:
        return self.clock()

    def pick(self, options):
        return self.rng.choice(options)

    def personal_greeting(self) -> str:
        name = self.memory.get(USER_NAME)
        return f"Hello {name}!" if name else "Hello!"

    @staticmethod
    def apology(language: str) -> str:
        messages = content.MESSAGES.get(language, content.MESSAGES[ENGLISH])
        return messages["error"]

    # ── Conversational regime ────────────────────────────────────────────────

    def generate(self, text: str, history: Iterable = (), language: Optional[str] = None) -> str:
        """
        Reply to ``text`` through the rule cascade.

        Args:
            text: The user's utterance.
            history: Prior turns, most recent last; either
                :class:`ConversationTurn` objects or (user, assistant) pairs.
            language: ``"en"`` or ``"fa"``; detected strictly when omitted.
        """
        lang = ENGLISH
        try:
            lang = language or detect(text, strict=True)
            turn = Turn.from_text(text, _as_turns(history))
            rules, fallback = CASCADES.get(lang, CASCADES[ENGLISH])

            rule = first_match(rules, turn)
            if rule is None:
                logger.debug(f"No {lang} rule matched: {text!r}")
                return fallback(self, turn)

            logger.debug(f"Rule {rule.name} ({lang}) answered: {text!r}")
            return rule.handler(self, turn)

        except Exception:
            logger.exception(f"Error generating response for {text!r}")
            return self.apology(lang)

    # ── Template regime ──────────────────────────────────────────────────────

    def respond(self, result: IntentResult) -> str:
        """Answer a classified intent from the per-language templates"""
        lang = ENGLISH
        try:
            lang = result.language if result.language in content.MESSAGES else ENGLISH
            messages = content.MESSAGES[lang]
            intent = result.intent

            if intent == TIME:
                return messages["time"].format(time=self._template_time(lang))
            if intent == DATE:
                return messages["date"].format(date=self._template_date(lang))
            if intent == WEATHER:
                return messages["weather"]
            if intent == REMINDER_SET:
                return self._set_reminder(result, messages)
            if intent == REMINDER_GET:
                items = self.store.list_reminders()[:config.MAX_LISTED_ITEMS]
                return self._listing(items, messages["reminder_list"], messages["reminder_none"])
            if intent == NOTE_CREATE:
                note_text = result.entities.get("content") or result.original_text
                self.store.insert_note(note_text, self.now())
                logger.info(f"Note saved: {note_text!r}")
                return messages["note_set"].format(content=note_text)
            if intent == NOTE_GET:
                items = self.store.list_notes()[:config.MAX_LISTED_ITEMS]
                return self._listing(items, messages["note_list"], messages["note_none"])
            if intent == CALCULATE:
                return self._calculate(result, messages)
            if intent == TRANSLATE:
                return messages["translation"].format(
                    text=result.entities.get("text") or result.original_text
                )
            return self._canned(intent, lang)

        except Exception:
            logger.exception(f"Error responding to intent {getattr(result, 'intent', UNKNOWN)}")
            return self.apology(lang)

    def _template_time(self, lang: str) -> str:
        now = self.now()
        if lang == FARSI:
            return f"{now:%H:%M}"
        hour = now.hour % 12 or 12
        return f"{hour}:{now.minute:02d} {'AM' if now.hour < 12 else 'PM'}"

    def _template_date(self, lang: str) -> str:
        now = self.now()
        if lang == FARSI:
            return f"{now:%Y/%m/%d}"
        return f"{now:%A, %B} {now.day}, {now.year}"

    def _set_reminder(self, result: IntentResult, messages) -> str:
        reminder_text = result.entities.get("content") or result.original_text
        now = self.now()
        trigger_at = resolve_trigger_time(result.entities.get("time"), now)
        self.store.insert_reminder(reminder_text, now, trigger_at)
        logger.info(f"Reminder set for {trigger_at.isoformat()}: {reminder_text!r}")
        return messages["reminder_set"].format(content=reminder_text)

    @staticmethod
    def _listing(items: List, template: str, empty: str) -> str:
        if not items:
            return empty
        return template.format(items="\n".join(f"• {item.content}" for item in items))

    def _calculate(self, result: IntentResult, messages) -> str:
        expression = result.entities.get("expression") or result.original_text
        try:
            return messages["calc_result"].format(result=compute(expression).result)
        except DivisionByZero:
            return messages["calc_zero"]
        except (CalculationError, ArithmeticError) as e:
            logger.debug(f"Calculation failed for {expression!r}: {e}")
            return messages["calc_failed"]

    def _canned(self, intent: str, lang: str) -> str:
        templates = content.TEMPLATES.get(lang, content.TEMPLATES[ENGLISH])
        options = templates.get(intent) or templates[UNKNOWN]
        return self.pick(options)


def _as_turns(history: Iterable) -> List[ConversationTurn]:
    turns = []
    for item in history or ():
        if isinstance(item, ConversationTurn):
            turns.append(item)
        else:
            user_text, assistant_text = item
            turns.append(ConversationTurn(user_text, assistant_text))
    return turns
