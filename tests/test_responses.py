"""Tests for the response engine: conversational cascade and templates."""

import re
from datetime import timedelta

import pytest

from lifeos import content
from lifeos.intents import IntentClassifier, IntentResult
from lifeos.memory import ConversationMemory
from lifeos.responses import ENGLISH_RULES, ResponseEngine
from lifeos.storage import PersistenceFailure


class BrokenStore:
    """Store whose every call fails like an unreachable disk."""

    def _fail(self, *args, **kwargs):
        raise PersistenceFailure("disk on fire")

    insert_reminder = list_reminders = insert_note = list_notes = _fail


@pytest.fixture
def memory():
    return ConversationMemory()


@pytest.fixture
def engine(memory, store, rng, clock):
    return ResponseEngine(memory=memory, store=store, rng=rng, clock=clock)


class TestEnglishCascade:

    def test_greeting(self, engine):
        assert engine.generate("hello") == "Hello! How can I help you today?"

    def test_personal_greeting(self, engine, memory):
        memory.update("My name is Sam")
        assert engine.generate("hey there") == "Hello Sam! How can I help you today?"

    def test_time_uses_twelve_hour_clock(self, engine):
        assert engine.generate("what time is it?") == "It's 03:04 PM."

    def test_date(self, engine):
        assert engine.generate("what's the date") == "Today is Monday, January 05, 2026."

    def test_year(self, engine):
        assert engine.generate("what year is it") == "The current year is 2026."

    def test_symbolic_math(self, engine):
        assert engine.generate("12 * 4") == "12 × 4 = 48"

    def test_worded_math(self, engine):
        assert "8" in engine.generate("calculate 5 plus 3")
        assert engine.generate("what is 10 divided by 4") == "10 ÷ 4 = 2.5"

    def test_square_root(self, engine):
        assert engine.generate("square root of 81") == "√81 = 9"

    def test_math_errors_become_messages(self, engine):
        assert engine.generate("12 / 0") == content.MATH_DIVIDE_BY_ZERO
        assert engine.generate("calculate square root") == content.MATH_NEED_NUMBER
        assert engine.generate("calculate 5") == content.MATH_NEED_TWO_NUMBERS

    def test_name_recall(self, engine, memory):
        assert engine.generate("what's my name") == content.NAME_UNKNOWN
        memory.update("My name is Sam")
        assert "Sam" in engine.generate("what's my name")

    def test_fact_recall(self, engine, memory):
        assert engine.generate("what do you know about me") == content.NOTHING_KNOWN
        memory.update("I live in Tehran")
        assert engine.generate("what do you know about me") == "Here's what I know:\n• You're from Tehran"

    def test_identity(self, engine):
        assert engine.generate("who are you") == content.IDENTITY

    def test_joke(self, engine):
        assert engine.generate("tell me a joke") in content.JOKES

    def test_knowledge_lookup(self, engine):
        assert engine.generate("what is python?") == content.KNOWLEDGE_BASE["python"]

    def test_knowledge_miss_mentions_topic(self, engine):
        assert "'quasars'" in engine.generate("explain quasars")

    def test_who_is(self, engine):
        assert engine.generate("who is einstein") == content.PEOPLE["einstein"]

    def test_how_to(self, engine):
        assert engine.generate("how do I sleep better").startswith("Better sleep tips:")

    def test_why(self, engine):
        assert "Rayleigh" in engine.generate("why is the sky blue")

    def test_list(self, engine):
        assert engine.generate("list the planets").startswith("The 8 planets:")

    def test_repeat_uses_history(self, engine):
        history = [("tell me a joke", "A joke was told.")]
        assert engine.generate("repeat that", history) == "A joke was told."
        assert engine.generate("repeat that") == content.NOTHING_SAID_YET

    def test_count(self, engine):
        assert engine.generate("count to 5") == "1, 2, 3, 4, 5"
        assert engine.generate("count to 50").endswith(", 20")

    def test_coin_and_dice(self, engine):
        assert engine.generate("flip a coin") in ("🪙 Heads!", "🪙 Tails!")
        assert re.fullmatch(r"🎲 You rolled a [1-6]!", engine.generate("roll a dice"))

    def test_random_number(self, engine):
        m = re.fullmatch(r"Your random number is: (\d+) 🎲", engine.generate("give me a random number"))
        assert m and 1 <= int(m.group(1)) <= 100

    def test_default_statement(self, engine):
        reply = engine.generate("blah blah")
        assert reply in [t.format(greeting="") for t in content.DEFAULT_STATEMENT]

    def test_default_question_uses_name(self, engine, memory):
        memory.update("call me Sam")
        reply = engine.generate("can penguins fly")
        assert reply in [t.format(greeting="Sam, ") for t in content.DEFAULT_QUESTION]

    def test_same_seed_same_reply(self, memory, store, clock):
        import random
        a = ResponseEngine(memory, store, random.Random(5), clock)
        b = ResponseEngine(memory, store, random.Random(5), clock)
        assert [a.generate("tell me a joke") for _ in range(5)] == \
               [b.generate("tell me a joke") for _ in range(5)]

    def test_rule_names_are_unique(self):
        names = [rule.name for rule in ENGLISH_RULES]
        assert len(names) == len(set(names))


class TestFarsiCascade:

    def test_greeting(self, engine):
        assert engine.generate("سلام") in content.FA_GREETINGS

    def test_time_uses_twenty_four_hour_clock(self, engine):
        assert engine.generate("ساعت چنده؟") == "ساعت 15:04 است."

    def test_joke(self, engine):
        assert engine.generate("یه جوک بگو") in content.FA_JOKES

    def test_fallback_echoes_input(self, engine):
        reply = engine.generate("کتاب")
        assert reply.startswith('شما گفتید: "کتاب"')

    def test_explicit_language_overrides_detection(self, engine):
        assert engine.generate("hello", language="fa").startswith('شما گفتید: "hello"')


class TestTemplates:

    @pytest.fixture
    def classifier(self):
        return IntentClassifier()

    def test_time(self, engine, classifier):
        assert engine.respond(classifier.classify("what time is it")) == "The current time is 3:04 PM."

    def test_date(self, engine, classifier):
        assert engine.respond(classifier.classify("what's the date")) == "Today is Monday, January 5, 2026."

    def test_farsi_time_and_date(self, engine, classifier):
        assert engine.respond(classifier.classify("ساعت چنده")) == "ساعت الان 15:04 است."
        assert engine.respond(classifier.classify("تاریخ امروز")) == "امروز 2026/01/05 است."

    def test_weather(self, engine, classifier):
        assert engine.respond(classifier.classify("what's the weather")) == content.MESSAGES["en"]["weather"]

    def test_reminder_set_and_list(self, engine, classifier, store, now):
        reply = engine.respond(classifier.classify("Remind me to call mom in 10 minutes"))
        assert reply == "Reminder set: call mom in 10 minutes"

        [reminder] = store.list_reminders()
        assert reminder.trigger_at == now + timedelta(minutes=10)

        listing = engine.respond(classifier.classify("what are my reminders"))
        assert listing == "Your reminders:\n• call mom in 10 minutes"

    def test_reminder_content_falls_back_to_utterance(self, engine, classifier):
        assert engine.respond(classifier.classify("set reminder at 5 pm")) == "Reminder set: set reminder at 5 pm"

    def test_listing_is_capped(self, engine, store, now):
        for i in range(7):
            store.insert_note(f"note {i}", now + timedelta(seconds=i))
        result = IntentResult("note_get", 0.9, "en", "show notes", {})
        lines = engine.respond(result).splitlines()
        assert lines[0] == "Your notes:"
        assert lines[1:] == [f"• note {i}" for i in (6, 5, 4, 3, 2)]

    def test_empty_listings(self, engine):
        assert engine.respond(IntentResult("reminder_get", 0.9, "en", "x", {})) == "You have no reminders."
        assert engine.respond(IntentResult("note_get", 0.9, "fa", "x", {})) == "هیچ یادداشتی ندارید."

    def test_note_create(self, engine, classifier, store):
        assert engine.respond(classifier.classify("note that the door code is 42")) == \
            "Note saved: the door code is 42"
        assert store.list_notes()[0].content == "the door code is 42"

    def test_calculate(self, engine, classifier):
        assert engine.respond(classifier.classify("what is 5 plus 3")) == "The result is 8"
        assert engine.respond(classifier.classify("12 / 0")) == "I can't divide by zero."
        assert engine.respond(IntentResult("calculate", 0.9, "en", "calculate", {})) == "I couldn't calculate that."

    def test_farsi_calculate(self, engine):
        result = IntentResult("calculate", 0.9, "fa", "حساب کن 2 + 2", {})
        assert engine.respond(result) == "نتیجه: 4"

    def test_translate(self, engine, classifier):
        assert engine.respond(classifier.classify("translate water")).startswith("Translation: water (")

    def test_canned_lists(self, engine, classifier):
        assert engine.respond(classifier.classify("hello")) in content.TEMPLATES["en"]["greeting"]
        assert engine.respond(classifier.classify("خداحافظ")) in content.TEMPLATES["fa"]["goodbye"]

    def test_missing_list_falls_back_to_unknown_in_same_language(self, engine):
        result = IntentResult("search", 0.9, "fa", "جستجو", {})
        assert engine.respond(result) in content.TEMPLATES["fa"]["unknown"]

        result = IntentResult("search", 0.9, "en", "search for cats", {})
        assert engine.respond(result) in content.TEMPLATES["en"]["unknown"]


class TestFailures:

    def test_store_failure_becomes_apology(self, memory, rng, clock):
        engine = ResponseEngine(memory, BrokenStore(), rng, clock)
        result = IntentResult("reminder_get", 0.9, "en", "my reminders", {})
        assert engine.respond(result) == "Sorry, something went wrong. Please try again."

    def test_farsi_apology(self, memory, rng, clock):
        engine = ResponseEngine(memory, BrokenStore(), rng, clock)
        result = IntentResult("note_create", 0.9, "fa", "یادداشت کن", {})
        assert engine.respond(result) == "متأسفانه خطایی رخ داد. لطفاً دوباره امتحان کنید."

    def test_malformed_history_becomes_apology(self, engine):
        assert engine.generate("hello", history=[("only one",)]) == content.MESSAGES["en"]["error"]
