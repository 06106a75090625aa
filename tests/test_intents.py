"""Tests for rule-based intent classification."""

import pytest

from lifeos.intents import (
    CALCULATE, ENGLISH_RULES, FARSI_RULES, GREETING, IntentClassifier, NOTE_CREATE,
    REMINDER_GET, REMINDER_SET, THANKS, TIME, UNKNOWN,
)


class TestIntentClassifier:

    @pytest.fixture
    def classifier(self):
        return IntentClassifier()

    def test_greeting(self, classifier):
        result = classifier.classify("Hello")
        assert result.intent == GREETING
        assert result.confidence == 0.9
        assert result.language == "en"
        assert result.original_text == "Hello"

    def test_unknown(self, classifier):
        result = classifier.classify("blorf zzz")
        assert result.intent == UNKNOWN
        assert result.confidence == 0.0
        assert result.is_unknown

    def test_time(self, classifier):
        assert classifier.classify("what time is it?").intent == TIME

    def test_earlier_declared_intent_wins(self, classifier):
        # greeting is declared before time
        assert classifier.classify("hi, what time is it").intent == GREETING
        # calculate is declared before search
        assert classifier.classify("what is 5 plus 3").intent == CALCULATE

    def test_classification_is_reproducible(self, classifier):
        results = {classifier.classify("what is 5 plus 3").intent for _ in range(5)}
        assert results == {CALCULATE}

    def test_reminder_set_with_entities(self, classifier):
        result = classifier.classify("Remind me to call mom in 10 minutes")
        assert result.intent == REMINDER_SET
        assert result.entities["time"] == "in 10 minutes"
        assert result.entities["content"] == "call mom in 10 minutes"

    def test_reminder_listing(self, classifier):
        assert classifier.classify("what are my reminders").intent == REMINDER_GET

    def test_note_create(self, classifier):
        assert classifier.classify("Note that the door code is 42").intent == NOTE_CREATE

    def test_symbolic_math(self, classifier):
        result = classifier.classify("12 * 4")
        assert result.intent == CALCULATE
        assert result.entities["expression"] == "12 * 4"

    def test_farsi(self, classifier):
        result = classifier.classify("سلام")
        assert result.intent == GREETING
        assert result.language == "fa"
        assert classifier.classify("ساعت چنده؟").intent == TIME
        assert classifier.classify("ممنونم").intent == THANKS

    def test_farsi_greeting_declared_before_goodbye(self, classifier):
        assert classifier.classify("شب بخیر").intent == GREETING

    @pytest.mark.parametrize("text", [
        "hello", "what's the weather", "blorf", "remind me to run", "سلام", "چیزی", "",
    ])
    def test_confidence_is_zero_only_for_unknown(self, classifier, text):
        result = classifier.classify(text)
        assert result.confidence in (0.0, 0.9)
        assert (result.confidence == 0.0) == (result.intent == UNKNOWN)

    def test_never_raises(self, classifier):
        result = classifier.classify(None)
        assert result.intent == UNKNOWN
        assert result.language == "en"
        assert result.confidence == 0.0


def test_tables_cover_the_same_intents_in_the_same_order():
    assert [r.intent for r in ENGLISH_RULES] == [r.intent for r in FARSI_RULES]
