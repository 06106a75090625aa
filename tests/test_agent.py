"""Tests for the LifeOS session agent."""

import threading

import pytest

from lifeos import content
from lifeos.agent import LifeOSAgent, Utterance
from lifeos.storage import JsonFileStore


@pytest.fixture
def agent(store, rng, clock):
    return LifeOSAgent(store=store, rng=rng, clock=clock)


class TestRouting:

    def test_reminder_flow(self, agent):
        reply = agent.ask("Remind me to call mom in 10 minutes")
        assert reply == "Reminder set: call mom in 10 minutes"
        assert agent.last_source == "template"
        assert agent.last_intent.entities["time"] == "in 10 minutes"
        assert agent.last_intent.entities["content"] == "call mom in 10 minutes"

        listing = agent.ask("what are my reminders")
        assert "• call mom" in listing
        assert [r.content for r in agent.reminders()] == ["call mom in 10 minutes"]

    def test_notes_flow(self, agent):
        agent.ask("note that the door code is 42")
        assert agent.ask("show notes") == "Your notes:\n• the door code is 42"
        assert agent.notes()[0].content == "the door code is 42"

    def test_math_goes_to_conversational_regime(self, agent):
        assert agent.ask("12 * 4") == "12 × 4 = 48"
        assert agent.last_intent.intent == "calculate"
        assert agent.last_source == "conversational"

    def test_calculate_in_words(self, agent):
        assert "8" in agent.ask("calculate 5 plus 3")

    def test_time_has_meridiem(self, agent):
        reply = agent.ask("what time is it?")
        assert "AM" in reply or "PM" in reply

    def test_farsi_time(self, agent):
        assert agent.ask("ساعت چنده؟") == "ساعت 15:04 است."
        assert agent.last_intent.language == "fa"

    def test_farsi_greeting(self, agent):
        assert agent.ask("سلام") in content.FA_GREETINGS

    def test_templates_mode(self, store, rng, clock):
        agent = LifeOSAgent(store=store, rng=rng, clock=clock, mode="templates")
        assert agent.ask("hello") in content.TEMPLATES["en"]["greeting"]
        assert agent.ask("what time is it") == "The current time is 3:04 PM."
        assert agent.last_source == "template"
        assert agent.ask("what is 12 multiplied by 4") == "The result is 48"

    def test_conversational_mode_skips_the_store(self, store, rng, clock):
        agent = LifeOSAgent(store=store, rng=rng, clock=clock, mode="conversational")
        agent.ask("Remind me to call mom in 10 minutes")
        assert agent.last_source == "conversational"
        assert store.list_reminders() == []

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            LifeOSAgent(mode="telepathic")


class TestSessionState:

    def test_memory_override_and_recall(self, agent):
        agent.ask("My name is Alex")
        agent.ask("My name is Sam")
        assert agent.memory.get_facts()["user_name"] == "Sam"
        assert "Sam" in agent.ask("what's my name")

    def test_fact_stated_this_turn_is_visible(self, agent):
        assert agent.ask("hi, my name is Sam") == "Hello Sam! How can I help you today?"

    def test_history_is_bounded(self, agent):
        for i in range(11):
            agent.ask(f"message number {i}")
        turns = agent.history.turns()
        assert len(turns) == 10
        assert turns[0].user_text == "message number 1"
        assert turns[-1].user_text == "message number 10"

    def test_blank_input_is_ignored(self, agent):
        assert agent.ask("   ") == ""
        assert agent.ask("") == ""
        assert len(agent.history) == 0
        assert agent.last_utterance is None

    def test_utterance_record(self, agent, now):
        agent.ask("سلام")
        assert agent.last_utterance == Utterance("سلام", "fa", now)

    def test_repeat_reads_history(self, agent):
        first = agent.ask("tell me a joke")
        assert agent.ask("repeat that") == first

    def test_clear_memory(self, agent):
        agent.ask("My name is Sam")
        agent.clear_memory()
        assert agent.memory.get_facts() == {}
        assert len(agent.history) == 0
        assert agent.last_intent is None

    def test_greeting_is_personal(self, agent):
        assert agent.get_greeting().startswith("Hello! I'm LifeOS")
        agent.ask("call me Sam")
        assert agent.get_greeting().startswith("Hello Sam! I'm LifeOS")

    def test_summary(self, agent):
        agent.ask("My name is Sam")
        summary = agent.get_summary()
        assert summary["mode"] == "hybrid"
        assert summary["facts"] == {"user_name": "Sam"}
        assert summary["conversation"]["turns"] == 1
        assert summary["last_source"] == "conversational"

    def test_sessions_are_independent(self, rng, clock):
        a = LifeOSAgent(rng=rng, clock=clock)
        b = LifeOSAgent(rng=rng, clock=clock)
        a.ask("My name is Sam")
        assert b.memory.get_facts() == {}


class TestRobustness:

    def test_unexpected_failure_returns_apology(self, agent, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(agent.classifier, "classify", explode)
        assert agent.ask("hello") == "Sorry, something went wrong. Please try again."
        assert len(agent.history) == 0

    def test_concurrent_turns_keep_history_consistent(self, agent):
        def worker(n):
            for i in range(5):
                agent.ask(f"thread {n} says {i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(agent.history) == 10
        assert all(turn.assistant_text for turn in agent.history)

    def test_json_store_survives_sessions(self, tmp_path, rng, clock):
        path = tmp_path / "store.json"
        LifeOSAgent(store=JsonFileStore(path), rng=rng, clock=clock).ask("Remind me to water the plants")

        agent = LifeOSAgent(store=JsonFileStore(path), rng=rng, clock=clock)
        assert "• water the plants" in agent.ask("any reminders")

    def test_failed_save_does_not_list_the_reminder(self, tmp_path, rng, clock):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        agent = LifeOSAgent(store=JsonFileStore(blocker / "store.json"), rng=rng, clock=clock)

        assert agent.ask("Remind me to call mom in 10 minutes") == content.MESSAGES["en"]["error"]
        assert agent.reminders() == []
