"""
Tests for per-session conversation state.
"""
import pytest

from chatmind.core.analysis_types import (
    AnalysisResult,
    CommunicationStyle,
    Complexity,
    ExpertiseLevel,
    Intent,
    PreferredDepth,
)
from chatmind.memory.conversation_context import (
    HISTORY_LIMIT,
    MEMORY_LIMIT,
    TOPIC_LIMIT,
    Turn,
    infer_level,
)


class TestHistory:

    def test_history_keeps_most_recent_turns_in_order(self, context):
        for i in range(HISTORY_LIMIT + 2):
            context.record(Turn(f"m{i}", f"r{i}"))

        assert len(context.history) == HISTORY_LIMIT
        assert [t.user_text for t in context.history] == [f"m{i}" for i in range(2, 12)]

    def test_recent_history(self, context):
        for i in range(5):
            context.record(Turn(f"m{i}", f"r{i}"))

        assert [t.user_text for t in context.get_recent_history()] == ["m2", "m3", "m4"]
        assert context.get_recent_history(0) == []


class TestTopics:

    def test_topics_are_unique(self, context):
        context.record(Turn("a", "b", topics=("python", "react")))
        context.record(Turn("c", "d", topics=("python",)))

        assert context.get_topics() == ["python", "react"]

    def test_topic_cap_evicts_oldest(self, context):
        for i in range(TOPIC_LIMIT + 5):
            context.record(Turn("x", "y", topics=(f"t{i}",)))

        topics = context.get_topics()
        assert len(topics) == TOPIC_LIMIT
        assert topics[0] == "t5"
        assert topics[-1] == f"t{TOPIC_LIMIT + 4}"

    def test_get_topics_returns_copy(self, context):
        context.record(Turn("x", "y", topics=("python",)))
        context.get_topics().append("mutated")

        assert context.get_topics() == ["python"]


class TestExpertise:

    def test_repeated_mentions_never_decrease_or_exceed_one(self, context):
        previous = 0.0
        for _ in range(30):
            context.update_expertise(["python"])
            current = context.expertise["python"]
            assert current >= previous
            assert current <= 1.0
            previous = current

        assert context.expertise["python"] == 1.0

    def test_step_size(self, context):
        context.update_expertise(["react", "react"])
        assert context.expertise["react"] == pytest.approx(0.1)

    @pytest.mark.parametrize(
        "values,expected",
        [
            ({}, ExpertiseLevel.BEGINNER),
            ({"a": 0.4}, ExpertiseLevel.BEGINNER),
            ({"a": 0.5}, ExpertiseLevel.INTERMEDIATE),
            ({"a": 0.7}, ExpertiseLevel.INTERMEDIATE),
            ({"a": 0.9, "b": 0.8}, ExpertiseLevel.ADVANCED),
        ],
    )
    def test_expertise_level_uses_mean(self, context, values, expected):
        context.expertise.update(values)
        assert context.expertise_level() == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("the algorithm is slow", ExpertiseLevel.ADVANCED),
            ("my API returns 500", ExpertiseLevel.INTERMEDIATE),
            ("rapid prototyping", ExpertiseLevel.BEGINNER),
            ("", ExpertiseLevel.BEGINNER),
        ],
    )
    def test_infer_level_matches_whole_words(self, context, text, expected):
        assert infer_level(text) == expected
        assert context.infer_level(text) == expected


class TestProfile:

    def test_style_follows_complexity(self, context):
        context.update_style(Complexity.ADVANCED)
        assert context.communication_style == CommunicationStyle.TECHNICAL

        context.update_style(Complexity.INTERMEDIATE)
        assert context.communication_style == CommunicationStyle.TECHNICAL

        context.update_style(Complexity.BASIC)
        assert context.communication_style == CommunicationStyle.CASUAL

    def test_preferred_depth_accepts_value(self, context):
        context.set_preferred_depth("brief")
        assert context.preferred_depth == PreferredDepth.BRIEF

    def test_invalid_depth_is_rejected(self, context):
        with pytest.raises(ValueError):
            context.set_preferred_depth("endless")

    def test_interests_are_unique(self, context):
        context.add_interests(["python", "ai"])
        context.add_interests(["ai", "react"])

        assert context.interests == ["python", "ai", "react"]


class TestInteractionMemory:

    def test_memory_cap_evicts_oldest(self, context):
        for i in range(MEMORY_LIMIT + 5):
            context.remember(f"key{i}", i)

        assert len(context.interaction_memory) == MEMORY_LIMIT
        assert context.recall("key4") is None
        assert context.recall("key5") == 5
        assert next(iter(context.interaction_memory)) == "key5"

    def test_remember_interaction_uses_sequential_keys(self, context):
        analysis = AnalysisResult(intent=Intent.GREETING, topics=("python",))

        first = context.remember_interaction(Turn("hi", "hello"), analysis)
        second = context.remember_interaction(Turn("hey", "hi"), analysis)

        assert (first, second) == ("interaction_1", "interaction_2")
        stored = context.recall(first)
        assert stored["user_message"] == "hi"
        assert stored["intent"] == "greeting"
        assert stored["topics"] == ["python"]

    def test_reset_clears_everything(self, context):
        context.record(Turn("a", "b", topics=("python",)))
        context.update_expertise(["python"])
        context.remember("k", "v")
        context.set_preferred_depth(PreferredDepth.BRIEF)

        context.reset()

        assert len(context.history) == 0
        assert context.get_topics() == []
        assert context.expertise == {}
        assert context.recall("k") is None
        assert context.preferred_depth == PreferredDepth.DETAILED
        assert context.remember_interaction(Turn("a", "b"), AnalysisResult()) == "interaction_1"
