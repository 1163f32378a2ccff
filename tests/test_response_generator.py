"""
Tests for intent-dispatched response rendering.
"""
import random

import pytest

from chatmind.core.analysis_types import (
    AnalysisResult,
    ExpertiseLevel,
    Intent,
    PreferredDepth,
    QuestionType,
)
from chatmind.memory.conversation_context import ConversationContext, Turn
from chatmind.nlp.intent_rules import get_rule
from chatmind.prompting import templates
from chatmind.prompting.response_generator import (
    ResponseGenerator,
    categorize_keywords,
    extract_comparison_subjects,
)
from chatmind.retrieval.knowledge_base import TOPIC_EXPLANATIONS, KnowledgeBase


def analysis(intent, **kwargs):
    return AnalysisResult(intent=intent, **kwargs)


def assert_social_reply(reply, intent):
    """Reply is one rule template, followed by one rule follow-up when the rule has any."""
    rule = get_rule(intent)
    parts = reply.split("\n\n")

    assert parts[0] in rule.responses
    if rule.follow_ups:
        assert len(parts) == 2
        assert parts[1] in rule.follow_ups
    else:
        assert len(parts) == 1


class TestDispatch:

    def test_every_intent_has_a_handler(self, generator):
        assert set(generator._handlers) == set(Intent)

    def test_missing_context_is_allowed(self, generator):
        reply = generator.generate("hello", analysis(Intent.GREETING))
        assert_social_reply(reply, Intent.GREETING)


class TestSocial:

    @pytest.mark.parametrize("intent", [Intent.GREETING, Intent.FAREWELL, Intent.GRATITUDE])
    def test_reply_comes_from_rule_templates(self, generator, context, intent):
        reply = generator.generate("x", analysis(intent), context)
        assert_social_reply(reply, intent)

    def test_seeded_choice_is_reproducible(self):
        first = ResponseGenerator(rng=random.Random(3))
        second = ResponseGenerator(rng=random.Random(3))

        replies_a = [first.generate("hi", analysis(Intent.GREETING)) for _ in range(5)]
        replies_b = [second.generate("hi", analysis(Intent.GREETING)) for _ in range(5)]

        assert replies_a == replies_b

    def test_developer_info_names_author(self, generator, context):
        reply = generator.generate("who made you", analysis(Intent.DEVELOPER_INFO), context)
        assert "**Aluko Oluwatobi**" in reply


class TestCapabilities:

    def test_beginner_list_by_default(self, generator, context):
        reply = generator.generate("what can you do", analysis(Intent.CAPABILITIES), context)

        assert templates.CAPABILITIES_BY_LEVEL[ExpertiseLevel.BEGINNER][0] in reply
        assert "**beginner**" in reply

    def test_accumulated_expertise_raises_level(self, generator, context):
        context.expertise.update({"python": 0.9, "react": 0.8})
        reply = generator.generate("what can you do", analysis(Intent.CAPABILITIES), context)

        assert templates.CAPABILITIES_BY_LEVEL[ExpertiseLevel.ADVANCED][0] in reply
        assert "**advanced**" in reply

    def test_message_vocabulary_raises_level(self, generator, context):
        assert generator.user_level("my api is slow", context) == ExpertiseLevel.INTERMEDIATE

    def test_one_rule_follow_up_precedes_level_note(self, generator, context):
        reply = generator.generate("what can you do", analysis(Intent.CAPABILITIES), context)
        follow_ups = [f for f in get_rule(Intent.CAPABILITIES).follow_ups if f in reply]

        assert len(follow_ups) == 1
        assert reply.index(follow_ups[0]) < reply.index("Based on our conversation")


class TestExplanation:

    def test_known_topic_with_related_concepts(self, generator, context):
        reply = generator.generate(
            "what is machine learning?",
            analysis(Intent.EXPLANATION_REQUEST, topics=("machine learning",)),
            context,
        )

        assert reply.startswith(TOPIC_EXPLANATIONS["machine learning"])
        assert "In simple terms" in reply
        assert templates.RELATED_HEADER in reply
        assert "• supervised learning\n• unsupervised learning" in reply
        assert "reinforcement learning" not in reply.split(templates.RELATED_HEADER)[1]
        assert reply.endswith(templates.EXPLANATION_FOLLOW_UP)

    def test_brief_depth_omits_related(self, generator, context):
        context.set_preferred_depth(PreferredDepth.BRIEF)
        reply = generator.generate(
            "what is machine learning?",
            analysis(Intent.EXPLANATION_REQUEST, topics=("machine learning",)),
            context,
        )

        assert templates.RELATED_HEADER not in reply

    def test_conceptual_labels_are_not_subjects(self, generator, context):
        reply = generator.generate(
            "explain",
            analysis(Intent.EXPLANATION_REQUEST, topics=("learning",), keywords=("explain",)),
            context,
        )
        assert reply == templates.EXPLANATION_NO_SUBJECT

    def test_unknown_topic(self, generator, context):
        reply = generator.generate(
            "explain quantum",
            analysis(Intent.EXPLANATION_REQUEST, topics=("quantum",)),
            context,
        )

        assert reply.startswith("**quantum** is an important concept")
        assert templates.RELATED_HEADER not in reply

    def test_information_with_topic(self, generator, context):
        reply = generator.generate(
            "where is react used",
            analysis(Intent.INFORMATION_SEEKING, topics=("react",)),
            context,
        )
        assert reply == f"{TOPIC_EXPLANATIONS['react']}\n\n{templates.INFORMATION_FOLLOW_UP}"

    def test_information_without_topic(self, generator, context):
        reply = generator.generate("where do penguins live", analysis(Intent.INFORMATION_SEEKING), context)
        assert reply == templates.INFORMATION_CATALOG


class TestComparison:

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("React vs Vue", ["react", "vue"]),
            ("react versus vue", ["react", "vue"]),
            ("python or java", ["python", "java"]),
            ("python or java vs go", ["java", "go"]),
            ("compare these", []),
            ("", []),
        ],
    )
    def test_extract_subjects(self, text, expected):
        assert extract_comparison_subjects(text) == expected

    def test_known_pair_table(self, generator, context):
        reply = generator.generate("React vs Vue", analysis(Intent.COMPARISON_REQUEST), context)

        assert "**React:**" in reply
        assert "**Vue:**" in reply
        assert reply.index("**React:**") < reply.index("**Vue:**")

    def test_reverse_pair_keeps_requested_order(self, generator, context):
        reply = generator.generate("vue vs react", analysis(Intent.COMPARISON_REQUEST), context)
        assert reply.index("**Vue:**") < reply.index("**React:**")

    def test_unknown_pair_lists_criteria(self, generator, context):
        reply = generator.generate("go or rust", analysis(Intent.COMPARISON_REQUEST), context)
        assert reply == templates.COMPARISON_CRITERIA.format(a="go", b="rust")

    def test_no_subjects(self, generator, context):
        reply = generator.generate("compare them", analysis(Intent.COMPARISON_REQUEST), context)
        assert reply == templates.COMPARISON_NO_SUBJECTS


class TestGuidance:

    def test_learning_path_for_topic(self, generator, context):
        reply = generator.generate(
            "i want to learn python",
            analysis(Intent.LEARNING_REQUEST, topics=("python", "learning")),
            context,
        )

        assert reply.startswith("Great choice wanting to learn about **python**")
        assert "(beginner)" in reply
        assert "**Beginner Path:**" in reply
        assert reply.endswith(templates.LEARNING_TIPS)

        follow_ups = [f for f in get_rule(Intent.LEARNING_REQUEST).follow_ups if f in reply]
        assert len(follow_ups) == 1
        assert reply.index(follow_ups[0]) < reply.index("**Learning Tips:**")

    def test_learning_defaults_to_programming(self, generator, context):
        reply = generator.generate(
            "i want to learn",
            analysis(Intent.LEARNING_REQUEST, keywords=("want", "learn")),
            context,
        )
        assert "learn about **programming**" in reply

    def test_learning_unknown_track(self, generator, context):
        reply = generator.generate(
            "learn cooking",
            analysis(Intent.LEARNING_REQUEST, topics=("cooking",)),
            context,
        )
        assert "**Learning cooking:**" in reply

    def test_problem_solving_names_topic(self, generator, context):
        reply = generator.generate(
            "my python code has a bug",
            analysis(Intent.PROBLEM_SOLVING, topics=("python", "problem solving")),
            context,
        )
        assert "solve that problem with **python**!" in reply

    def test_problem_solving_without_topic(self, generator, context):
        reply = generator.generate("it is broken", analysis(Intent.PROBLEM_SOLVING), context)
        assert reply == templates.PROBLEM_SOLVING.format(topic_clause="")

    def test_help(self, generator, context):
        with_topic = generator.generate("help with git", analysis(Intent.HELP_REQUEST, topics=("git",)), context)
        generic = generator.generate("help", analysis(Intent.HELP_REQUEST), context)

        assert with_topic == templates.HELP_WITH_TOPIC.format(topic="git")
        assert generic == templates.HELP_GENERIC


class TestTechnical:

    def test_beginner_hit(self, generator, context):
        kb = KnowledgeBase()
        reply = generator.generate(
            "tips for python",
            analysis(Intent.TECHNICAL_QUESTION, topics=("python",), keywords=("tips", "python")),
            context,
        )

        assert reply.startswith(kb.get("python").content)
        assert "In simple terms" in reply
        assert "Related topics" not in reply
        assert reply.endswith(templates.TECHNICAL_FOLLOW_UP)

    def test_advanced_user_gets_entries_one_tier_below(self, generator, context):
        kb = KnowledgeBase()
        context.expertise["python"] = 0.9
        reply = generator.generate(
            "tips for python",
            analysis(Intent.TECHNICAL_QUESTION, topics=("python",), keywords=("tips", "python")),
            context,
        )

        assert reply.startswith(kb.get("data_science").content)
        assert "Advanced insight" in reply

    def test_second_hit_is_suggested(self, generator, context):
        context.expertise["js"] = 0.5
        reply = generator.generate(
            "javascript",
            analysis(Intent.TECHNICAL_QUESTION, topics=("javascript",)),
            context,
        )

        assert "Technical note" in reply
        assert templates.TECHNICAL_RELATED.format(topic="react") in reply

    def test_brief_depth_drops_suggestion(self, generator, context):
        context.expertise["js"] = 0.5
        context.set_preferred_depth("brief")
        reply = generator.generate(
            "javascript",
            analysis(Intent.TECHNICAL_QUESTION, topics=("javascript",)),
            context,
        )

        assert "Related topics" not in reply

    def test_fallback_names_keywords_and_category(self, generator, context):
        reply = generator.generate(
            "quantum entanglement",
            analysis(Intent.TECHNICAL_QUESTION, keywords=("quantum", "entanglement")),
            context,
        )

        assert "(quantum, entanglement)" in reply
        assert templates.DEFAULT_CATEGORY in reply

    @pytest.mark.parametrize(
        "keywords,expected",
        [
            (["neural"], "artificial intelligence and machine learning"),
            (["software"], "software development and programming"),
            (["frontend"], "web development"),
            (["database"], "data science and analytics"),
            (["quantum"], "technology and computer science"),
            ([], "technology and computer science"),
        ],
    )
    def test_categorize_keywords(self, keywords, expected):
        assert categorize_keywords(keywords) == expected


class TestQuestion:

    def test_knowledge_hit_with_lead_in(self, generator, context):
        reply = generator.generate(
            "what is python?",
            analysis(Intent.QUESTION, question_type=QuestionType.WHAT, topics=("python",)),
            context,
        )

        assert reply.startswith("Let me explain:\n\nPython is a high-level")
        assert reply.endswith(templates.QUESTION_FOLLOW_UP)

    def test_prompt_for_how_without_knowledge(self, generator, context):
        reply = generator.generate(
            "how do i do that?",
            analysis(Intent.QUESTION, question_type=QuestionType.HOW),
            context,
        )
        assert reply == templates.QUESTION_PROMPTS[QuestionType.HOW]

    def test_falls_back_to_general(self, generator, context):
        reply = generator.generate(
            "is it raining?",
            analysis(Intent.QUESTION, question_type=QuestionType.YES_NO),
            context,
        )
        assert reply == templates.GENERIC_CAPABILITIES


class TestGeneral:

    def test_continuation_for_recent_topic(self, generator, context):
        context.record(Turn("python rocks", "indeed", topics=("python",)))
        reply = generator.generate("more python", analysis(Intent.GENERAL, topics=("python",)), context)

        assert reply == templates.CONTINUATION.format(topic="python")

    def test_old_topic_is_not_continuation(self, generator, context):
        context.record(Turn("x", "y", topics=("python", "a", "b", "c")))
        reply = generator.generate(
            "more python",
            analysis(Intent.GENERAL, topics=("python",), keywords=("python",)),
            context,
        )

        assert reply == templates.KEYWORD_ECHO.format(keyword="python")

    def test_keyword_echo(self, generator, context):
        reply = generator.generate("penguins", analysis(Intent.GENERAL, keywords=("penguins",)), context)
        assert "**penguins**" in reply

    def test_generic_reply(self, generator, context):
        assert generator.generate("", analysis(Intent.GENERAL), context) == templates.GENERIC_CAPABILITIES


class TestWithClassifier:

    def test_comparison_end_to_end(self, classify, generator):
        context = ConversationContext()
        text = "Compare React vs Vue"
        reply = generator.generate(text, classify(text, context), context)

        assert "**React:**" in reply
