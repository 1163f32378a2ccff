"""Intent-dispatched response rendering.

Architectural role:
    Final local pipeline stage. Receives `(text, AnalysisResult, ConversationContext)`
    and renders user-facing text from `chatmind.prompting.templates` and the
    `chatmind.retrieval.knowledge_base` catalog.

Dispatch:
    One handler per `Intent` member. The table is checked at construction time so
    a new intent without a handler fails fast instead of at request time.

Level adaptation:
    The user level is the higher of the vocabulary level of the current message and
    the accumulated session expertise. Explanatory answers end with the remark for
    that level.

Determinism:
    Handlers only read the context. The single source of randomness is the
    injected `random.Random`, used to pick social templates and follow-up prompts.
"""

import random
import re
from typing import Callable, Iterable

from chatmind.core.analysis_types import (
    AnalysisResult,
    ExpertiseLevel,
    Intent,
    PreferredDepth,
)
from chatmind.memory.conversation_context import ConversationContext
from chatmind.nlp.intent_classifier import CONCEPTUAL_TOPICS
from chatmind.nlp.intent_rules import get_rule
from chatmind.prompting import templates
from chatmind.retrieval.knowledge_base import KnowledgeBase, KnowledgeEntry


MAX_RELATED = 2
RECENT_TOPIC_WINDOW = 3
MAX_KNOWLEDGE_HITS = 2

CONCEPTUAL_LABELS = {label for label, _ in CONCEPTUAL_TOPICS}

# Request verbs that name the action rather than the subject.
SUBJECT_STOPWORDS = {
    "explain", "describe", "tell", "help", "compare", "learn", "know",
    "understand", "show", "need", "want", "work", "does",
}

VERSUS_PATTERN = re.compile(r"(\w+)\s+(?:vs\.?|versus)\s+(\w+)")
OR_PATTERN = re.compile(r"(\w+)\s+or\s+(\w+)")

Handler = Callable[[str, AnalysisResult, ConversationContext], str]


# =========================================================
# HELPERS
# =========================================================

def extract_comparison_subjects(text: str) -> list[str]:
    """Return the two compared subjects, lowercased, or an empty list.

    `X vs Y` / `X versus Y` takes precedence over `X or Y`.
    """
    lowered = (text or "").lower()

    for pattern in (VERSUS_PATTERN, OR_PATTERN):
        match = pattern.search(lowered)
        if match:
            return [match.group(1), match.group(2)]
    return []


def categorize_keywords(keywords: Iterable[str]) -> str:
    lowered = [k.lower() for k in keywords]

    for category, terms in templates.KEYWORD_CATEGORIES:
        if any(term in keyword for keyword in lowered for term in terms):
            return category
    return templates.DEFAULT_CATEGORY


def _subject_topics(analysis: AnalysisResult) -> list[str]:
    return [t for t in analysis.topics if t not in CONCEPTUAL_LABELS]


def _subject(analysis: AnalysisResult) -> str | None:
    """First concrete topic, else the first keyword that is not a request verb."""
    topics = _subject_topics(analysis)
    if topics:
        return topics[0]

    for keyword in analysis.keywords:
        if keyword not in SUBJECT_STOPWORDS:
            return keyword
    return None


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def _dedupe_entries(entries: Iterable[KnowledgeEntry]) -> list[KnowledgeEntry]:
    out = []
    for entry in entries:
        if entry not in out:
            out.append(entry)
    return out


def _level_fits(entry: KnowledgeEntry, level: ExpertiseLevel) -> bool:
    """Entry is at the user's level or exactly one tier below it."""
    return 0 <= level.rank - entry.difficulty.rank <= 1


# =========================================================
# GENERATOR
# =========================================================

class ResponseGenerator:
    """Render a reply for one classified message."""

    def __init__(self, knowledge_base: KnowledgeBase | None = None, rng: random.Random | None = None):
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.rng = rng or random.Random()

        self._handlers: dict[Intent, Handler] = {
            Intent.GREETING: self._social,
            Intent.FAREWELL: self._social,
            Intent.GRATITUDE: self._social,
            Intent.DEVELOPER_INFO: self._developer_info,
            Intent.CAPABILITIES: self._capabilities,
            Intent.EXPLANATION_REQUEST: self._explanation,
            Intent.HELP_REQUEST: self._help,
            Intent.COMPARISON_REQUEST: self._comparison,
            Intent.LEARNING_REQUEST: self._learning,
            Intent.PROBLEM_SOLVING: self._problem_solving,
            Intent.INFORMATION_SEEKING: self._information,
            Intent.TECHNICAL_QUESTION: self._technical,
            Intent.QUESTION: self._question,
            Intent.GENERAL: self._general,
        }

        missing = [intent.value for intent in Intent if intent not in self._handlers]
        if missing:
            raise ValueError(f"No response handler for intents: {', '.join(missing)}")

    def generate(self, text: str, analysis: AnalysisResult, context: ConversationContext | None = None) -> str:
        if context is None:
            context = ConversationContext()
        return self._handlers[analysis.intent](text, analysis, context)

    def user_level(self, text: str, context: ConversationContext) -> ExpertiseLevel:
        return max(context.infer_level(text), context.expertise_level(), key=lambda level: level.rank)

    def adapt_to_level(self, content: str, level: ExpertiseLevel) -> str:
        return f"{content}\n\n{templates.LEVEL_REMARKS[level]}"

    def find_knowledge(self, text: str, analysis: AnalysisResult, include_keywords: bool = True) -> list[KnowledgeEntry]:
        """Catalog entries for the message, whole-text search first."""
        kb = self.knowledge_base
        hits = list(kb.search(text))

        for topic in _subject_topics(analysis):
            hits.extend(kb.search(topic))

        if include_keywords:
            hits.extend(kb.by_keywords(analysis.keywords))

        return _dedupe_entries(hits)

    # -----------------------------------------------------
    # Social
    # -----------------------------------------------------

    def _follow_up(self, intent: Intent) -> str | None:
        rule = get_rule(intent)
        if rule is None or not rule.follow_ups:
            return None
        return self.rng.choice(rule.follow_ups)

    def _social(self, text, analysis, context):
        rule = get_rule(analysis.intent)
        reply = self.rng.choice(rule.responses)

        follow_up = self._follow_up(analysis.intent)
        if follow_up:
            reply = f"{reply}\n\n{follow_up}"
        return reply

    def _developer_info(self, text, analysis, context):
        return templates.DEVELOPER_INFO

    def _capabilities(self, text, analysis, context):
        level = self.user_level(text, context)
        response = templates.CAPABILITIES_INTRO + "\n".join(templates.CAPABILITIES_BY_LEVEL[level])

        follow_up = self._follow_up(Intent.CAPABILITIES)
        if follow_up:
            response += f"\n\n{follow_up}"

        return response + templates.CAPABILITIES_OUTRO.format(level=level.value)

    # -----------------------------------------------------
    # Explanations
    # -----------------------------------------------------

    def _explanation(self, text, analysis, context):
        subject = _subject(analysis)
        if subject is None:
            return templates.EXPLANATION_NO_SUBJECT

        explanation = self.knowledge_base.explanation(subject)
        if explanation is None:
            response = templates.EXPLANATION_UNKNOWN.format(topic=subject)
        else:
            response = self.adapt_to_level(explanation, self.user_level(text, context))

        if context.preferred_depth != PreferredDepth.BRIEF:
            related = self.knowledge_base.related(subject, limit=MAX_RELATED)
            if related:
                response += f"\n\n{templates.RELATED_HEADER}\n{_bullets(related)}"

        return f"{response}\n\n{templates.EXPLANATION_FOLLOW_UP}"

    def _information(self, text, analysis, context):
        topics = _subject_topics(analysis)
        if not topics:
            return templates.INFORMATION_CATALOG

        topic = topics[0]
        explanation = self.knowledge_base.explanation(topic) or templates.EXPLANATION_UNKNOWN.format(topic=topic)
        return f"{explanation}\n\n{templates.INFORMATION_FOLLOW_UP}"

    def _technical(self, text, analysis, context):
        level = self.user_level(text, context)
        hits = [
            entry for entry in self.find_knowledge(text, analysis)
            if _level_fits(entry, level)
        ][:MAX_KNOWLEDGE_HITS]

        if not hits:
            shown = list(analysis.keywords[:3]) or list(analysis.topics[:3])
            return templates.TECHNICAL_FALLBACK.format(
                keywords=", ".join(shown),
                category=categorize_keywords([*analysis.keywords, *analysis.topics]),
            )

        response = self.adapt_to_level(hits[0].content, level)

        if len(hits) > 1 and context.preferred_depth != PreferredDepth.BRIEF:
            response += "\n\n" + templates.TECHNICAL_RELATED.format(topic=hits[1].title)

        return f"{response}\n\n{templates.TECHNICAL_FOLLOW_UP}"

    def _question(self, text, analysis, context):
        hits = self.find_knowledge(text, analysis, include_keywords=False)

        if hits:
            response = self.adapt_to_level(hits[0].content, self.user_level(text, context))
            lead_in = templates.QUESTION_LEAD_INS.get(analysis.question_type)
            if lead_in:
                response = f"{lead_in}\n\n{response}"
            return f"{response}\n\n{templates.QUESTION_FOLLOW_UP}"

        prompt = templates.QUESTION_PROMPTS.get(analysis.question_type)
        if prompt:
            return prompt

        return self._general(text, analysis, context)

    # -----------------------------------------------------
    # Guidance
    # -----------------------------------------------------

    def _help(self, text, analysis, context):
        topics = _subject_topics(analysis)
        if topics:
            return templates.HELP_WITH_TOPIC.format(topic=topics[0])
        return templates.HELP_GENERIC

    def _problem_solving(self, text, analysis, context):
        topics = _subject_topics(analysis)
        clause = f" with **{topics[0]}**" if topics else ""
        return templates.PROBLEM_SOLVING.format(topic_clause=clause)

    def _comparison(self, text, analysis, context):
        subjects = extract_comparison_subjects(text)
        if len(subjects) < 2:
            return templates.COMPARISON_NO_SUBJECTS

        a, b = subjects
        table = self.knowledge_base.comparison(a, b)
        if table is None:
            return templates.COMPARISON_CRITERIA.format(a=a, b=b)

        name_a, points_a, name_b, points_b = table
        return templates.COMPARISON_TABLE.format(
            name_a=name_a, points_a=points_a,
            name_b=name_b, points_b=points_b,
        )

    def _learning(self, text, analysis, context):
        topic = _subject(analysis) or "programming"
        level = self.user_level(text, context)

        path = self.knowledge_base.learning_path(topic, level)
        if path is None:
            path = templates.LEARNING_PATH_GENERIC.format(topic=topic)

        response = templates.LEARNING_INTRO.format(topic=topic, level=level.value) + path

        follow_up = self._follow_up(Intent.LEARNING_REQUEST)
        if follow_up:
            response += f"\n\n{follow_up}"

        return response + templates.LEARNING_TIPS

    # -----------------------------------------------------
    # Fallback
    # -----------------------------------------------------

    def _general(self, text, analysis, context):
        recent = context.get_topics()[-RECENT_TOPIC_WINDOW:]

        for topic in analysis.topics:
            if topic in recent:
                return templates.CONTINUATION.format(topic=topic)

        if analysis.keywords:
            return templates.KEYWORD_ECHO.format(keyword=analysis.keywords[0])

        return templates.GENERIC_CAPABILITIES
