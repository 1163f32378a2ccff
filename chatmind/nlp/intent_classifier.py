"""Rule-cascade intent and topic classifier.

Intent classification logic:
- Lowercases the message and evaluates `INTENT_RULES` in fixed priority order;
  the first rule with a matching trigger wins.
- Without a trigger match, computes word-set Jaccard similarity between the
  message and every rule example. The best example is accepted only above
  `SIMILARITY_THRESHOLD`; otherwise the intent is `general`.

Topic and feature extraction:
- Topics: analyzer topics + technical-term substrings + conceptual categories.
- Keywords: deduplicated nouns, verbs and adjectives longer than two characters.
- Complexity: advanced/intermediate vocabulary hits or message length.
- Question type: word-prefix checks, then " or ", then "?".

Interaction with memory:
- Reads (never writes) `ConversationContext` to set the follow-up and
  requires-context flags.

Determinism:
- Pure function of (text, lexical features, context snapshot).

Failure handling:
- Empty input returns a fully populated `general` result with confidence 0.5.
"""

import re
from typing import Iterable

from chatmind.core.analysis_types import (
    AnalysisResult,
    Complexity,
    Intent,
    LexicalFeatures,
    QuestionType,
)
from chatmind.nlp.intent_rules import INTENT_RULES, IntentRule
from chatmind.nlp.sentiment import SentimentScorer


# =========================================================
# CONFIG (Thresholds / boosts)
# =========================================================

SIMILARITY_THRESHOLD = 0.2

BASE_CONFIDENCE = 0.5
HIGH_CONFIDENCE_BOOST = 0.3
MEDIUM_CONFIDENCE_BOOST = 0.2
TOPIC_CONFIDENCE_BOOST = 0.2
QUESTION_MARK_BOOST = 0.1

HIGH_CONFIDENCE_INTENTS = {
    Intent.GREETING,
    Intent.EXPLANATION_REQUEST,
    Intent.HELP_REQUEST,
}

MEDIUM_CONFIDENCE_INTENTS = {
    Intent.FAREWELL,
    Intent.GRATITUDE,
    Intent.DEVELOPER_INFO,
    Intent.CAPABILITIES,
    Intent.COMPARISON_REQUEST,
}

MAX_KEYWORDS = 10
MIN_KEYWORD_LENGTH = 3

ADVANCED_LENGTH = 150
INTERMEDIATE_LENGTH = 75


# =========================================================
# VOCABULARIES
# =========================================================
# Shared with `ConversationContext.infer_level`.

ADVANCED_TERMS = (
    "algorithm", "architecture", "optimization", "scalability",
    "complexity", "paradigm", "abstraction", "performance",
)

INTERMEDIATE_TERMS = (
    "framework", "library", "api", "database", "backend",
    "frontend", "deployment",
)

TECHNICAL_TERMS = (
    "artificial intelligence", "ai", "machine learning", "ml", "deep learning",
    "neural networks", "nlp", "natural language processing", "computer vision",
    "javascript", "python", "react", "nodejs", "typescript", "html", "css",
    "algorithm", "data structure", "database", "api", "frontend", "backend",
    "web development", "software engineering", "programming", "coding",
    "data science", "statistics", "analytics", "visualization", "big data",
)

# Whole-word match with optional plural ("ai" must not fire on "explain").
TECHNICAL_TERM_PATTERNS = tuple(
    (term, re.compile(rf"\b{re.escape(term)}s?\b")) for term in TECHNICAL_TERMS
)

CONCEPTUAL_TOPICS = (
    ("programming concepts", re.compile(r"\b(function|variable|loop|condition|class|object)\b")),
    ("learning", re.compile(r"\b(learn|teach|understand|explain|tutorial|guide)\b")),
    ("problem solving", re.compile(r"\b(problem|solve|solution|fix|debug|error)\b")),
)

FOLLOW_UP_PATTERN = re.compile(
    r"\b(also|additionally|furthermore|moreover|what about|how about|and|but|"
    r"however|on the other hand)\b"
)

ANAPHORA_PATTERN = re.compile(r"\b(this|that|it|they|them|these|those)\b")

QUESTION_PREFIXES = (
    (QuestionType.WHAT, re.compile(r"^what\b")),
    (QuestionType.HOW, re.compile(r"^how\b")),
    (QuestionType.WHY, re.compile(r"^why\b")),
    (QuestionType.WHEN, re.compile(r"^when\b")),
    (QuestionType.WHERE, re.compile(r"^where\b")),
    (QuestionType.WHO, re.compile(r"^who\b")),
    (QuestionType.YES_NO, re.compile(r"^(is|are|do|does|can|will)\b")),
)

WORD_PATTERN = re.compile(r"[a-z0-9']+")


# =========================================================
# HELPERS
# =========================================================

def _normalize(text: str) -> str:
    return (text or "").strip().lower()


def _word_set(text: str) -> set[str]:
    return set(WORD_PATTERN.findall(text))


def jaccard_similarity(a: set[str], b: set[str]) -> float:
    """Intersection over union of two word sets; 0.0 when both are empty."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def _dedupe(values: Iterable[str]) -> tuple[str, ...]:
    out = []
    for value in values:
        if value and value not in out:
            out.append(value)
    return tuple(out)


def identify_technical_terms(normalized: str) -> list[str]:
    return [term for term, pattern in TECHNICAL_TERM_PATTERNS if pattern.search(normalized)]


def identify_conceptual_topics(normalized: str) -> list[str]:
    return [label for label, pattern in CONCEPTUAL_TOPICS if pattern.search(normalized)]


def extract_keywords(features: LexicalFeatures) -> tuple[str, ...]:
    candidates = _dedupe([*features.nouns, *features.verbs, *features.adjectives])
    return tuple(w for w in candidates if len(w) >= MIN_KEYWORD_LENGTH)[:MAX_KEYWORDS]


def assess_complexity(text: str, keywords: Iterable[str]) -> Complexity:
    lowered = [k.lower() for k in keywords]

    if any(term in k for k in lowered for term in ADVANCED_TERMS) or len(text) > ADVANCED_LENGTH:
        return Complexity.ADVANCED
    if any(term in k for k in lowered for term in INTERMEDIATE_TERMS) or len(text) > INTERMEDIATE_LENGTH:
        return Complexity.INTERMEDIATE
    return Complexity.BASIC


def identify_question_type(normalized: str) -> QuestionType | None:
    for question_type, pattern in QUESTION_PREFIXES:
        if pattern.search(normalized):
            return question_type
    if " or " in normalized:
        return QuestionType.CHOICE
    if "?" in normalized:
        return QuestionType.OTHER
    return None


def calculate_confidence(normalized: str, intent: Intent, topics: tuple[str, ...]) -> float:
    confidence = BASE_CONFIDENCE

    if intent in HIGH_CONFIDENCE_INTENTS:
        confidence += HIGH_CONFIDENCE_BOOST
    elif intent in MEDIUM_CONFIDENCE_INTENTS:
        confidence += MEDIUM_CONFIDENCE_BOOST

    if topics:
        confidence += TOPIC_CONFIDENCE_BOOST

    if "?" in normalized:
        confidence += QUESTION_MARK_BOOST

    return min(round(confidence, 4), 1.0)


# =========================================================
# CLASSIFIER
# =========================================================

class IntentClassifier:
    """Assign intent, topics and heuristics to one message."""

    def __init__(
        self,
        rules: tuple[IntentRule, ...] = INTENT_RULES,
        sentiment_scorer: SentimentScorer | None = None,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
    ):
        self.rules = rules
        self.sentiment_scorer = sentiment_scorer or SentimentScorer()
        self.similarity_threshold = similarity_threshold

    def match_intent(self, normalized: str) -> Intent:
        """
        Resolve the intent label for already-normalized text.

        Decision rules:
        1. First rule whose trigger matches wins.
        2. Otherwise the best Jaccard score over all rule examples, if it is
           strictly above the threshold.
        3. Otherwise `Intent.GENERAL`.
        """
        for rule in self.rules:
            if rule.matches(normalized):
                return rule.intent

        words = _word_set(normalized)
        best_intent = Intent.GENERAL
        best_score = 0.0

        for rule in self.rules:
            for example in rule.examples:
                score = jaccard_similarity(words, _word_set(example))
                if score > best_score:
                    best_score = score
                    best_intent = rule.intent

        if best_score > self.similarity_threshold:
            return best_intent
        return Intent.GENERAL

    def extract_topics(self, normalized: str, features: LexicalFeatures) -> tuple[str, ...]:
        return _dedupe([
            *features.topics,
            *identify_technical_terms(normalized),
            *identify_conceptual_topics(normalized),
        ])

    def classify(self, text: str, features: LexicalFeatures, context=None) -> AnalysisResult:
        """
        Build the `AnalysisResult` for `text`.

        `context` is an optional `ConversationContext`; it is only read.
        """
        normalized = _normalize(text)

        if not normalized:
            return AnalysisResult(intent=Intent.GENERAL, confidence=BASE_CONFIDENCE)

        intent = self.match_intent(normalized)
        topics = self.extract_topics(normalized, features)
        keywords = extract_keywords(features)
        sentiment_score, sentiment = self.sentiment_scorer.analyze(normalized)

        has_history = bool(context is not None and context.history)
        session_topics = set(context.get_topics()) if context is not None else set()

        return AnalysisResult(
            intent=intent,
            entities=features.entities,
            topics=topics,
            keywords=keywords,
            sentiment_score=sentiment_score,
            sentiment=sentiment,
            question_type=identify_question_type(normalized),
            complexity=assess_complexity(normalized, keywords),
            confidence=calculate_confidence(normalized, intent, topics),
            is_follow_up=bool(FOLLOW_UP_PATTERN.search(normalized)) or has_history,
            requires_context=(
                bool(ANAPHORA_PATTERN.search(normalized))
                or any(topic in session_topics for topic in topics)
            ),
        )
