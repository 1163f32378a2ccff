"""Analysis data contracts shared by the NLP pipeline and `chatmind.core.engine`.

Architectural role:
    Defines the closed label sets (intent, question type, complexity, expertise,
    sentiment) and the immutable structures passed between pipeline stages:
    - `LexicalFeatures`: produced by `chatmind.nlp.lexical_analyzer`.
    - `AnalysisResult`: produced by `chatmind.nlp.intent_classifier` and consumed
      by `chatmind.prompting.response_generator`.
    - `Utterance`: one user submission as seen by the engine.

Determinism:
    The module is purely structural and state-free. All dataclasses are frozen so a
    result cannot be mutated by a later pipeline stage.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Intent(str, Enum):
    """Closed set of intent labels. Every member needs a response handler."""

    GREETING = "greeting"
    FAREWELL = "farewell"
    GRATITUDE = "gratitude"
    DEVELOPER_INFO = "developer_info"
    CAPABILITIES = "capabilities"
    EXPLANATION_REQUEST = "explanation_request"
    HELP_REQUEST = "help_request"
    COMPARISON_REQUEST = "comparison_request"
    LEARNING_REQUEST = "learning_request"
    PROBLEM_SOLVING = "problem_solving"
    INFORMATION_SEEKING = "information_seeking"
    TECHNICAL_QUESTION = "technical_question"
    QUESTION = "question"
    GENERAL = "general"


class QuestionType(str, Enum):
    WHAT = "what"
    HOW = "how"
    WHY = "why"
    WHEN = "when"
    WHERE = "where"
    WHO = "who"
    YES_NO = "yes_no"
    CHOICE = "choice"
    OTHER = "other"


class Complexity(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExpertiseLevel(str, Enum):
    """Inferred user level. Ordering follows declaration order."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        return list(ExpertiseLevel).index(self)


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class CommunicationStyle(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    TECHNICAL = "technical"


class PreferredDepth(str, Enum):
    BRIEF = "brief"
    DETAILED = "detailed"
    COMPREHENSIVE = "comprehensive"


@dataclass(frozen=True)
class Utterance:
    """Raw user submission with its arrival time."""

    text: str
    received_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class LexicalFeatures:
    """Shallow linguistic features of one message.

    Attributes:
        entities: Proper-noun phrases in original casing.
        nouns: Lowercased noun tokens, order of appearance.
        verbs: Lowercased content verbs (auxiliaries removed).
        adjectives: Lowercased adjective tokens.
        topics: Lowercased entity labels.
    """

    entities: tuple[str, ...] = ()
    nouns: tuple[str, ...] = ()
    verbs: tuple[str, ...] = ()
    adjectives: tuple[str, ...] = ()
    topics: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Classification output for one utterance.

    Attributes:
        intent: Winning intent label.
        entities: Entities reported by the lexical analyzer.
        topics: Deduplicated topic labels in discovery order.
        keywords: Up to ten content words.
        sentiment_score: Normalized lexicon score.
        sentiment: Thresholded sentiment category.
        question_type: Question form, or `None` for statements.
        complexity: Estimated technical depth of the message.
        confidence: Heuristic score in [0.0, 1.0].
        is_follow_up: Message continues an earlier exchange.
        requires_context: Message refers back to earlier content.
    """

    intent: Intent = Intent.GENERAL
    entities: tuple[str, ...] = ()
    topics: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    sentiment_score: float = 0.0
    sentiment: Sentiment = Sentiment.NEUTRAL
    question_type: QuestionType | None = None
    complexity: Complexity = Complexity.BASIC
    confidence: float = 0.5
    is_follow_up: bool = False
    requires_context: bool = False
