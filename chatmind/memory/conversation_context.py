"""Per-session conversation state.

Purpose of this abstraction:
    Hold everything the pipeline remembers about one conversation: recent turns,
    topics mentioned so far, per-topic expertise, communication style, preferred
    answer depth and a small interaction memory. One instance per session; there
    is no module-level state.

Bounds:
    - history: `HISTORY_LIMIT` turns.
    - session topics: `TOPIC_LIMIT` labels, no duplicates.
    - interaction memory: `MEMORY_LIMIT` entries.
    Every bound is enforced on insert with strict FIFO eviction (oldest first).

Expertise model:
    Each mention of a topic adds `EXPERTISE_STEP`, clamped to 1.0. The aggregate
    level is the mean over all tracked topics.

Concurrency:
    Single writer. `chatmind.core.engine.ChatSession` serializes turns, so no
    locking is done here.
"""

import re
from collections import OrderedDict, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from chatmind.core.analysis_types import (
    AnalysisResult,
    CommunicationStyle,
    Complexity,
    ExpertiseLevel,
    PreferredDepth,
)
from chatmind.nlp.intent_classifier import ADVANCED_TERMS, INTERMEDIATE_TERMS


HISTORY_LIMIT = 10
TOPIC_LIMIT = 20
MEMORY_LIMIT = 100

EXPERTISE_STEP = 0.05
ADVANCED_EXPERTISE = 0.7
INTERMEDIATE_EXPERTISE = 0.4


@dataclass(frozen=True)
class Turn:
    """One completed exchange."""

    user_text: str
    response_text: str
    timestamp: datetime = field(default_factory=datetime.now)
    topics: tuple[str, ...] = ()


def infer_level(text: str) -> ExpertiseLevel:
    """
    Estimate user level from the vocabulary of a single message.

    Only whole words are compared. Stored history is not consulted.
    """
    words = set(re.findall(r"[a-z0-9]+", (text or "").lower()))

    if any(term in words for term in ADVANCED_TERMS):
        return ExpertiseLevel.ADVANCED
    if any(term in words for term in INTERMEDIATE_TERMS):
        return ExpertiseLevel.INTERMEDIATE
    return ExpertiseLevel.BEGINNER


class ConversationContext:
    """Mutable memory of one conversation."""

    def __init__(self):
        self.history: deque[Turn] = deque(maxlen=HISTORY_LIMIT)
        self.session_topics: list[str] = []
        self.expertise: dict[str, float] = {}
        self.interests: list[str] = []
        self.communication_style = CommunicationStyle.CASUAL
        self.preferred_depth = PreferredDepth.DETAILED
        self.interaction_memory: OrderedDict[str, Any] = OrderedDict()
        self._interaction_count = 0

    # -----------------------------------------------------
    # History and topics
    # -----------------------------------------------------

    def record(self, turn: Turn) -> None:
        """Append a turn and merge its topics into the session topic list."""
        self.history.append(turn)

        for topic in turn.topics:
            if topic not in self.session_topics:
                self.session_topics.append(topic)

        if len(self.session_topics) > TOPIC_LIMIT:
            del self.session_topics[:-TOPIC_LIMIT]

    def get_recent_history(self, n: int = 3) -> list[Turn]:
        if n <= 0:
            return []
        return list(self.history)[-n:]

    def get_topics(self) -> list[str]:
        return list(self.session_topics)

    # -----------------------------------------------------
    # Profile
    # -----------------------------------------------------

    def update_expertise(self, topics: Iterable[str]) -> None:
        for topic in topics:
            current = self.expertise.get(topic, 0.0)
            self.expertise[topic] = min(1.0, round(current + EXPERTISE_STEP, 4))

    def expertise_level(self) -> ExpertiseLevel:
        if not self.expertise:
            return ExpertiseLevel.BEGINNER

        average = sum(self.expertise.values()) / len(self.expertise)

        if average > ADVANCED_EXPERTISE:
            return ExpertiseLevel.ADVANCED
        if average > INTERMEDIATE_EXPERTISE:
            return ExpertiseLevel.INTERMEDIATE
        return ExpertiseLevel.BEGINNER

    def infer_level(self, text: str) -> ExpertiseLevel:
        return infer_level(text)

    def update_style(self, complexity: Complexity) -> None:
        if complexity == Complexity.ADVANCED:
            self.communication_style = CommunicationStyle.TECHNICAL
        elif complexity == Complexity.BASIC:
            self.communication_style = CommunicationStyle.CASUAL

    def set_preferred_depth(self, depth: PreferredDepth) -> None:
        self.preferred_depth = PreferredDepth(depth)

    def add_interests(self, topics: Iterable[str]) -> None:
        for topic in topics:
            if topic not in self.interests:
                self.interests.append(topic)

    # -----------------------------------------------------
    # Interaction memory
    # -----------------------------------------------------

    def remember(self, key: str, value: Any) -> None:
        """Store `value`; the oldest key is dropped once `MEMORY_LIMIT` is exceeded."""
        if key in self.interaction_memory:
            del self.interaction_memory[key]
        self.interaction_memory[key] = value

        while len(self.interaction_memory) > MEMORY_LIMIT:
            self.interaction_memory.popitem(last=False)

    def recall(self, key: str, default: Any = None) -> Any:
        return self.interaction_memory.get(key, default)

    def remember_interaction(self, turn: Turn, analysis: AnalysisResult) -> str:
        """Store a summary of a finished turn under a sequential key and return the key."""
        self._interaction_count += 1
        key = f"interaction_{self._interaction_count}"
        self.remember(key, {
            "user_message": turn.user_text,
            "response": turn.response_text,
            "topics": list(analysis.topics),
            "intent": analysis.intent.value,
            "timestamp": turn.timestamp.isoformat(),
        })
        return key

    def reset(self) -> None:
        """Drop all session state, keeping the object identity."""
        self.__init__()
