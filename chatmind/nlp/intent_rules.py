"""Static intent rule table.

Each `IntentRule` bundles:
- `triggers`: regular expressions searched in the lowercased message.
- `examples`: short phrases used by the word-overlap fallback when no trigger fires.
- `responses`: canned reply templates (used by the simple social intents).
- `follow_ups`: optional prompts a handler may append.

Ordering:
- `INTENT_RULES` is evaluated top to bottom and the first matching rule wins, so
  the order below is part of the behavior.
- `Intent.GENERAL` has no rule; it is the fallback label.
"""

import re
from dataclasses import dataclass

from chatmind.core.analysis_types import Intent


@dataclass(frozen=True)
class IntentRule:
    intent: Intent
    triggers: tuple[re.Pattern, ...]
    examples: tuple[str, ...] = ()
    responses: tuple[str, ...] = ()
    follow_ups: tuple[str, ...] = ()

    def matches(self, normalized_text: str) -> bool:
        return any(p.search(normalized_text) for p in self.triggers)


def _compile(*patterns: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p) for p in patterns)


GREETING_RULE = IntentRule(
    intent=Intent.GREETING,
    triggers=_compile(
        r"^(hi|hello|hey|howdy|greetings|yo|good (morning|afternoon|evening))\b",
        r"^what'?s up\b",
    ),
    examples=(
        "hi", "hello", "hey", "howdy", "greetings", "good morning",
        "good afternoon", "good evening", "what's up", "yo",
    ),
    responses=(
        "Hello! I'm Tobi AI, your intelligent assistant. How can I help you today?",
        "Hi there! I'm here to assist you with any questions about technology, programming, or AI. What would you like to explore?",
        "Greetings! I'm Tobi, an AI assistant created by Aluko Oluwatobi. What can I help you discover today?",
        "Welcome! I'm ready to help you with technical questions, explanations, or just have an engaging conversation. What's on your mind?",
    ),
    follow_ups=(
        "Feel free to ask me about AI, programming, web development, or any technical topic!",
        "I can help explain complex concepts, solve problems, or just have an interesting conversation.",
    ),
)

FAREWELL_RULE = IntentRule(
    intent=Intent.FAREWELL,
    triggers=_compile(
        r"^(bye|goodbye|see you|farewell|take care|cya|good night|goodnight)\b",
        r"\b(talk to you later|catch you later|until next time)\b",
    ),
    examples=(
        "bye", "see you later", "goodbye", "farewell", "take care",
        "cya", "catch you later", "until next time", "talk to you later",
    ),
    responses=(
        "Goodbye! Feel free to return anytime you have questions. I'm always here to help!",
        "Take care! I enjoyed our conversation. Come back whenever you need assistance.",
        "See you later! Remember, I'm here 24/7 for any technical questions or discussions.",
        "Farewell! It was great helping you today. Don't hesitate to reach out again!",
    ),
)

GRATITUDE_RULE = IntentRule(
    intent=Intent.GRATITUDE,
    triggers=_compile(r"\b(thank|thanks|thx|appreciate|grateful)"),
    examples=(
        "thank you", "thanks", "appreciate it", "thank you so much",
        "thx", "much appreciated", "grateful", "thanks a lot",
    ),
    responses=(
        "You're very welcome! I'm glad I could help. Is there anything else you'd like to explore?",
        "My pleasure! That's exactly what I'm here for. Feel free to ask me anything else.",
        "Happy to help! I love sharing knowledge and helping people learn. What else can I assist with?",
        "You're welcome! I enjoy our conversations. Is there another topic you'd like to discuss?",
    ),
)

DEVELOPER_INFO_RULE = IntentRule(
    intent=Intent.DEVELOPER_INFO,
    triggers=_compile(
        r"\bwho (made|created|developed|built|designed)\b",
        r"\byour (developer|creator|author|maker)\b",
        r"\bwho (is|was) (aluko|oluwatobi|tobi)\b",
        r"\bdeveloper info",
    ),
    examples=(
        "who is aluko", "tell me about oluwatobi", "who is tobi",
        "developer information", "creator", "who made you",
        "who created you", "who developed you", "your developer",
    ),
)

CAPABILITIES_RULE = IntentRule(
    intent=Intent.CAPABILITIES,
    triggers=_compile(
        r"\bwhat can you\b",
        r"\byour (abilities|capabilities|skills|functions)\b",
        r"\bwhat are you capable of\b",
        r"\bhelp me with\b",
    ),
    examples=(
        "what can you do", "help me with", "your abilities", "what are you capable of",
        "how can you help", "your skills", "what do you know", "your functions",
    ),
    follow_ups=(
        "I specialize in AI, programming, web development, and computer science topics.",
        "Feel free to test my knowledge with any technical question!",
    ),
)

EXPLANATION_RULE = IntentRule(
    intent=Intent.EXPLANATION_REQUEST,
    triggers=_compile(r"\b(explain|describe|tell me about|what is|what are|what's|how does|how do)\b"),
    examples=(
        "what is ai", "explain artificial intelligence", "how does ai work",
        "artificial intelligence definition", "ai meaning", "define ai",
        "what is nlp", "natural language processing", "nlp definition",
        "what are transformers", "explain transformer models", "transformer architecture",
        "attention mechanism",
    ),
)

HELP_RULE = IntentRule(
    intent=Intent.HELP_REQUEST,
    triggers=_compile(r"\b(help|assist|support|guide|show me)\b"),
    examples=("i need help", "can you assist me", "show me how", "guide me"),
)

COMPARISON_RULE = IntentRule(
    intent=Intent.COMPARISON_REQUEST,
    triggers=_compile(r"\b(compare|comparison|difference|differences|better|versus|vs\.?|which is)\b"),
    examples=("compare", "what is the difference", "which is better", "pros and cons"),
)

LEARNING_RULE = IntentRule(
    intent=Intent.LEARNING_REQUEST,
    triggers=_compile(r"\b(learn|learning|teach|understand|study)\b"),
    examples=(
        "programming languages", "best language to learn", "coding tips",
        "how to code", "programming advice", "coding best practices",
    ),
    follow_ups=(
        "What type of programming interests you most - web development, mobile apps, AI, or something else?",
        "I can provide specific guidance based on your programming goals and current experience level.",
    ),
)

PROBLEM_SOLVING_RULE = IntentRule(
    intent=Intent.PROBLEM_SOLVING,
    triggers=_compile(r"\b(problem|issue|error|bug|fix|solve|debug|broken|crash)"),
    examples=("my code is broken", "it does not work", "getting an exception"),
)

INFORMATION_SEEKING_RULE = IntentRule(
    intent=Intent.INFORMATION_SEEKING,
    triggers=_compile(r"^(what|how|why|when|where|who|can you|could you|would you)\b"),
    examples=("i want to know", "tell me something", "information about"),
)

TECHNICAL_QUESTION_RULE = IntentRule(
    intent=Intent.TECHNICAL_QUESTION,
    triggers=_compile(
        r"\b(ai|artificial intelligence|machine learning|programming|code|coding|"
        r"development|algorithms?|data|software)\b",
    ),
    examples=(
        "machine learning", "ml", "supervised learning", "unsupervised learning",
        "reinforcement learning", "neural networks", "deep learning", "algorithms",
        "software development", "web development", "bert", "gpt",
    ),
)

QUESTION_RULE = IntentRule(
    intent=Intent.QUESTION,
    triggers=_compile(r"\?", r"^(is|are|do|does|did|can|will|should|could|would)\b"),
)


INTENT_RULES: tuple[IntentRule, ...] = (
    GREETING_RULE,
    FAREWELL_RULE,
    GRATITUDE_RULE,
    DEVELOPER_INFO_RULE,
    CAPABILITIES_RULE,
    EXPLANATION_RULE,
    HELP_RULE,
    COMPARISON_RULE,
    LEARNING_RULE,
    PROBLEM_SOLVING_RULE,
    INFORMATION_SEEKING_RULE,
    TECHNICAL_QUESTION_RULE,
    QUESTION_RULE,
)


def get_rule(intent: Intent) -> IntentRule | None:
    """Return the rule for `intent`, or `None` for the fallback label."""
    for rule in INTENT_RULES:
        if rule.intent == intent:
            return rule
    return None
