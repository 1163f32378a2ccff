"""
Shared fixtures for the ChatMind test suite.

The POS tagger is replaced by a small lookup tagger and the sentiment lexicon by a
fixed mapping so tests never need NLTK model data or network access.
"""
import random

import pytest

from chatmind.core.engine import ChatSession
from chatmind.memory.conversation_context import ConversationContext
from chatmind.nlp.intent_classifier import IntentClassifier
from chatmind.nlp.lexical_analyzer import LexicalAnalyzer
from chatmind.nlp.sentiment import SentimentScorer
from chatmind.prompting.response_generator import ResponseGenerator


STUB_TAGS = {
    "a": "DT", "an": "DT", "the": "DT", "this": "DT", "that": "DT",
    "and": "CC", "or": "CC", "but": "CC", "vs": "CC", "versus": "CC",
    "i": "PRP", "you": "PRP", "me": "PRP", "it": "PRP", "my": "PRP$", "your": "PRP$",
    "to": "TO", "about": "IN", "of": "IN", "with": "IN", "in": "IN", "on": "IN",
    "what": "WP", "who": "WP", "how": "WRB", "why": "WRB", "which": "WDT",
    "is": "VBZ", "are": "VBP", "was": "VBD", "be": "VB",
    "do": "VBP", "does": "VBZ", "did": "VBD", "can": "MD", "will": "MD",
    "built": "VBD", "created": "VBD", "made": "VBD", "explain": "VB", "tell": "VB",
    "learn": "VB", "want": "VBP", "help": "VB", "work": "VB", "works": "VBZ",
    "compare": "VB", "fix": "VB", "rocks": "VBZ",
    "great": "JJ", "good": "JJ", "bad": "JJ", "fast": "JJ", "new": "JJ",
    "hello": "UH", "hi": "UH", "hey": "UH", "thanks": "NNS", "please": "UH",
}

# Stem -> polarity. Keys are Porter stems.
STUB_LEXICON = {
    "good": 3.0,
    "great": 3.0,
    "love": 3.0,
    "bad": -3.0,
    "hate": -3.0,
}


def stub_tag(tokens):
    """Tag known words from `STUB_TAGS`, capitalized words as NNP, the rest as NN."""
    tagged = []
    for token in tokens:
        lowered = token.lower()
        if lowered in STUB_TAGS:
            tag = STUB_TAGS[lowered]
        elif token[:1].isupper():
            tag = "NNP"
        elif token.isdigit():
            tag = "CD"
        else:
            tag = "NN"
        tagged.append((token, tag))
    return tagged


@pytest.fixture
def stub_tagger():
    return stub_tag


@pytest.fixture
def analyzer():
    return LexicalAnalyzer(tagger=stub_tag)


@pytest.fixture
def scorer():
    return SentimentScorer(lexicon=STUB_LEXICON)


@pytest.fixture
def classifier(scorer):
    return IntentClassifier(sentiment_scorer=scorer)


@pytest.fixture
def generator():
    return ResponseGenerator(rng=random.Random(7))


@pytest.fixture
def context():
    return ConversationContext()


@pytest.fixture
def classify(analyzer, classifier):
    """Run analyzer + classifier on text against an optional context."""
    def _classify(text, context=None):
        return classifier.classify(text, analyzer.analyze(text), context)
    return _classify


@pytest.fixture
def make_session(scorer):
    """Factory for fully local sessions with deterministic components."""
    def _make(**kwargs):
        kwargs.setdefault("analyzer", LexicalAnalyzer(tagger=stub_tag))
        kwargs.setdefault("classifier", IntentClassifier(sentiment_scorer=scorer))
        kwargs.setdefault("generator", ResponseGenerator(rng=random.Random(7)))
        return ChatSession(**kwargs)
    return _make


@pytest.fixture
def session(make_session):
    return make_session()
