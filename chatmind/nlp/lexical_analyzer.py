"""Lexical feature extraction for incoming user messages.

Parsing rules:
- Tokenizes with NLTK's Treebank tokenizer (no model data required).
- Assigns part-of-speech tags through an injectable tagger (default `nltk.pos_tag`).
- Groups tokens into nouns (`NN*`), content verbs (`VB*` minus auxiliaries) and
  adjectives (`JJ*`).
- Joins consecutive proper-noun tokens (`NNP`, `NNPS`) into entity phrases.

Normalization steps:
- Word lists are lowercased and deduplicated in order of appearance.
- Entity phrases keep original casing; topics are their lowercased form.

Determinism:
- Deterministic for identical input and a deterministic tagger.

Failure handling:
- Empty, whitespace-only and symbol-only input yields empty features.
- Missing tagger model data (`LookupError`) or tagger errors are logged and
  degrade to empty features. Nothing is raised to the caller.
"""

import logging
import re
from typing import Callable, Iterable

import nltk
from nltk.tokenize import TreebankWordTokenizer

from chatmind.core.analysis_types import LexicalFeatures


logger = logging.getLogger(__name__)

Tagger = Callable[[list[str]], list[tuple[str, str]]]

# NLTK renamed the perceptron tagger resource in 3.9; both names are tried.
TAGGER_RESOURCES = (
    "averaged_perceptron_tagger_eng",
    "averaged_perceptron_tagger",
)

AUXILIARY_VERBS = {
    "be", "am", "is", "are", "was", "were", "been", "being",
    "do", "does", "did", "done",
    "have", "has", "had",
    "can", "could", "will", "would", "shall", "should", "may", "might", "must",
    "'s", "'re", "'m", "'ve", "'d", "'ll",
}

WORD_PATTERN = re.compile(r"\w")


def ensure_nltk_resources(download: bool = True) -> bool:
    """Make sure a POS tagger model is available.

    Args:
        download: Fetch the model through `nltk.download` when it is missing.

    Returns:
        `True` when a tagger resource is present after the call.
    """
    for resource in TAGGER_RESOURCES:
        try:
            nltk.data.find(f"taggers/{resource}")
            return True
        except LookupError:
            continue

    if not download:
        return False

    for resource in TAGGER_RESOURCES:
        if nltk.download(resource, quiet=True):
            return True

    logger.warning("No NLTK tagger model could be downloaded")
    return False


def _dedupe(words: Iterable[str]) -> tuple[str, ...]:
    seen = []
    for word in words:
        if word and word not in seen:
            seen.append(word)
    return tuple(seen)


class LexicalAnalyzer:
    """Turn raw text into a `LexicalFeatures` record."""

    def __init__(self, tagger: Tagger | None = None):
        self._tokenizer = TreebankWordTokenizer()
        self._tagger = tagger or nltk.pos_tag

    def tokenize(self, text: str) -> list[str]:
        if not text or not text.strip():
            return []
        return [t for t in self._tokenizer.tokenize(text) if WORD_PATTERN.search(t)]

    def analyze(self, text: str) -> LexicalFeatures:
        """
        Extract entities, word classes and topics from `text`.

        Edge cases:
        - No word characters at all -> empty features, tagger is not called.
        - Tagger failures -> empty features plus a warning log.
        """
        tokens = self.tokenize(text)
        if not tokens:
            return LexicalFeatures()

        try:
            tagged = self._tagger(tokens)
        except LookupError:
            logger.warning("POS tagger model missing; returning empty lexical features")
            return LexicalFeatures()
        except Exception:
            logger.exception("POS tagging failed for text=%r", text)
            return LexicalFeatures()

        nouns = []
        verbs = []
        adjectives = []
        entities = []
        proper_run: list[str] = []

        for token, tag in tagged:
            lowered = token.lower()

            if tag in ("NNP", "NNPS"):
                proper_run.append(token)
            else:
                if proper_run:
                    entities.append(" ".join(proper_run))
                    proper_run = []

            if tag.startswith("NN"):
                nouns.append(lowered)
            elif tag.startswith("VB"):
                if lowered not in AUXILIARY_VERBS:
                    verbs.append(lowered)
            elif tag.startswith("JJ"):
                adjectives.append(lowered)

        if proper_run:
            entities.append(" ".join(proper_run))

        entities = [e for e in _dedupe(entities) if len(e) > 1]

        return LexicalFeatures(
            entities=tuple(entities),
            nouns=_dedupe(nouns),
            verbs=_dedupe(verbs),
            adjectives=_dedupe(adjectives),
            topics=_dedupe(e.lower() for e in entities),
        )
