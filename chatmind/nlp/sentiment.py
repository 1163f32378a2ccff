"""Lexicon-based sentiment scoring over Porter stems.

Scoring model:
- Text is lowercased, split on non-word characters and reduced to Porter stems.
- The AFINN word list is stemmed the same way so inflected forms still match.
- Score = sum of lexicon values / number of tokens.

Thresholds:
- `score > POSITIVE_THRESHOLD` -> positive
- `score < NEGATIVE_THRESHOLD` -> negative
- otherwise neutral

Determinism:
- Fully deterministic for a fixed lexicon.

Edge cases:
- An empty token list scores `0.0` (neutral).
"""

from typing import Mapping, Sequence

from afinn import Afinn
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

from chatmind.core.analysis_types import Sentiment


POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1

AFINN_WORD_FILE = "AFINN-en-165.txt"


def load_stemmed_afinn(stemmer: PorterStemmer) -> dict[str, float]:
    """Read the packaged AFINN list and key it by stem.

    When several words share a stem the first one in file order wins.
    """
    afinn = Afinn(language="en")
    words = afinn.read_word_file(afinn.full_filename(AFINN_WORD_FILE))

    lexicon: dict[str, float] = {}
    for word, value in words.items():
        if " " in word:
            continue
        lexicon.setdefault(stemmer.stem(word), float(value))
    return lexicon


class SentimentScorer:
    """Score stemmed tokens against a polarity lexicon."""

    def __init__(self, lexicon: Mapping[str, float] | None = None):
        self._stemmer = PorterStemmer()
        self._tokenizer = RegexpTokenizer(r"\w+")
        self._lexicon = dict(lexicon) if lexicon is not None else load_stemmed_afinn(self._stemmer)

    def tokenize(self, text: str) -> list[str]:
        """Lowercase, split and stem `text`."""
        if not text:
            return []
        return [self._stemmer.stem(t) for t in self._tokenizer.tokenize(text.lower())]

    def score(self, stems: Sequence[str]) -> float:
        if not stems:
            return 0.0
        total = sum(self._lexicon.get(stem, 0.0) for stem in stems)
        return total / len(stems)

    @staticmethod
    def categorize(value: float) -> Sentiment:
        if value > POSITIVE_THRESHOLD:
            return Sentiment.POSITIVE
        if value < NEGATIVE_THRESHOLD:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def analyze(self, text: str) -> tuple[float, Sentiment]:
        value = self.score(self.tokenize(text))
        return value, self.categorize(value)
