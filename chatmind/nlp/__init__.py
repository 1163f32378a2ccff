"""NLP utilities for message understanding.

Module scope:
- Tokenization and part-of-speech features (`lexical_analyzer`).
- Lexicon sentiment scoring (`sentiment`).
- Intent rule table (`intent_rules`) and rule-cascade classifier (`intent_classifier`).

Determinism profile:
- Deterministic rule logic over a deterministic tagger and fixed lexicon.
"""
