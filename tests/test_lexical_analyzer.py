"""
Tests for the lexical analyzer.
"""
import logging

import nltk
import pytest

from chatmind.core.analysis_types import LexicalFeatures
from chatmind.nlp.lexical_analyzer import LexicalAnalyzer, ensure_nltk_resources


def _tagger_available():
    try:
        nltk.pos_tag(["hello"])
        return True
    except LookupError:
        return False


HAS_TAGGER_MODEL = _tagger_available()


class TestFeatureExtraction:

    def test_proper_noun_runs_become_entities(self, analyzer):
        features = analyzer.analyze("Aluko Oluwatobi built Tobi")

        assert features.entities == ("Aluko Oluwatobi", "Tobi")
        assert features.topics == ("aluko oluwatobi", "tobi")

    def test_word_classes_are_lowercased(self, analyzer):
        features = analyzer.analyze("Python is great")

        assert features.nouns == ("python",)
        assert features.adjectives == ("great",)

    def test_auxiliary_verbs_are_dropped(self, analyzer):
        features = analyzer.analyze("it is built and it was made")

        assert features.verbs == ("built", "made")

    def test_words_are_deduplicated_in_order(self, analyzer):
        features = analyzer.analyze("code tests code docs tests")

        assert features.nouns == ("code", "tests", "docs")

    def test_single_character_entities_are_dropped(self, analyzer):
        features = analyzer.analyze("plan B works")

        assert features.entities == ()

    def test_deterministic(self, analyzer):
        text = "Tell me about React and Vue"
        assert analyzer.analyze(text) == analyzer.analyze(text)


class TestEdgeCases:

    @pytest.mark.parametrize("text", ["", "   ", "?!...", "\n\t"])
    def test_empty_like_input_skips_tagger(self, text):
        calls = []

        def recording_tagger(tokens):
            calls.append(tokens)
            return []

        features = LexicalAnalyzer(tagger=recording_tagger).analyze(text)

        assert features == LexicalFeatures()
        assert calls == []

    def test_missing_model_data_degrades_to_empty(self, caplog):
        def missing_model(tokens):
            raise LookupError("averaged_perceptron_tagger_eng not found")

        with caplog.at_level(logging.WARNING, logger="chatmind.nlp.lexical_analyzer"):
            features = LexicalAnalyzer(tagger=missing_model).analyze("hello there")

        assert features == LexicalFeatures()
        assert "tagger model missing" in caplog.text

    def test_tagger_crash_degrades_to_empty(self):
        def broken(tokens):
            raise RuntimeError("boom")

        assert LexicalAnalyzer(tagger=broken).analyze("hello there") == LexicalFeatures()

    def test_tokenize_drops_punctuation(self, analyzer):
        assert analyzer.tokenize("Hi, you!") == ["Hi", "you"]


@pytest.mark.skipif(not HAS_TAGGER_MODEL, reason="NLTK tagger model not installed")
class TestNltkTagger:

    def test_default_tagger_finds_nouns(self):
        features = LexicalAnalyzer().analyze("The quick brown fox jumps over the lazy dog")

        assert "fox" in features.nouns
        assert "dog" in features.nouns


class TestResourceBootstrap:

    def test_present_model_needs_no_download(self, monkeypatch):
        downloads = []
        monkeypatch.setattr(nltk.data, "find", lambda path: path)
        monkeypatch.setattr(nltk, "download", lambda *a, **k: downloads.append(a) or True)

        assert ensure_nltk_resources() is True
        assert downloads == []

    def test_missing_model_without_download(self, monkeypatch):
        def not_found(path):
            raise LookupError(path)

        monkeypatch.setattr(nltk.data, "find", not_found)

        assert ensure_nltk_resources(download=False) is False

    def test_failed_download_reports_false(self, monkeypatch):
        def not_found(path):
            raise LookupError(path)

        monkeypatch.setattr(nltk.data, "find", not_found)
        monkeypatch.setattr(nltk, "download", lambda *a, **k: False)

        assert ensure_nltk_resources(download=True) is False
