"""
Accuracy tests against the full bundled profile corpus
"""

from collections import Counter

import pytest

from langprobe.detector import create_detector
from langprobe.profiles.loader import load_profiles
from langprobe.profiles.registry import build_registry

SEEDS = range(5)

SAMPLES = [
    ("de", "Hallo, Welt, wie geht es Dir? Die Kinder spielen heute im Garten hinter dem Haus."),
    (
        "en",
        "The quick brown fox jumps over the lazy dog. Language detection works "
        "surprisingly well once a sentence has a handful of ordinary words in it.",
    ),
    ("fr", "Le renard brun saute par-dessus le chien paresseux. La vie est belle à Paris."),
    ("es", "El rápido zorro marrón salta sobre el perro perezoso. Me gusta mucho viajar."),
    ("it", "La volpe veloce salta sopra il cane pigro. Mi piace molto la cucina italiana."),
    (
        "nl",
        "De snelle bruine vos springt over de luie hond. Het weer is vandaag erg mooi. "
        "Wij gaan morgen samen naar de markt in het centrum van de stad.",
    ),
    ("ru", "Съешь же ещё этих мягких французских булок, да выпей чаю."),
    ("ja", "これは日本語の文章です。今日はとても良い天気ですね。"),
    (
        "vi",
        "Tiếng Việt là ngôn ngữ của người Việt và là ngôn ngữ chính thức tại Việt Nam.",
    ),
]


def majority(registry, text: str, backend: str) -> Counter:
    votes = Counter()
    for seed in SEEDS:
        with create_detector(registry, backend=backend, seed=seed) as detector:
            detector.append(text)
            votes[detector.detect()] += 1
    return votes


class TestCorpusAccuracy:
    """Test detection over all bundled languages"""

    @pytest.mark.parametrize("lang,text", SAMPLES, ids=[lang for lang, _ in SAMPLES])
    def test_sentences(self, corpus_registry, lang, text):
        """Test the expected language wins most repeated runs"""
        votes = majority(corpus_registry, text, "numpy")
        assert votes[lang] > len(SEEDS) // 2, votes

    def test_reference_backend(self, corpus_registry):
        """Test the reference backend agrees on a long sentence"""
        lang, text = SAMPLES[1]
        votes = majority(corpus_registry, text, "reference")
        assert votes[lang] > len(SEEDS) // 2, votes

    def test_short_text(self, corpus_registry):
        """Test a two-word greeting is mostly recognized"""
        votes = majority(corpus_registry, "Hello, World", "numpy")
        assert votes.most_common(1)[0][0] == "en", votes

    def test_restricted_languages(self):
        """Test a registry restricted to three languages"""
        registry = build_registry(load_profiles(languages=["de", "en", "fr"]))
        assert registry.lang_list == ("de", "en", "fr")
        votes = majority(registry, "Hallo, Welt, wie geht es Dir?", "numpy")
        assert votes["de"] == len(SEEDS), votes
