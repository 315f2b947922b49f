"""
Unit tests for the profile registry
"""

import json
import threading

import numpy as np
import pytest

from langprobe.core.exceptions.custom_exceptions import (
    DuplicateProfileError,
    ProfileError,
)
from langprobe.profiles.profile import LanguageProfile
from langprobe.profiles.registry import ProfileRegistry, build_registry


class TestBuildRegistry:
    """Test registry construction"""

    def test_lang_list_order(self, training_registry):
        """Test registration order defines the language index"""
        assert training_registry.lang_list == ("en", "fr", "ja")
        assert len(training_registry) == 3

    def test_probabilities(self, training_registry):
        """Test freq / n_words per language"""
        table = training_registry.word_lang_prob_map
        assert table["a"] == pytest.approx((3 / 9, 1 / 9, 0.0))
        assert table["d"] == pytest.approx((1 / 9, 3 / 9, 0.0))
        assert table["\u3042"] == pytest.approx((0.0, 0.0, 3 / 7))

    def test_vectors_match_language_count(self, training_registry):
        """Test every vector has one entry per language"""
        for vector in training_registry.word_lang_prob_map.values():
            assert len(vector) == 3

    def test_from_json_strings(self, json_profiles):
        """Test profiles parsed from JSON"""
        registry = build_registry([json.loads(p) for p in json_profiles])

        assert registry.lang_list == ("lang1", "lang2")
        assert registry.word_lang_prob_map["AB"] == pytest.approx((2 / 3, 2 / 5))
        assert registry.word_lang_prob_map["ABA"] == pytest.approx((0.0, 1 / 3))

    def test_single_profile(self):
        """Test a single profile is accepted"""
        registry = build_registry(
            LanguageProfile(name="xx", freq={"x": 2}, n_words=[2, 0, 0])
        )
        assert registry.lang_list == ("xx",)
        assert registry.word_lang_prob_map["x"] == (1.0,)

    def test_duplicate_language(self, training_profiles):
        """Test registering a language twice fails"""
        with pytest.raises(DuplicateProfileError) as exc_info:
            build_registry(training_profiles + [training_profiles[0]])
        assert exc_info.value.details["lang"] == "en"

    def test_missing_name(self):
        """Test a profile without name is rejected"""
        with pytest.raises(ProfileError):
            build_registry([{"freq": {"a": 1}, "n_words": [1, 0, 0]}])

    def test_invalid_profile(self):
        """Test malformed profile data is rejected"""
        with pytest.raises(ProfileError):
            build_registry([{"name": "xx", "freq": {"a": "many"}}])

    def test_zero_mass_bucket(self):
        """Test grams of an empty length bucket get probability 0"""
        registry = build_registry(
            {"name": "xx", "freq": {"a": 2, "ab": 1, "abcd": 1}, "n_words": [2, 0, 0]}
        )
        assert registry.word_lang_prob_map["a"] == (1.0,)
        assert registry.word_lang_prob_map["ab"] == (0.0,)
        assert "abcd" not in registry

    def test_empty_registry(self):
        """Test an empty profile list builds an empty registry"""
        registry = build_registry([])
        assert registry.lang_list == ()
        assert len(registry.word_lang_prob_map) == 0

    def test_profiles_pruned_matrix_untouched(self, training_registry):
        """Test pruning applies to stored profiles, not to the matrix"""
        en = training_registry.profiles[0]
        # threshold 2: only "a" (3) survives in the pruned copy
        assert en.freq == {"a": 3}
        assert training_registry.word_lang_prob_map["e"][0] == pytest.approx(1 / 9)

    def test_input_profiles_not_mutated(self, training_profiles):
        """Test registration leaves the caller's profiles intact"""
        build_registry(training_profiles)
        assert training_profiles[0]["freq"]["e"] == 1


class TestRegistryImmutability:
    """Test the registry cannot be modified"""

    def test_map_is_read_only(self, training_registry):
        """Test the probability map rejects assignment"""
        with pytest.raises(TypeError):
            training_registry.word_lang_prob_map["z"] = (1.0, 0.0, 0.0)

    def test_vectors_are_tuples(self, training_registry):
        """Test vectors cannot be modified in place"""
        with pytest.raises(TypeError):
            training_registry.word_lang_prob_map["a"][0] = 1.0


class TestRegistryMatrix:
    """Test the numpy matrix view"""

    def test_matrix_contents(self, training_registry):
        """Test rows match the probability map"""
        matrix, word_index = training_registry.matrix()

        assert matrix.shape == (len(training_registry.word_lang_prob_map), 3)
        assert matrix.dtype == np.float64
        for gram, vector in training_registry.word_lang_prob_map.items():
            np.testing.assert_allclose(matrix[word_index[gram]], vector)

    def test_matrix_read_only(self, training_registry):
        """Test the shared matrix cannot be written"""
        matrix, _ = training_registry.matrix()
        with pytest.raises(ValueError):
            matrix[0, 0] = 1.0

    def test_matrix_built_once(self, training_registry):
        """Test concurrent callers share a single matrix"""
        results = []

        def worker():
            results.append(training_registry.matrix()[0])

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(result is results[0] for result in results)

    def test_empty_matrix(self):
        """Test an empty registry yields an empty matrix"""
        matrix, word_index = ProfileRegistry([], {}).matrix()
        assert matrix.shape == (0, 0)
        assert len(word_index) == 0
