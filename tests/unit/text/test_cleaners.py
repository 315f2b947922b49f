"""
Unit tests for the text preprocessing chain
"""

import pytest

from langprobe.text.base import BasePreprocessor
from langprobe.text.cleaners import (
    SeparatorCollapser,
    TextPreprocessor,
    Truncator,
    UrlEmailStripper,
    VietnameseComposer,
)


class TestPreprocessors:
    """Test the individual preprocessors"""

    def test_all_are_preprocessors(self):
        """Test every step implements the common interface"""
        for processor in (
            UrlEmailStripper(),
            VietnameseComposer(),
            Truncator(10),
            SeparatorCollapser(),
        ):
            assert isinstance(processor, BasePreprocessor)

    def test_url_and_email_stripping(self):
        """Test URLs and addresses become a single separator"""
        stripper = UrlEmailStripper()
        result = stripper("Visit https://example.com or contact me@example.com")
        assert result == "Visit   or contact  "

    def test_url_with_query(self):
        """Test query strings are part of the URL"""
        stripper = UrlEmailStripper()
        assert stripper("see http://a.org/x?y=1&z=2#top now") == "see   now"

    def test_separator_collapse(self):
        """Test runs of spaces collapse and ends are trimmed"""
        collapser = SeparatorCollapser()
        assert collapser("This  is   a   test.") == "This is a test."
        assert collapser("   padded   ") == "padded"

    def test_truncator(self):
        """Test only the prefix is kept"""
        truncator = Truncator(3)
        assert truncator("abcdef") == "abc"
        assert truncator("ab") == "ab"

    def test_truncator_negative_length(self):
        """Test a negative limit keeps nothing"""
        truncator = Truncator(-2)
        assert truncator.max_text_length == 0
        assert truncator("abcdef") == ""

    def test_base_is_abstract(self):
        """Test the base class cannot be instantiated"""
        with pytest.raises(TypeError):
            BasePreprocessor()


class TestTextPreprocessor:
    """Test the full cleaning chain"""

    def test_url_email_example(self):
        """Test URL and e-mail removal with whitespace collapse"""
        preprocessor = TextPreprocessor()
        text = "Visit https://example.com or contact me@example.com"
        assert preprocessor.process(text) == "Visit or contact"

    def test_vietnamese_composition(self):
        """Test combining marks are composed"""
        assert TextPreprocessor()("A\u0300") == "\u00C0"

    def test_truncation(self):
        """Test long input keeps exactly max_text_length characters"""
        preprocessor = TextPreprocessor(max_text_length=100)
        assert preprocessor("a" * 110) == "a" * 100

    def test_truncation_before_collapse(self):
        """Test truncation applies to the composed text before collapsing"""
        preprocessor = TextPreprocessor(max_text_length=6)
        assert preprocessor("ab    cdef") == "ab"

    def test_default_length_from_settings(self):
        """Test the default limit comes from settings"""
        assert TextPreprocessor().max_text_length == 10000

    def test_length_override(self):
        """Test the limit can be changed after construction"""
        preprocessor = TextPreprocessor(max_text_length=100)
        preprocessor.max_text_length = 2
        assert preprocessor("abc") == "ab"
