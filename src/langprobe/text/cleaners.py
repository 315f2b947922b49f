"""
Text cleaning preprocessors applied to every appended text.

Before n-grams are extracted the raw input is cleaned by a fixed chain:

    1. UrlEmailStripper: URLs and e-mail addresses carry no language signal
       and are replaced by a single separator each
    2. VietnameseComposer: base letter + combining mark => precomposed letter
    3. Truncator: keep at most max_text_length characters
    4. SeparatorCollapser: runs of spaces become one space, ends are trimmed

The order matters: composition has to see the raw combining marks, and
truncation happens on the composed text before collapsing.

Example:
    >>> preprocessor = TextPreprocessor(max_text_length=10000)
    >>> preprocessor.process("Visit https://example.com or contact me@example.com")
    'Visit or contact'
"""

import re
from typing import List, Optional

from langprobe.core.config.settings import settings
from langprobe.core.logging.logger import get_logger
from langprobe.text.base import BasePreprocessor
from langprobe.text.normalizer import SEPARATOR, normalize_vi

logger = get_logger(__name__)

URL_RE = re.compile(r"https?://[-_.?&~;+=/#0-9A-Za-z]{1,2076}")
MAIL_RE = re.compile(r"[-_.0-9A-Za-z]{1,64}@[-_0-9A-Za-z]{1,255}[-_.0-9A-Za-z]{1,255}")
SEPARATOR_RUN_RE = re.compile(SEPARATOR + "{2,}")


class UrlEmailStripper(BasePreprocessor):
    """Replaces URLs and e-mail addresses with a single separator each."""

    def process(self, content: str) -> str:
        content = URL_RE.sub(SEPARATOR, content)
        return MAIL_RE.sub(SEPARATOR, content)


class VietnameseComposer(BasePreprocessor):
    """Composes Vietnamese base letters with a following combining mark."""

    def process(self, content: str) -> str:
        return normalize_vi(content)


class Truncator(BasePreprocessor):
    """Keeps a prefix of at most max_text_length characters."""

    def __init__(self, max_text_length: int):
        self.max_text_length = max_text_length

    @property
    def max_text_length(self) -> int:
        return self._max_text_length

    @max_text_length.setter
    def max_text_length(self, value: int) -> None:
        # negative limits keep nothing
        self._max_text_length = max(value, 0)

    def process(self, content: str) -> str:
        if len(content) > self.max_text_length:
            logger.warning(
                "Input truncated",
                length=len(content),
                max_text_length=self.max_text_length,
            )
            return content[: self.max_text_length]
        return content


class SeparatorCollapser(BasePreprocessor):
    """Collapses separator runs and trims surrounding whitespace."""

    def process(self, content: str) -> str:
        return SEPARATOR_RUN_RE.sub(SEPARATOR, content).strip()


class TextPreprocessor(BasePreprocessor):
    """
    The full cleaning chain used by Detector.append().

    Args:
        max_text_length: Characters kept per processed text
            (defaults to settings.MAX_TEXT_LENGTH)
    """

    def __init__(self, max_text_length: Optional[int] = None):
        self.truncator = Truncator(
            max_text_length if max_text_length is not None else settings.MAX_TEXT_LENGTH
        )
        self.pipeline: List[BasePreprocessor] = [
            UrlEmailStripper(),
            VietnameseComposer(),
            self.truncator,
            SeparatorCollapser(),
        ]

    @property
    def max_text_length(self) -> int:
        return self.truncator.max_text_length

    @max_text_length.setter
    def max_text_length(self, value: int) -> None:
        self.truncator.max_text_length = value

    def process(self, content: str) -> str:
        for processor in self.pipeline:
            content = processor(content)
        return content
