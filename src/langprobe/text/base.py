"""
Base classes for the text preparation phase.

Raw text handed to a detector goes through a chain of preprocessors before
any n-gram is extracted. Each preprocessor is a small, single-purpose
transformation that implements BasePreprocessor.

Example:
    >>> from langprobe.text.cleaners import SeparatorCollapser
    >>> collapser = SeparatorCollapser()
    >>> collapser("This  is   a   test.")
    'This is a test.'
"""

from abc import ABC, abstractmethod


class BasePreprocessor(ABC):
    """
    Abstract base class for all text preprocessors.

    Subclasses must implement the process() method to define specific
    preprocessing logic. The __call__ method provides a convenient
    interface for using preprocessors as callable objects.
    """

    @abstractmethod
    def process(self, content: str) -> str:
        """
        Process raw content and return the transformed version.

        Args:
            content (str): Raw text content to be processed

        Returns:
            str: Transformed text content
        """
        pass

    def __call__(self, content: str) -> str:
        """
        Convenience method to use preprocessor as a callable.

        Args:
            content (str): Raw text content to be processed

        Returns:
            str: Processed text content
        """
        return self.process(content)
