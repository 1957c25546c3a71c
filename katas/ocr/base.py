"""
OCR Engine Base Interface

Abstract base class defining the OCR engine contract.
"""

from abc import ABC, abstractmethod

from .result import AccountResult


class OCREngine(ABC):
    """
    Abstract base class for OCR engines.

    All OCR implementations must inherit from this class and implement
    the process() method to read an account number from scanned text.
    """

    @abstractmethod
    def process(self, text: str) -> AccountResult:
        """
        Read an account number from three rows of glyph text.

        Args:
            text: Three '\\n' separated rows of pipes, underscores and spaces

        Returns:
            AccountResult containing:
            - digits: str - recognized digits with '?' for unknown glyphs
            - cell_results: List[DigitResult] - per-digit details
            - uncertain_count: int - digits that could not be recognized
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Engine identifier.

        Returns:
            String name identifying this engine type (e.g., "glyph")
        """
        pass

    def configure(self, **kwargs) -> None:
        """
        Configure engine parameters.

        Override in subclasses to support runtime configuration.
        Default implementation does nothing.

        Args:
            **kwargs: Engine-specific configuration options
        """
        pass
