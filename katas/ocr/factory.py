"""
OCR Engine Factory

Factory for creating OCR engine instances.
"""

from typing import Dict, List, Type

from .base import OCREngine
from .glyph_engine import GlyphTableEngine


# Registry of available engines
_ENGINE_REGISTRY: Dict[str, Type[OCREngine]] = {
    "glyph": GlyphTableEngine,
}


def create_engine(engine_type: str = "glyph", **config) -> OCREngine:
    """
    Create an OCR engine by type.

    Args:
        engine_type: Engine type identifier. Available types:
            - "glyph" (default): exact 3x3 glyph table lookup
        **config: Engine-specific configuration options:
            For "glyph":
                - account_digits: Number of digits per account

    Returns:
        Configured OCREngine instance

    Raises:
        ValueError: If engine_type is not recognized

    Example:
        engine = create_engine("glyph", account_digits=9)
        result = engine.process(text)
        account = result.value
    """
    if engine_type not in _ENGINE_REGISTRY:
        available = ", ".join(_ENGINE_REGISTRY.keys())
        raise ValueError(f"Unknown engine type: {engine_type}. Available: {available}")

    engine = _ENGINE_REGISTRY[engine_type]()

    if config:
        engine.configure(**config)

    return engine


def register_engine(name: str, engine_class: type) -> None:
    """
    Register a custom OCR engine type.

    Args:
        name: Engine type identifier
        engine_class: OCREngine subclass

    Example:
        from katas.ocr import register_engine, OCREngine

        class FuzzyEngine(OCREngine):
            ...

        register_engine("fuzzy", FuzzyEngine)
    """
    if not issubclass(engine_class, OCREngine):
        raise TypeError(f"{engine_class} must be a subclass of OCREngine")
    _ENGINE_REGISTRY[name] = engine_class


def available_engines() -> List[str]:
    """
    List available engine types.

    Returns:
        List of registered engine type names
    """
    return list(_ENGINE_REGISTRY.keys())
