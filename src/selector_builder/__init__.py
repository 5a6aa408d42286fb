"""Selector builder: fluent, immutable construction of CSS selector strings."""
from __future__ import annotations

__version__ = "0.1.0"

from selector_builder.builder import (
    CombinedSelector,
    SelectorBuilder,
    Stringifiable,
    css_selector_builder,
    stringify,
)
from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateSelectorPartError,
    ErrorKind,
    InvalidCombinatorError,
    ParseError,
    SelectorError,
    SelectorOrderError,
)
from selector_builder.model import Combinator, Gate, SelectorDescriptor
from selector_builder.records import Rectangle, from_json, to_json

__all__ = [
    "__version__",
    # Builder
    "CombinedSelector",
    "SelectorBuilder",
    "Stringifiable",
    "css_selector_builder",
    "stringify",
    # Model
    "Combinator",
    "Gate",
    "SelectorDescriptor",
    # Config
    "BuilderConfig",
    # Errors
    "DuplicateSelectorPartError",
    "ErrorKind",
    "InvalidCombinatorError",
    "ParseError",
    "SelectorError",
    "SelectorOrderError",
    # Records
    "Rectangle",
    "from_json",
    "to_json",
]
