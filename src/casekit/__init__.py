from __future__ import annotations

from .config import EngineConfig, NullPolicy
from .engine import CaseEngine, convert, get_engine, tokenize
from .errors import CaseKitError, InvalidInputType, UnknownStyle
from .styles import (
    BUILTIN_STYLES,
    CaseStyle,
    available_styles,
    camel_acronym_transform,
    register_style,
    render,
    unregister_style,
)

__all__ = [
    "BUILTIN_STYLES",
    "CaseEngine",
    "CaseKitError",
    "CaseStyle",
    "EngineConfig",
    "InvalidInputType",
    "NullPolicy",
    "UnknownStyle",
    "available_styles",
    "camel_acronym_transform",
    "convert",
    "get_engine",
    "register_style",
    "render",
    "tokenize",
    "unregister_style",
]
