from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from .logger import logger

NULL_POLICY_ENV = "CASEKIT_NULL_POLICY"


class NullPolicy(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class EngineConfig:
    """
    Settings for a CaseEngine.

    ``null_policy`` decides what ``None`` means at the entry point: ``strict``
    raises InvalidInputType, ``lenient`` treats it as empty input. Every other
    non-string is rejected under both policies.
    """

    null_policy: NullPolicy = NullPolicy.STRICT

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(null_policy=_resolve_null_policy())


def _resolve_null_policy(default: NullPolicy = NullPolicy.STRICT) -> NullPolicy:
    raw = os.getenv(NULL_POLICY_ENV)
    if not raw:
        return default
    try:
        return NullPolicy(raw.strip().lower())
    except ValueError:
        logger.warning(
            "WARNING: invalid %s=%s, falling back to %s",
            NULL_POLICY_ENV,
            raw,
            default.value,
        )
        return default


__all__ = ["EngineConfig", "NullPolicy", "NULL_POLICY_ENV"]
