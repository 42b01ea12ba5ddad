from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Sequence

from .logger import logger

WordTransform = Callable[[str, int], str]

_STYLE_NAME = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class CaseStyle:
    """
    Output naming convention: the string placed between words and the casing
    applied to each token. ``word_transform`` receives the token and its
    zero-based position in the sequence.
    """

    joiner: str
    word_transform: WordTransform
    description: str = ""


def lower_transform(token: str, position: int) -> str:
    return token.lower()


def upper_first(token: str) -> str:
    return token[:1].upper() + token[1:]


def camel_transform(token: str, position: int) -> str:
    word = token.lower()
    if position == 0:
        return word
    return upper_first(word)


def camel_acronym_transform(token: str, position: int) -> str:
    """camelCase variant that keeps all-uppercase tokens after the first word.

    ``myID`` renders as ``myID`` instead of ``myId``. Not registered by default.
    """
    if position > 0 and token.isupper():
        return token
    return camel_transform(token, position)


def render(tokens: Sequence[str], style: CaseStyle) -> str:
    return style.joiner.join(
        style.word_transform(token, position) for position, token in enumerate(tokens)
    )


CAMEL = CaseStyle("", camel_transform, "lowercase first word, capitalized rest")
KEBAB = CaseStyle("-", lower_transform, "lowercase, hyphen-joined")
DOT = CaseStyle(".", lower_transform, "lowercase, dot-joined")

BUILTIN_STYLES: Mapping[str, CaseStyle] = MappingProxyType(
    {"camel": CAMEL, "kebab": KEBAB, "dot": DOT}
)

_registry: dict[str, CaseStyle] = dict(BUILTIN_STYLES)
_listeners: list[Callable[[], None]] = []


def _validate(name: object, descriptor: object) -> None:
    if not isinstance(name, str) or not _STYLE_NAME.fullmatch(name):
        logger.error_raise(
            f"Style name must be a non-empty string of letters, digits, '_' or '-', got {name!r}",
            exc=ValueError,
        )
    if not isinstance(descriptor, CaseStyle):
        logger.error_raise(
            f"Style {name!r} must be a CaseStyle, got {type(descriptor).__name__}",
            exc=TypeError,
        )


def register_style(name: str, descriptor: CaseStyle, *, replace: bool = False) -> None:
    """
    Add a named style to the process-wide registry.

    Engines built earlier keep the table they were constructed with; the
    default engine behind the module-level ``convert`` is rebuilt.
    """
    _validate(name, descriptor)
    if name in _registry and not replace:
        logger.error_raise(
            f"Style {name!r} is already registered; pass replace=True to override",
            exc=ValueError,
        )
    _registry[name] = descriptor
    logger.debug("Registered case style %r (joiner=%r)", name, descriptor.joiner)
    for listener in _listeners:
        listener()


def unregister_style(name: str) -> None:
    if name in BUILTIN_STYLES:
        logger.error_raise(f"Built-in style {name!r} cannot be removed", exc=ValueError)
    if _registry.pop(name, None) is None:
        logger.error_raise(f"Style {name!r} is not registered", exc=KeyError)
    logger.debug("Unregistered case style %r", name)
    for listener in _listeners:
        listener()


def on_registry_change(callback: Callable[[], None]) -> None:
    _listeners.append(callback)


def registry_snapshot() -> Mapping[str, CaseStyle]:
    return MappingProxyType(dict(_registry))


def available_styles() -> list[str]:
    return sorted(_registry)


def iter_styles() -> Iterable[tuple[str, CaseStyle]]:
    return sorted(_registry.items())


__all__ = [
    "BUILTIN_STYLES",
    "CAMEL",
    "DOT",
    "KEBAB",
    "CaseStyle",
    "WordTransform",
    "available_styles",
    "camel_acronym_transform",
    "camel_transform",
    "iter_styles",
    "lower_transform",
    "on_registry_change",
    "register_style",
    "registry_snapshot",
    "render",
    "unregister_style",
    "upper_first",
]
