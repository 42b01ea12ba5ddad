from __future__ import annotations

import pytest

from casekit.styles import (
    BUILTIN_STYLES,
    CAMEL,
    DOT,
    KEBAB,
    CaseStyle,
    available_styles,
    camel_acronym_transform,
    lower_transform,
    register_style,
    render,
    unregister_style,
)


def test_builtin_styles():
    assert set(BUILTIN_STYLES) == {"camel", "kebab", "dot"}
    assert available_styles() == ["camel", "dot", "kebab"]


def test_render_empty_sequence():
    for style in (CAMEL, KEBAB, DOT):
        assert render([], style) == ""


def test_render_builtins():
    words = ["my", "ID", "Value"]
    assert render(words, CAMEL) == "myIdValue"
    assert render(words, KEBAB) == "my-id-value"
    assert render(words, DOT) == "my.id.value"
    assert render(["SCREEN", "NAME"], CAMEL) == "screenName"


def test_acronym_transform_is_opt_in():
    style = CaseStyle("", camel_acronym_transform)
    assert render(["my", "ID"], style) == "myID"
    assert render(["URL", "Parser"], style) == "urlParser"
    assert render(["my", "ID"], CAMEL) == "myId"


def test_register_custom_style():
    snake = CaseStyle("_", lower_transform, "lowercase words joined by underscores")
    register_style("snake", snake)
    assert "snake" in available_styles()
    assert render(["Hello", "World"], snake) == "hello_world"


def test_register_rejects_duplicates_unless_replacing():
    with pytest.raises(ValueError):
        register_style("kebab", CaseStyle("-", lower_transform))
    shout = CaseStyle("-", lambda token, position: token.upper())
    register_style("kebab", shout, replace=True)
    assert render(["a", "b"], shout) == "A-B"


def test_builtins_cannot_be_unregistered():
    with pytest.raises(ValueError):
        unregister_style("kebab")


@pytest.mark.parametrize("name", ["", "has space", "snake\n", None, 3])
def test_register_rejects_bad_names(name):
    with pytest.raises(ValueError):
        register_style(name, CaseStyle("_", lower_transform))


def test_register_rejects_non_descriptors():
    with pytest.raises(TypeError):
        register_style("snake", {"joiner": "_"})


def test_unregister_custom_style():
    register_style("snake", CaseStyle("_", lower_transform))
    unregister_style("snake")
    assert "snake" not in available_styles()
    with pytest.raises(KeyError):
        unregister_style("snake")


def test_case_style_is_immutable():
    with pytest.raises(AttributeError):
        KEBAB.joiner = "_"
