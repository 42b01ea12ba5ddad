from __future__ import annotations

import io
import json

from casekit.cli import main


def test_convert_arguments(capsys):
    assert main(["convert", "--style", "camel", "hello world", "my_Variable  Name"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["helloWorld", "myVariableName"]


def test_convert_defaults_to_kebab(capsys):
    assert main(["convert", "myVariableName"]) == 0
    assert capsys.readouterr().out.strip() == "my-variable-name"


def test_convert_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello world\nfoo_bar\n"))
    assert main(["convert", "-s", "dot"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hello.world", "foo.bar"]


def test_convert_json_output(capsys):
    assert main(["convert", "--style", "dot", "--json", "Hello World"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [{"input": "Hello World", "output": "hello.world"}]


def test_unknown_style_exits_with_error(capsys):
    assert main(["convert", "--style", "snake", "hello"]) == 2
    assert capsys.readouterr().out == ""


def test_tokens_command(capsys):
    assert main(["tokens", "myID value"]) == 0
    assert json.loads(capsys.readouterr().out) == ["my", "ID", "value"]


def test_styles_command_lists_registry(monkeypatch, capsys):
    monkeypatch.setenv("COLUMNS", "200")
    assert main(["styles"]) == 0
    out = capsys.readouterr().out
    for name in ("camel", "kebab", "dot"):
        assert name in out
    assert "helloWorldExample" in out
