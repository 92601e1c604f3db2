from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from casekit.cli import main


def test_cli_converts_arguments(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["camel", "first name", "XMLHttpRequest"])
    assert exit_code == 0
    assert capsys.readouterr().out == "firstName\nxmlHttpRequest\n"


def test_cli_converts_file_lines(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    source = tmp_path / "names.txt"
    source.write_text("XMLHttpRequest\n\nSCREEN_NAME\n", encoding="utf-8")
    exit_code = main(["dot", "--file", str(source)])
    assert exit_code == 0
    assert capsys.readouterr().out == "xml.http.request\n\nscreen.name\n"


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hello   World\r\nFoo Bar\n"))
    assert main(["kebab", "-f", "-"]) == 0
    assert capsys.readouterr().out == "hello-world\nfoo-bar\n"


def test_cli_json_output(capsys: pytest.CaptureFixture[str]):
    assert main(["camel", "--json", "item 42 count"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document == {
        "source": "item 42 count",
        "variant": "camel",
        "tokens": ["item", "42", "count"],
        "output": "item42Count",
    }


def test_cli_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        main(["camel", "-f", str(tmp_path / "absent.txt")])


@pytest.mark.parametrize(
    "argv",
    [
        ["camel"],
        ["snake", "value"],
        ["dot", "value", "--file", "names.txt"],
    ],
)
def test_cli_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
