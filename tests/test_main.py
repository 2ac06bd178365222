"""
Tests for the zeroshot command line.

Run with:
$ pytest -q
"""

import io
import json
from pathlib import Path

import pytest

from zeroshot.main import main


def _write_tools(tmp_path: Path) -> Path:
    path = tmp_path / "tools.json"
    path.write_text(json.dumps([{"name": "Search", "description": "web search"}]))
    return path


def test_render_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """render prints the prompt built from the tools file."""

    main(["render", "--tools", str(_write_tools(tmp_path)), "--question", "What is 2+2?"])
    out = capsys.readouterr().out
    assert "Action: the action to take, should be one from this list: [Search]" in out
    assert "Question: What is 2+2?" in out


def test_render_command_with_transcript(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A transcript file feeds the scratchpad."""

    transcript = tmp_path / "transcript.json"
    transcript.write_text(
        json.dumps({"steps": [{"action": "Search", "action_input": "x", "observation": "found"}]})
    )
    main(
        [
            "render",
            "--tools",
            str(_write_tools(tmp_path)),
            "--question",
            "q",
            "--transcript",
            str(transcript),
        ]
    )
    assert "Observation: found\nThought:" in capsys.readouterr().out


def test_render_command_bad_tools(tmp_path: Path) -> None:
    """Invalid tool files exit with a usage error."""

    bad = tmp_path / "tools.json"
    bad.write_text('{"not": "a list"}')
    with pytest.raises(SystemExit) as info:
        main(["render", "--tools", str(bad), "--question", "q"])
    assert info.value.code == 2


def test_parse_command_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """parse prints the outcome as JSON on stdout."""

    turn = tmp_path / "turn.txt"
    turn.write_text("Thought: done\nFinal Answer: 4")
    main(["parse", str(turn)])
    outcome = json.loads(capsys.readouterr().out)
    assert outcome["kind"] == "final_answer"
    assert outcome["answer"] == "4"


def test_parse_command_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without a file, the turn is read from stdin."""

    monkeypatch.setattr("sys.stdin", io.StringIO("Action: Search\nAction Input: 2+2"))
    main(["parse"])
    outcome = json.loads(capsys.readouterr().out)
    assert outcome == {
        "kind": "action_request",
        "action": "Search",
        "input": "2+2",
        "log": "Action: Search\nAction Input: 2+2",
    }


def test_parse_command_missing_file(tmp_path: Path) -> None:
    """An unreadable turn file exits with a usage error instead of a traceback."""

    with pytest.raises(SystemExit) as info:
        main(["parse", str(tmp_path / "missing.txt")])
    assert info.value.code == 2
