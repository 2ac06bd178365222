"""
Tests for the zero-shot turn parser.

Run with:
$ pytest -q
"""

import pytest

from zeroshot.agent.turn_parser import (
    MALFORMED_MESSAGE,
    extract_thought,
    parse,
)
from zeroshot.core.schema import (
    ActionRequest,
    FinalAnswer,
    Malformed,
)


def test_final_answer() -> None:
    """A turn ending in a final answer yields the trimmed answer."""

    outcome = parse("Thought: done\nFinal Answer: 4")
    assert isinstance(outcome, FinalAnswer)
    assert outcome.answer == "4"
    assert outcome.explanation == "Thought: done\nFinal Answer: 4"


def test_final_answer_uses_last_marker() -> None:
    """Only the text after the last marker is the answer."""

    text = 'I must say "Final Answer:" at the end.\nFinal Answer:   Paris  \n'
    outcome = parse(text)
    assert isinstance(outcome, FinalAnswer)
    assert outcome.answer == "Paris"


def test_final_answer_wins_over_action() -> None:
    """Action-shaped text never beats a final-answer marker."""

    text = "Action: Search\nAction Input: capital of France\nFinal Answer: Paris"
    outcome = parse(text)
    assert isinstance(outcome, FinalAnswer)
    assert outcome.answer == "Paris"


def test_final_answer_marker_inside_action_input() -> None:
    """The marker embedded in an action input still makes the turn a final answer."""

    outcome = parse("Action: Echo\nAction Input: say Final Answer: yes")
    assert isinstance(outcome, FinalAnswer)
    assert outcome.answer == "yes"


def test_empty_final_answer() -> None:
    """A marker with nothing after it gives an empty answer, not an error."""

    outcome = parse("Thought: hmm\nFinal Answer:   ")
    assert isinstance(outcome, FinalAnswer)
    assert outcome.answer == ""


def test_action_request() -> None:
    """The thought line is skipped and action/input are extracted."""

    text = "Thought: I should search\nAction: Search\n\nAction Input: 2+2"
    outcome = parse(text)
    assert isinstance(outcome, ActionRequest)
    assert outcome.action == "Search"
    assert outcome.input == "2+2"
    assert outcome.log == text


def test_action_request_blank_line_separator() -> None:
    """Several newlines between the markers are accepted."""

    outcome = parse("Action: X\n\nAction Input: Y")
    assert outcome == ActionRequest(action="X", input="Y", log="Action: X\n\nAction Input: Y")


def test_quoted_input_stripped_once() -> None:
    """One surrounding pair of quotes is removed, inner quotes stay."""

    outcome = parse('Action: X\nAction Input: "Y"')
    assert isinstance(outcome, ActionRequest)
    assert outcome.input == "Y"

    outcome = parse('Action: X\nAction Input: ""say "hi"""')
    assert isinstance(outcome, ActionRequest)
    assert outcome.input == '"say "hi""'


def test_unbalanced_quote_kept() -> None:
    """A lone leading quote is not stripped."""

    outcome = parse('Action: X\nAction Input: "Y')
    assert isinstance(outcome, ActionRequest)
    assert outcome.input == '"Y'


def test_multiline_input() -> None:
    """Input spanning several lines is captured whole."""

    outcome = parse("Action: X\nAction Input: line1\nline2")
    assert isinstance(outcome, ActionRequest)
    assert outcome.input == "line1\nline2"


def test_whitespace_only_fields() -> None:
    """Blank action name and input become empty strings."""

    outcome = parse("Action:   \nAction Input:   ")
    assert isinstance(outcome, ActionRequest)
    assert outcome.action == ""
    assert outcome.input == ""


@pytest.mark.parametrize(
    "text",
    [
        "I am not sure what to do.",
        "",
        "Action Input: 2+2\nAction: Search",
        "Action: Search Action Input: 2+2",
        "Thought: search\nAction: Search",
        "Action:Search\nAction Input: x",
    ],
)
def test_malformed(text: str) -> None:
    """Missing, reordered or badly separated markers are reported, not raised."""

    outcome = parse(text)
    assert isinstance(outcome, Malformed)
    assert outcome.raw == text
    assert outcome.message == MALFORMED_MESSAGE
    assert '"Final Answer:"' in outcome.message


def test_extract_thought() -> None:
    """The thought is the first non-empty line before the action marker."""

    assert extract_thought("\n\nThought: look it up\nAction: Search\nAction Input: x") == (
        "Thought: look it up"
    )
    assert extract_thought("Action: Search\nAction Input: x") == ""


def test_action_marker_followed_by_newline() -> None:
    """The action name may start on the line after the marker."""

    outcome = parse("Action:\nSearch\nAction Input: x")
    assert isinstance(outcome, ActionRequest)
    assert outcome.action == "Search"
    assert outcome.input == "x"
