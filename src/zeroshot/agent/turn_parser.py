"""
A lenient parser for one language-model turn of the zero-shot ReAct protocol.

It recognises two shapes:
    ... Final Answer: <answer>
    Action: <name>
    Action Input: <input>
and classifies anything else as malformed so the orchestrator can show the model the
remediation message and ask again.
"""

import logging
import re

from zeroshot.core.schema import (
    ActionRequest,
    FinalAnswer,
    Malformed,
    TurnOutcome,
)

logger = logging.getLogger(__name__)

FINAL_ANSWER_MARKER = "Final Answer:"
ACTION_MARKER = "Action:"
ACTION_INPUT_MARKER = "Action Input:"

MALFORMED_MESSAGE = (
    "You gave me an improperly formatted answer - try again. For example, if you know the final "
    f'answer, start with "{FINAL_ANSWER_MARKER}"'
)

# "Action:" needs whitespace after it and a newline before "Action Input:".
_ACTION_RE = re.compile(
    r"Action:\s+(?P<action>.*?)\n+Action Input:(?P<action_input>.*)",
    re.DOTALL,
)


def extract_thought(text: str) -> str:
    """Return the first non-empty line written before the first ``Action:`` marker."""
    head = text.split(ACTION_MARKER, 1)[0]
    for line in re.split(r"\n+", head):
        if line.strip():
            return line.strip()
    return ""


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse(raw_text: str) -> TurnOutcome:
    """
    Classify *raw_text* and extract its fields.

    A final answer takes priority over anything action-shaped: the answer is the trimmed text
    after the last ``Final Answer:`` marker.  Otherwise the ``Action:`` / ``Action Input:`` pair
    is extracted, with one surrounding pair of double quotes removed from the input.  Text that
    fits neither shape comes back as :class:`Malformed`; nothing is raised.
    """
    if FINAL_ANSWER_MARKER in raw_text:
        answer = raw_text.rpartition(FINAL_ANSWER_MARKER)[2].strip()
        logger.debug("Final answer: %s", answer)
        return FinalAnswer(answer=answer, explanation=raw_text)

    logger.debug("Thought: %s", extract_thought(raw_text))

    match = _ACTION_RE.search(raw_text)
    if match is None:
        logger.warning("Turn matched no protocol form: %r", raw_text)
        return Malformed(raw=raw_text, message=MALFORMED_MESSAGE)

    action = match.group("action").strip()
    action_input = _strip_quotes(match.group("action_input").strip())
    logger.debug("Action: %s | Action Input: %s", action, action_input)
    return ActionRequest(action=action, input=action_input, log=raw_text)
