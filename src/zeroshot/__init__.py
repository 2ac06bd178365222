"""
zeroshot: prompt composer and turn parser for the zero-shot ReAct text protocol.

The two entry points are :func:`render`, which builds the prompt for the next model turn, and
:func:`parse`, which classifies the raw text the model produced for that turn.
"""

from zeroshot.agent.prompt_composer import (
    ZERO_SHOT_PROMPT,
    MissingPlaceholder,
    PromptSpec,
    render,
    render_messages,
)
from zeroshot.agent.train import ZeroShot
from zeroshot.agent.turn_parser import (
    FINAL_ANSWER_MARKER,
    MALFORMED_MESSAGE,
    parse,
)
from zeroshot.core.schema import (
    ActionRequest,
    ActionStep,
    FinalAnswer,
    Malformed,
    Tool,
    Transcript,
    TurnOutcome,
)

__all__ = [
    "ZERO_SHOT_PROMPT",
    "FINAL_ANSWER_MARKER",
    "MALFORMED_MESSAGE",
    "ActionRequest",
    "ActionStep",
    "FinalAnswer",
    "Malformed",
    "MissingPlaceholder",
    "PromptSpec",
    "Tool",
    "Transcript",
    "TurnOutcome",
    "ZeroShot",
    "parse",
    "render",
    "render_messages",
]
