"""
Prompt composer for the zero-shot ReAct protocol.

Renders the fixed instruction template, the running scratchpad and the available tools into the
exact text (or chat messages) sent to the language model for the next turn.  Everything here is a
pure function of its arguments; the only cache holds the joined tool strings, which depend on
nothing but an immutable toolset.
"""

import logging
import string
from functools import lru_cache
from typing import (
    Dict,
    List,
    Mapping,
    Sequence,
    Tuple,
)

from pydantic import (
    BaseModel,
    ConfigDict,
    model_validator,
)

from zeroshot.core.schema import (
    Tool,
    Transcript,
)

logger = logging.getLogger(__name__)

OBSERVATION_PREFIX = "Observation: "
ENGINE_PREFIX = "Thought:"


class MissingPlaceholder(KeyError):
    """Raised when a prompt is rendered without a value for one of its placeholders."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Missing value for prompt placeholder '{self.key}'"


# ---------------------------------------------------------------------------
# Prompt spec
# ---------------------------------------------------------------------------
class PromptSpec(BaseModel):
    """Static chat template plus the ordered placeholders it needs."""

    model_config = ConfigDict(frozen=True)

    messages: Tuple[Tuple[str, str], ...]
    placeholders: Tuple[str, ...]

    @model_validator(mode="after")
    def check_fields(self) -> "PromptSpec":
        for _, template in self.messages:
            for _, field, _, _ in string.Formatter().parse(template):
                if field is not None and field not in self.placeholders:
                    raise ValueError(f"Template refers to undeclared placeholder '{field}'")
        return self

    def _values(self, values: Mapping[str, str]) -> Dict[str, str]:
        missing = [key for key in self.placeholders if key not in values]
        if missing:
            raise MissingPlaceholder(missing[0])
        return {key: values[key] for key in self.placeholders}

    def format_messages(self, **values: str) -> List[Dict[str, str]]:
        """Substitute *values* and return ``[{"role": ..., "content": ...}, ...]``."""
        fields = self._values(values)
        return [
            {"role": role, "content": template.format(**fields)}
            for role, template in self.messages
        ]

    def format(self, **values: str) -> str:
        """Substitute *values* and join the message contents into one prompt string."""
        return "\n".join(message["content"] for message in self.format_messages(**values))


ZERO_SHOT_SYSTEM = """\
You are an AI Assistant and you are helping a user break down a series of tasks based on a \
reasoning process. The reasoning starts with a user input named Question which could be a \
Question or a request to execute an action. Then you are presented with a Thought, which is how \
you think you should resolve the question/input. In the Thought section you should think what do \
you need from the various actions you have access to. Action, the name of the action you will \
execute. Action Input, the parameters of the action. Observation, the result of the action, note \
that the observation should be different than your Thought. Usually Observation contains the \
Action Inputs from the previous Action.
Note that the Thought/Action/Action Input/Observation sequence can repeat N times.

Answer the following questions as best you can. You have access to the following actions:
{boxcar_descriptions}

Use the following format:
Question: the input question you must answer
Thought: you should always think about what to do
Action: the action to take, should be one from this list: {boxcar_names}
Action Input: the input to the action
Observation: the result of the action
...

<<< this Thought/Action/Action Input/Observation sequence can repeat N times, make sure all \
actions are prepended with "Action: " >>>

...
Thought: I know the final answer
Final Answer: the final answer to the original input question
Next Actions: Up to 3 logical suggested next questions for the user to ask after getting this \
answer.

Remember to start a line with "Final Answer:" to give me the final answer.

Begin!
"""

ZERO_SHOT_PROMPT = PromptSpec(
    messages=(
        ("system", ZERO_SHOT_SYSTEM),
        ("user", "Question: {input}"),
        ("assistant", "Thought: {agent_scratchpad}"),
    ),
    placeholders=("input", "agent_scratchpad", "boxcar_names", "boxcar_descriptions"),
)


# ---------------------------------------------------------------------------
# Derived strings
# ---------------------------------------------------------------------------
@lru_cache(maxsize=128)
def _tool_strings(toolset: Tuple[Tool, ...]) -> Tuple[str, str]:
    names = "[" + ", ".join(tool.name for tool in toolset) + "]"
    descriptions = "\n".join(f"{tool.name}: {tool.description}" for tool in toolset)
    return names, descriptions


def boxcar_names(toolset: Sequence[Tool]) -> str:
    """``[A, B, C]`` in input order."""
    return _tool_strings(tuple(toolset))[0]


def boxcar_descriptions(toolset: Sequence[Tool]) -> str:
    """One ``name: description`` line per tool, in input order."""
    return _tool_strings(tuple(toolset))[1]


def build_scratchpad(
    transcript: Transcript | None,
    observation_prefix: str = OBSERVATION_PREFIX,
    engine_prefix: str = ENGINE_PREFIX,
) -> str:
    """
    Replay prior turns so the model continues from its last thought.

    Each step contributes its raw turn text, the observation line and a fresh ``Thought:``
    prompt.  The template itself supplies the ``Thought: `` that opens the first turn.
    """
    if transcript is None:
        return ""
    return "".join(
        f"{step.as_log()}\n{observation_prefix}{step.observation}\n{engine_prefix}"
        for step in transcript.steps
    )


def prompt_inputs(
    toolset: Sequence[Tool], transcript: Transcript | None, question: str
) -> Dict[str, str]:
    """Return the placeholder values for one render."""
    names, descriptions = _tool_strings(tuple(toolset))
    return {
        "input": question,
        "agent_scratchpad": build_scratchpad(transcript),
        "boxcar_names": names,
        "boxcar_descriptions": descriptions,
    }


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------
def render_messages(
    toolset: Sequence[Tool],
    transcript: Transcript | None,
    question: str,
    prompt: PromptSpec = ZERO_SHOT_PROMPT,
) -> List[Dict[str, str]]:
    """Render the next turn's prompt as chat messages."""
    return prompt.format_messages(**prompt_inputs(toolset, transcript, question))


def render(
    toolset: Sequence[Tool],
    transcript: Transcript | None,
    question: str,
    prompt: PromptSpec = ZERO_SHOT_PROMPT,
) -> str:
    """
    Render the next turn's prompt as a single string.

    Parameters
    ----------
    toolset:
        Available tools, in the order they should be listed.  May be empty.
    transcript:
        Prior steps of this run, or *None* / an empty transcript on the first turn.
    question:
        The user's question for this run.
    prompt:
        Template to render; defaults to the zero-shot ReAct prompt.

    Raises
    ------
    MissingPlaceholder
        If *prompt* declares a placeholder this composer does not supply.
    """
    text = prompt.format(**prompt_inputs(toolset, transcript, question))
    logger.debug("Rendered prompt (%d chars) for %d tools", len(text), len(toolset))
    return text
