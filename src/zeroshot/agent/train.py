"""Zero-shot ReAct train: a fixed toolset bound to its prompt and turn parser."""

from __future__ import annotations

import logging
from functools import cached_property
from typing import (
    Dict,
    List,
    Sequence,
)

from zeroshot.agent import prompt_composer
from zeroshot.agent.prompt_composer import (
    ENGINE_PREFIX,
    OBSERVATION_PREFIX,
    ZERO_SHOT_PROMPT,
    PromptSpec,
)
from zeroshot.agent.turn_parser import (
    extract_thought,
    parse,
)
from zeroshot.core.schema import (
    ActionRequest,
    ActionStep,
    Tool,
    Transcript,
    TurnOutcome,
)

logger = logging.getLogger(__name__)


class ZeroShot:
    """
    Bundle a toolset with the zero-shot prompt.

    The orchestrator drives the loop: ``render`` the prompt, call the model, hand the raw text to
    ``extract_boxcar_and_input``, run the requested tool, then append ``next_step(...)`` to the
    transcript and render again until a :class:`FinalAnswer` comes back.
    """

    observation_prefix = OBSERVATION_PREFIX
    engine_prefix = ENGINE_PREFIX

    def __init__(
        self,
        boxcars: Sequence[Tool],
        name: str = "Zero Shot",
        description: str = "Zero Shot Train",
        prompt: PromptSpec | None = None,
    ) -> None:
        self.boxcars = tuple(boxcars)
        self.name = name
        self.description = description
        self.prompt = prompt or ZERO_SHOT_PROMPT

    @cached_property
    def boxcar_names(self) -> str:
        return prompt_composer.boxcar_names(self.boxcars)

    @cached_property
    def boxcar_descriptions(self) -> str:
        return prompt_composer.boxcar_descriptions(self.boxcars)

    def prediction_additional(self) -> Dict[str, str]:
        """Placeholder values that depend only on the toolset."""
        return {
            "boxcar_names": self.boxcar_names,
            "boxcar_descriptions": self.boxcar_descriptions,
        }

    def construct_scratchpad(self, transcript: Transcript | None) -> str:
        return prompt_composer.build_scratchpad(
            transcript, self.observation_prefix, self.engine_prefix
        )

    def _inputs(self, question: str, transcript: Transcript | None) -> Dict[str, str]:
        return {
            "input": question,
            "agent_scratchpad": self.construct_scratchpad(transcript),
            **self.prediction_additional(),
        }

    def render(self, question: str, transcript: Transcript | None = None) -> str:
        return self.prompt.format(**self._inputs(question, transcript))

    def render_messages(
        self, question: str, transcript: Transcript | None = None
    ) -> List[Dict[str, str]]:
        return self.prompt.format_messages(**self._inputs(question, transcript))

    def extract_boxcar_and_input(self, text: str) -> TurnOutcome:
        """Classify one model turn (see :func:`zeroshot.agent.turn_parser.parse`)."""
        return parse(text)

    def next_step(self, request: ActionRequest, observation: str) -> ActionStep:
        """Build the transcript record for *request* once its tool returned *observation*."""
        if request.action not in {boxcar.name for boxcar in self.boxcars}:
            logger.info("%s: model asked for unknown action '%s'", self.name, request.action)
        return ActionStep(
            thought=extract_thought(request.log),
            action=request.action,
            action_input=request.input,
            observation=observation,
            log=request.log,
        )
