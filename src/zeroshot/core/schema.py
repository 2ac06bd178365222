"""
Schema definitions for composer <-> parser <-> orchestrator messages.

These data models serve as the contract between the prompt composer, the turn parser and the
external orchestration loop that calls the language model and runs the tools.  We keep them
separate from runtime logic so they can be imported anywhere without side-effects.
"""

from typing import (
    Annotated,
    List,
    Literal,
    Union,
)

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)


class Tool(BaseModel):
    """A capability the model may ask for (a "boxcar")."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Tool name, as the model must spell it after 'Action:'")
    description: str = Field("", description="One-line description shown to the model")


class ActionStep(BaseModel):
    """A completed Thought/Action/Action Input/Observation round."""

    thought: str = ""
    action: str
    action_input: str = ""
    observation: str = ""
    log: str = Field("", description="Raw model text of the turn that requested the action")

    def as_log(self) -> str:
        """Return the raw turn text, rebuilding it in protocol form when none was kept."""
        if self.log:
            return self.log
        thought = f" {self.thought}\n" if self.thought else ""
        return f"{thought}Action: {self.action}\nAction Input: {self.action_input}"


class Transcript(BaseModel):
    """Ordered record of prior steps in one run."""

    steps: List[ActionStep] = Field(default_factory=list)


class FinalAnswer(BaseModel):
    """The model has finished reasoning."""

    kind: Literal["final_answer"] = "final_answer"
    answer: str
    explanation: str = Field("", description="Full raw turn text the answer was taken from")


class ActionRequest(BaseModel):
    """The model wants a tool run."""

    kind: Literal["action_request"] = "action_request"
    action: str
    input: str
    log: str = Field("", description="Full raw turn text")


class Malformed(BaseModel):
    """The turn matched neither protocol form."""

    kind: Literal["malformed"] = "malformed"
    raw: str
    message: str


TurnOutcome = Annotated[
    Union[FinalAnswer, ActionRequest, Malformed], Field(discriminator="kind")
]
