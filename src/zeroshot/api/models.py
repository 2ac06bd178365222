"""
Pydantic models for zeroshot API requests and responses.
This module defines the request and response schemas used by the zeroshot API.
"""

from typing import (
    Dict,
    List,
)

from pydantic import (
    BaseModel,
    Field,
)

from zeroshot.core.schema import (
    Tool,
    Transcript,
    TurnOutcome,
)


# ---------------------------------------------------------------------------
# Pydantic request / response schema
# ---------------------------------------------------------------------------
class PromptRequest(BaseModel):
    """Everything needed to render the next turn's prompt."""

    tools: List[Tool] = Field(default_factory=list, description="Available tools, in order")
    transcript: Transcript = Field(default_factory=Transcript, description="Prior steps")
    question: str = Field(..., description="The user's question for this run")


class PromptResponse(BaseModel):
    """Rendered prompt, as one string and as chat messages."""

    prompt: str
    messages: List[Dict[str, str]]


class ParseRequest(BaseModel):
    """One raw model turn."""

    text: str = Field(..., description="Raw text the model produced for this turn")


class ParseResponse(BaseModel):
    """Classified turn."""

    outcome: TurnOutcome
