"""
HTTP API for zeroshot.

Exposes the prompt composer and turn parser to orchestrators written in other processes:
- **GET /health** - liveness probe for health checks.
- **POST /prompt** - render the next prompt: {"tools": [...], "question": "..."}
- **POST /parse**  - classify one model turn: {"text": "..."}
"""

import logging

from fastapi import (
    FastAPI,
    HTTPException,
)

from zeroshot.agent.prompt_composer import (
    MissingPlaceholder,
    render_messages,
)
from zeroshot.agent.turn_parser import parse
from zeroshot.api.models import (
    ParseRequest,
    ParseResponse,
    PromptRequest,
    PromptResponse,
)
from zeroshot.common import (
    AnsiColors,
    colored_print,
)
from zeroshot.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="zeroshot API", version="0.1.0", description="Zero-shot ReAct prompt and turn parser"
)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.get("/health", summary="Health check")
async def health() -> dict[str, str]:
    """Return a simple liveness payload."""
    return {"status": "ok"}


@app.post("/prompt", response_model=PromptResponse, summary="Render the next prompt")
async def prompt_endpoint(req: PromptRequest) -> PromptResponse:
    """Render the prompt for the next model turn."""
    try:
        messages = render_messages(req.tools, req.transcript, req.question)
    except MissingPlaceholder as exc:
        logger.error("Prompt rendering failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    text = "\n".join(message["content"] for message in messages)
    return PromptResponse(prompt=text, messages=messages)


@app.post("/parse", response_model=ParseResponse, summary="Classify a model turn")
async def parse_endpoint(req: ParseRequest) -> ParseResponse:
    """Classify one raw model turn as a final answer, an action request or malformed."""
    outcome = parse(req.text)
    logger.info("Parsed turn as %s", outcome.kind)
    return ParseResponse(outcome=outcome)


# ---------------------------------------------------------------------------
# Public helper to launch the API (imported by main.py)
# ---------------------------------------------------------------------------
def run_api(
    host: str | None = None,
    port: int | None = None,
    reload: bool = False,
    log_level: str | None = None,
) -> None:
    """Start a uvicorn server hosting *app*.

    Parameters
    ----------
    host, port:
        Bind address for the HTTP server (default from settings if not provided).
    reload:
        If *True*, enable auto-reload.
    log_level:
        Logging level to use (default from settings if not provided).
    """

    # Lazy import - keeps uvicorn out of the import path of the core
    import uvicorn  # pylint: disable=import-outside-toplevel

    host = host or settings.API_HOST
    port = port or settings.API_PORT
    if log_level is None:
        log_level = settings.LOG_LEVEL

    logger.info(
        "Starting zeroshot API at %s:%d (reload=%s, log_level=%s)", host, port, reload, log_level
    )
    logger.debug("API settings: %s", settings.model_dump())

    colored_print(f"zeroshot API is running at http://{host}:{port}.", AnsiColors.GREEN)
    colored_print(f"Visit http://{host}:{port}/docs for API documentation.", AnsiColors.BLUE)
    uvicorn.run(
        "zeroshot.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


# ---------------------------------------------------------------------------
# `python -m zeroshot.api.app` helper
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run_api(reload=True)
