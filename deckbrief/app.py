# ============================================================
# Deck Brief FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Provider clients (OpenAI, Gemini, Ollama, Echo) in priority order
#   - Summarize -> brief pipeline
#   - Snapshot helpers for the results view
# ============================================================

from functools import lru_cache
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

# --- Local imports ---
from deckbrief.settings import settings
from deckbrief.logs import get_logger
from deckbrief.generate import TextGenerator, build_generator
from deckbrief.brief import BriefPipeline, BriefResponse, Snapshot, build_snapshot, DEFAULT_PERSONA

logger = get_logger("deckbrief.app")


# ------------------------------------------------------------
# 🔧 Generator + pipeline, built once from settings
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_generator() -> TextGenerator:
    return build_generator(settings)


def get_pipeline(generator: TextGenerator = Depends(get_generator)) -> BriefPipeline:
    return BriefPipeline(generator, default_persona=settings.DEFAULT_PERSONA or DEFAULT_PERSONA)


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Deck Brief API", version="0.1")


class ProvidersResponse(BaseModel):
    providers: List[str]


def _brief_json(status_code: int, body: BriefResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


# ------------------------------------------------------------
# 💬 Main generate route
# ------------------------------------------------------------
@app.post("/api/generate", response_model=BriefResponse, response_model_exclude_none=True)
async def generate(request: Request, pipeline: BriefPipeline = Depends(get_pipeline)):
    try:
        body: Any = await request.json()
    except ValueError:
        logger.error("request rejected at validating: body is not valid JSON")
        return _brief_json(400, BriefResponse.fail("Request body must be valid JSON"))

    # provider SDKs block, keep them off the event loop
    status_code, result = await run_in_threadpool(pipeline.handle, body)
    return _brief_json(status_code, result)


# ------------------------------------------------------------
# 🔎 Snapshot route
# ------------------------------------------------------------
@app.post("/api/snapshot", response_model=Snapshot)
async def snapshot(request: Request):
    # best effort: anything unreadable yields an empty snapshot
    try:
        body: Any = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    return build_snapshot(summary=body.get("summary"), brief=body.get("brief"))


# ------------------------------------------------------------
# 🤖 Providers discovery
# ------------------------------------------------------------
@app.get("/api/providers", response_model=ProvidersResponse)
def list_providers(generator: TextGenerator = Depends(get_generator)):
    return {"providers": generator.available_providers()}


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz() -> Dict[str, Any]:
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": "Deck Brief service running."}
