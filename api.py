from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from umlgen.filters import FilterConfig, FilterPolicy
from umlgen.model import SymbolModel
from umlgen.render import render

logger = logging.getLogger(__name__)


app = FastAPI(title="UML Class Diagram Generator")


class RenderRequest(BaseModel):
	model: SymbolModel
	filters: Optional[FilterConfig] = None


class RenderResponse(BaseModel):
	diagram: str


@app.post("/render", response_model=RenderResponse)
def render_diagram(req: RenderRequest) -> RenderResponse:
	policy = FilterPolicy.from_config(req.filters) if req.filters else FilterPolicy()
	logger.info("Rendering %d types", len(req.model.types))
	return RenderResponse(diagram=render(req.model, policy))


@app.get("/health")
def health() -> Dict[str, str]:
	return {"status": "ok"}


def create_app() -> FastAPI:
	return app
