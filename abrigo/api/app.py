"""FastAPI application exposing the adoption engine."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..catalog import Catalog
from ..config import Settings
from ..engine import evaluate_adoptions, evaluate_adoptions_with_trace
from ..formatting import decision_view


class AdoptionRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    adopter1: str = Field(default="", alias="pessoa1")
    adopter2: str = Field(default="", alias="pessoa2")
    animals: str = Field(default="", alias="ordem")
    trace: bool = False


def create_app(catalog: Optional[Catalog] = None) -> FastAPI:
    active_catalog = catalog if catalog is not None else Settings.from_env().load_catalog()
    app = FastAPI(title="Animal Shelter Adoptions", version="0.1.0")

    @app.post("/api/adoptions")
    def api_adoptions(request: AdoptionRequest) -> JSONResponse:
        evaluate_fn = evaluate_adoptions_with_trace if request.trace else evaluate_adoptions
        result = evaluate_fn(request.adopter1, request.adopter2, request.animals, active_catalog)
        if not result.ok:
            return JSONResponse(status_code=422, content=result.to_dict())
        payload = result.to_dict()
        if request.trace:
            payload["trace"] = [decision_view(decision) for decision in result.trace]
        return JSONResponse(content=payload)

    @app.get("/api/catalog")
    def api_catalog() -> dict:
        return active_catalog.to_dict()

    return app


__all__ = ["AdoptionRequest", "create_app"]
