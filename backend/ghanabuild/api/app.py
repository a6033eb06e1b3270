"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from ghanabuild.engine import ENGINE_VERSION
from ghanabuild.exceptions import CatalogError, InvalidInputError
from ghanabuild.expansion import (
    material_line_items,
    materials_total,
    schedule_summary,
    worker_requirements,
    workforce_total,
)
from ghanabuild.views import filter_items, sort_items

if TYPE_CHECKING:
    from ghanabuild.engine import EstimationEngine

logger = logging.getLogger(__name__)

CORS_ORIGINS_ENV = "GHANABUILD_CORS_ORIGINS"
_DEFAULT_CORS_ORIGINS = "http://localhost:3000"

SAMPLE_REQUEST: dict[str, Any] = {
    "region": "accra",
    "projectType": "residential",
    "totalFloorArea": 200,
    "areaUnit": "square-meters",
    "numberOfBathrooms": 3,
    "numberOfFloors": 2,
    "preferredFinishQuality": "standard",
    "includeExternalWorks": True,
}


def _cors_origins() -> list[str]:
    raw = os.environ.get(CORS_ORIGINS_ENV, _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(*, cost_engine: EstimationEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on first
        request.
    """
    app = FastAPI(title="Ghanabuild", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> EstimationEngine:
        eng: EstimationEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from ghanabuild.factory import create_default_engine

        eng = create_default_engine()
        app.state.cost_engine = eng
        return eng

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        request: Request, exc: InvalidInputError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": str(exc), "details": exc.details},
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        logger.error(
            "Rate catalog error while handling %s", request.url.path, exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Rate catalog unavailable", "details": [str(exc)]},
        )

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/regions, /api/catalog
    # ------------------------------------------------------------------

    @app.get("/api/regions")
    def regions() -> list[dict[str, str]]:
        repo = _get_cost_engine().repository
        return [{"name": r.name, "display_name": r.display_name} for r in repo.regions]

    @app.get("/api/catalog")
    def catalog_info() -> dict[str, Any]:
        repo = _get_cost_engine().repository
        catalog = repo.catalog
        return {
            "version": catalog.version,
            "currency": catalog.currency,
            "last_updated": catalog.last_updated.isoformat(),
            "default_region": repo.default_region.name,
            "defaults": catalog.defaults.model_dump(),
            "num_regions": len(catalog.regions),
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        result = _get_cost_engine().estimate(payload)
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/report
    # ------------------------------------------------------------------

    @app.post("/api/report")
    def report(
        payload: dict[str, Any] = Body(...),
        sort: str = "name",
        order: str = "asc",
        q: str = "",
    ) -> dict[str, Any]:
        engine = _get_cost_engine()
        return _build_report(engine, payload, sort=sort, order=order, query=q)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        return _build_report(_get_cost_engine(), SAMPLE_REQUEST)

    return app


def _build_report(
    engine: EstimationEngine,
    payload: dict[str, Any],
    *,
    sort: str = "name",
    order: str = "asc",
    query: str = "",
) -> dict[str, Any]:
    """Estimate plus the materials, workforce and schedule tables."""
    breakdown = engine.estimate(payload)
    repo = engine.repository

    materials = material_line_items(breakdown.area_sqm, repo.materials)
    workers = worker_requirements(breakdown.area_sqm, repo.workers)
    schedule = schedule_summary(repo.phases, total_cost=breakdown.total_cost)

    try:
        shown = sort_items(
            filter_items(materials, query), key=sort, descending=order.lower() == "desc",
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "estimate": breakdown.model_dump(mode="json"),
        "summary_dict": breakdown.to_summary_dict(),
        "export_dict": breakdown.to_export_dict(),
        "materials": [m.model_dump(mode="json") for m in shown],
        "materials_total": materials_total(materials),
        "workers": [w.model_dump(mode="json") for w in workers],
        "workforce_total": workforce_total(workers),
        "schedule": schedule.model_dump(mode="json"),
    }
