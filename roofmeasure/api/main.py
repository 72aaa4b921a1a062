"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roofmeasure.api.routes import router
from roofmeasure.api.schemas import ErrorResponse
from roofmeasure.core.errors import (
    MeasurementError, DiagramNotFoundError, FacetNotFoundError,
)


async def _measurement_error(request: Request, exc: MeasurementError) -> JSONResponse:
    body = ErrorResponse(error=exc.code, detail=str(exc))
    return JSONResponse(
        status_code=422,
        content=body.model_dump(),
    )


async def _not_found(
    request: Request, exc: DiagramNotFoundError | FacetNotFoundError,
) -> JSONResponse:
    code = "diagram_not_found" if isinstance(exc, DiagramNotFoundError) else "facet_not_found"
    body = ErrorResponse(error=code, detail=str(exc))
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=body.model_dump(),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Roof Facet Measurement",
        description="Roof facet area and measurement engine",
        version="0.1.0",
    )

    # CORS — allow the mobile app dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MeasurementError, _measurement_error)  # type: ignore[arg-type]
    app.add_exception_handler(DiagramNotFoundError, _not_found)  # type: ignore[arg-type]
    app.add_exception_handler(FacetNotFoundError, _not_found)  # type: ignore[arg-type]

    app.include_router(router, prefix="/api")

    return app


app = create_app()
