"""FastAPI application entrypoint for readmegen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..logging import configure_logging
from ..orchestrator import GenerationResult, Orchestrator


class AnalyzeRequest(BaseModel):
    path: str


class ManifestModel(BaseModel):
    type: str
    file_path: str
    project_name: str
    description: str
    dependencies: List[str]
    license: Optional[str] = None


class AnalyzeResponse(BaseModel):
    name: str
    description: str
    language: str
    entry_point: Optional[str] = None
    scripts: Dict[str, str]
    dependencies: List[ManifestModel]
    structure: Dict[str, Any]
    license: Optional[str] = None
    license_file: Optional[str] = None


class GenerateRequest(BaseModel):
    path: str
    write: bool = False
    overwrite: bool = False


class GenerateResponse(BaseModel):
    content: str
    readme_path: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing readmegen operations."""

    app = FastAPI(title="readmegen service", version=__version__)

    async def get_orchestrator() -> Orchestrator:
        # Fresh orchestrator per request; runs share no state.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        loop = asyncio.get_running_loop()
        result: GenerationResult = await loop.run_in_executor(
            None, orchestrator.generate, payload.path
        )
        return AnalyzeResponse(**result.metadata.to_dict())

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerateResponse:
        def _run() -> GenerateResponse:
            result = orchestrator.generate(payload.path)
            if not payload.write:
                return GenerateResponse(content=result.content)
            readme_path = orchestrator.write(result, overwrite=payload.overwrite)
            return GenerateResponse(content=result.content, readme_path=str(readme_path))

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _run)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(FileExistsError)
    async def file_exists_handler(_: Any, exc: FileExistsError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    configure_logging()
    app = create_app()
    uvicorn.run(app, host=host, port=port)
