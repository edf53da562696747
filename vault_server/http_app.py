# vault_server/http_app.py
from __future__ import annotations

import logging
import sys

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from vault.config import Settings
from vault.di import build_container
from vault.logging import configure_logging
from vault.services.files import FailureReason, FileService, OpResult
from vault_server.tools.files import (
    ErrorOut,
    FileContentOut,
    FileDeleteIn,
    FileMoveIn,
    FileWriteIn,
    SuccessOut,
)

logger = logging.getLogger(__name__)

STATUS_BY_REASON = {
    FailureReason.NOT_FOUND: 404,
    FailureReason.PERMISSION_DENIED: 403,
    FailureReason.INVALID_REQUEST: 400,
    FailureReason.UNKNOWN: 500,
}

ERROR_RESPONSES = {
    400: {"model": ErrorOut, "description": "Bad request"},
    403: {"model": ErrorOut, "description": "Path not permitted"},
    404: {"model": ErrorOut, "description": "File not found"},
    500: {"model": ErrorOut, "description": "Server error"},
}


def _respond(result: OpResult):
    if result.ok:
        return result.payload
    return JSONResponse({"error": result.error}, status_code=STATUS_BY_REASON[result.reason])


def build_file_router(file_service: FileService) -> APIRouter:
    # Sync handlers: FastAPI runs them in its threadpool, so disk I/O never blocks the loop
    router = APIRouter(tags=["File Operations"])

    @router.get(
        "/file",
        summary="Read file content",
        description="Reads the content of a file and returns it along with any variables found",
        response_model=FileContentOut,
        responses=ERROR_RESPONSES,
    )
    def read_file(filePath: str = Query(..., description="Path to the file to be read")):
        return _respond(file_service.read(filePath))

    @router.post(
        "/file",
        summary="Write or append to a file",
        description="Writes content to a file, optionally using a template and variable replacement",
        response_model=SuccessOut,
        responses=ERROR_RESPONSES,
    )
    def write_file(body: FileWriteIn):
        return _respond(
            file_service.write(
                body.filePath,
                content=body.content,
                template_path=body.templatePath,
                append=body.append,
                variables=body.variables,
            )
        )

    @router.put(
        "/file",
        summary="Move a file",
        description="Moves a file from one location to another",
        response_model=SuccessOut,
        responses=ERROR_RESPONSES,
    )
    def move_file(body: FileMoveIn):
        return _respond(file_service.move(body.sourcePath, body.destinationPath))

    @router.delete(
        "/file",
        summary="Delete a file",
        description="Deletes a file and its parent folder if it becomes empty",
        response_model=SuccessOut,
        responses=ERROR_RESPONSES,
    )
    def delete_file(body: FileDeleteIn):
        return _respond(file_service.delete(body.filePath))

    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    container = build_container(settings)
    s = container.settings

    app = FastAPI(
        title="Obsidian Manager API",
        description="API for managing Obsidian files",
        version="1.0.0",
        docs_url=s.DOCS_URL,
    )
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Schema failures share the {error} shape of every other failure
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        logger.info("rejected %s %s: %s", request.method, request.url.path, problems)
        return JSONResponse({"error": f"Invalid request: {problems}"}, status_code=400)

    app.include_router(build_file_router(container.file_service), prefix=s.API_PREFIX)
    return app


def main():
    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    import uvicorn

    app = create_app(settings)
    logger.info(
        "Swagger documentation is available at http://localhost:%s%s",
        settings.PORT,
        settings.DOCS_URL,
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
