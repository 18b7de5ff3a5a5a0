# app/main.py
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.ticket.routes import router as ticket_router

settings = get_settings()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,      # keeps the literal "*" in Access-Control-Allow-Origin
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        detail = "Invalid ticket ID"
    elif any(err.get("type") == "json_invalid" for err in errors):
        detail = "Invalid JSON"
    else:
        detail = "Invalid input"
    logger.warning("%s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})


# Routers
app.include_router(ticket_router)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


# Mounted last so the API routes above take precedence over "/"
if Path(settings.STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
else:
    logger.warning("Static directory %s not found; serving the API only", settings.STATIC_DIR)


def run() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
