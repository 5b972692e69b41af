"""
Translator Gateway

FastAPI application exposing the translator endpoints.

Run:
    python main.py
    uvicorn main:app --host 0.0.0.0 --port 3000
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from config import HOST, PORT
from core import register_exception_handlers
from logs import RequestContext, setup_translator_logging
from translator import router as translator_router
from translator.translator_client import close_session, get_backend_info

REQUEST_ID_HEADER = "X-Request-ID"

setup_translator_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"[APP] STARTUP | provider={get_backend_info()}")
    yield
    await close_session()
    logger.info("[APP] SHUTDOWN")


app = FastAPI(
    title="Translator Gateway",
    description="REST façade over the cloud translation provider",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Scope a request ID to each inbound request and echo it back."""
    with RequestContext(request.headers.get(REQUEST_ID_HEADER)) as request_id:
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


register_exception_handlers(app)
app.include_router(translator_router)


if __name__ == "__main__":
    logger.info(f"[APP] Server running on port {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
