from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.config import get_settings
from app.handlers import image_handler, pages_handler
from app.services.disco_api import disco_api_client

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Using backend API at %s", settings.api_base_url)
    yield
    await disco_api_client.close()


app = FastAPI(title="Disco.pics Embed", lifespan=lifespan)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


# pages first so "/" and the not-found path win over "/{slug}"
app.include_router(pages_handler.router)
app.include_router(image_handler.router)


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=False)
