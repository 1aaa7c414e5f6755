import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from .config import LOG_LEVEL
from .database import Base, engine
from .errors import PersistenceFailure
from .routers import translations

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title="API Translate",
    version="0.1.0",
    description="Translate text through an external provider and keep a record of each translation",
    lifespan=lifespan,
)


@app.exception_handler(PersistenceFailure)
async def persistence_failure_handler(request: Request, exc: PersistenceFailure) -> PlainTextResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.get("/health", include_in_schema=False)
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(translations.router)
