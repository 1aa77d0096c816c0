import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from reelgen.api.routes import router
from reelgen.config import CORS_ALLOW_ORIGINS, LOG_LEVEL
from reelgen.db.models import Base
from reelgen.db.session import engine
from reelgen.errors import ReelgenError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def init_db(retries: int = 5, delay: float = 2) -> bool:
    """Create tables, waiting for the database to come up. False if it never does."""
    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            logger.info("Database connected")
            return True
        except OperationalError:
            logger.warning("Waiting for database... (%d/%d)", attempt + 1, retries)
            time.sleep(delay)

    # Generation keeps working without persistence
    logger.error("Database not ready; running without persistence")
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title="Reel Generator",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware FIRST; answers OPTIONS preflight
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# Routes AFTER middleware
app.include_router(router)


@app.exception_handler(ReelgenError)
async def reelgen_error_handler(request: Request, exc: ReelgenError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = sorted({
        str(error["loc"][-1]) for error in exc.errors() if error.get("loc")
    })
    message = "Invalid or incomplete fields: " + ", ".join(fields) if fields else "Invalid request"
    return JSONResponse(status_code=422, content={"error": message})
