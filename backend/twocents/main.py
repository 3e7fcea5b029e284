import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from twocents.config import settings
from twocents.db.connection import metrics_db
from twocents.simulation.errors import InvalidInput, RateUnavailable
from twocents.api.routes import health, rates, simulations

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: read the metrics DB connection string
    metrics_db.configure()
    yield
    # Shutdown: forget it
    metrics_db.reset()


app = FastAPI(title="2cents Simulations", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RateUnavailable)
async def rate_unavailable_handler(request: Request, exc: RateUnavailable):
    logger.error("Simulation aborted on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


app.include_router(health.router, prefix="/api")
app.include_router(rates.router, prefix="/api")
app.include_router(simulations.router, prefix="/api")
