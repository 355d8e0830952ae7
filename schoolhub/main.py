# schoolhub/main.py
import time
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from schoolhub.config import settings
from schoolhub.database import Base, engine
from schoolhub.logging_config import setup_logging
from schoolhub.models import teacher, time_slot  # noqa: F401  register tables
from schoolhub.routers import teachers, timetable


setup_logging()
logger = logging.getLogger("schoolhub")
http_logger = logging.getLogger("schoolhub.http")


# create tables if missing
Base.metadata.create_all(bind=engine)

app = FastAPI(title="SchoolHub Backend", version="1.0.0")


def _status_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


@app.middleware("http")
async def access_log(request: Request, call_next):
    started = time.perf_counter()
    client = request.client.host if request.client else "-"
    try:
        response = await call_next(request)
    except Exception:
        elapsed = (time.perf_counter() - started) * 1000
        http_logger.exception("%s %s %s failed after %.1fms", client, request.method, request.url.path, elapsed)
        raise

    elapsed = (time.perf_counter() - started) * 1000
    http_logger.log(
        _status_level(response.status_code),
        "%s %s %s -> %s %.1fms",
        client, request.method, request.url.path, response.status_code, elapsed,
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(timetable.router)
app.include_router(teachers.router)

@app.get("/")
def root():
    logger.debug("health check")
    return {"message": "SchoolHub backend is running!"}
