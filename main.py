import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from core.database import engine
from core.exceptions import InvalidSwipe, NotAuthenticated, NotFound, PersistenceError
from utils.reset_db import create_tables

from routers.auth import router as auth_router
from routers.feed import router as feed_router
from routers.swipes import router as swipes_router
from routers.match import router as match_router
from routers.profile import router as profile_router
from routers.health import router as health_router

app = FastAPI(
    title="Matchmaking Backend",
    version="0.1.0",
    description="Подбор кандидатов, свайпы и взаимные матчи"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = logging.getLogger("uvicorn.error")


@app.middleware("http")
async def log_request_time(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} completed in {process_time:.2f} ms"
    )
    return response


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return _error(status.HTTP_401_UNAUTHORIZED, exc.message)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(InvalidSwipe)
async def invalid_swipe_handler(request: Request, exc: InvalidSwipe):
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc.message)


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(feed_router)
app.include_router(swipes_router)
app.include_router(match_router)
app.include_router(health_router)


@app.on_event("startup")
async def on_startup():
    # Создаём все таблицы
    await create_tables(engine)


@app.get("/")
async def root():
    return {"message": "Matchmaking Backend"}


@app.on_event("shutdown")
async def shutdown():
    # Закрываем все соединения пула
    await engine.dispose()
