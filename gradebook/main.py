from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.database import close_db_connections
from .core.logging import setup_logging

from .routers import health, auth, classes, students, subjects, lessons, messages, teacher

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Gradebook API")

    yield

    logger.info("Shutting down Gradebook API")
    await close_db_connections()
    logger.info("Shutdown complete")

app = FastAPI(
    title="Gradebook API",
    description="Classes, rosters, subjects, a monthly lesson grid with grades and attendance, and class messaging",
    version=settings.app_version,
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
    return response

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    max_age=settings.session_max_age,
    same_site="lax",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unexpected error: {str(exc)} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": "InternalError"}
    )

# Include all routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(classes.router)
app.include_router(students.router)
app.include_router(subjects.router)
app.include_router(lessons.router)
app.include_router(messages.router)
app.include_router(teacher.router)

@app.get("/")
async def root():
    return {
        "message": "Gradebook API",
        "version": settings.app_version,
        "status": "active"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("gradebook.main:app", host="0.0.0.0", port=8000, reload=True)
