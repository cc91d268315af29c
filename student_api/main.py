from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from student_api.core.config import settings
from student_api.core.database import init_db
from student_api.core.handlers import register_exception_handlers
from student_api.core.logging import logger
from student_api.api.router import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.PROJECT_NAME} {settings.APP_VERSION} started")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "message": "Welcome to Student Records API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("student_api.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
