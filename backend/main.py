from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from init_db import init_database
from api import students
from config.app_config import get_cors_origins, get_log_file, get_log_level, is_log_file_enabled
from constants import ServerConfig
from utils.error_handlers import add_error_handlers
from utils.logging_utils import request_logging_context
import logging
from logging.handlers import RotatingFileHandler
import sys


def configure_logging():
    """
    Configure the root logger with a console handler and, unless disabled,
    a rotating file handler (10MB per file, keep 5 backups).
    """
    log_level = get_log_level()
    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if is_log_file_enabled():
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)
        logging.getLogger(__name__).info(f"Logging initialized: {log_file}")


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_database()
    logger.info("🚀 Student API started")
    yield
    logger.info("Student API stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Student API",
        description="CRUD API for student records with field-level validation",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_context)

    add_error_handlers(app)

    app.include_router(students.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "API is running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
