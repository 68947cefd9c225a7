"""FastAPI application entry point."""

from __future__ import annotations

import sys

import structlog
import uvicorn
from fastapi import FastAPI

from .config import AppConfig, ConfigError, load_config
from .dependencies import include_routers
from .logging import configure_logging


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build FastAPI instance with configured dependencies."""
    cfg = config or load_config()
    configure_logging(cfg.log_level)
    app = FastAPI(title="filedrop")
    include_routers(app, cfg)
    return app


def run() -> int:
    """Load configuration, then serve until interrupted."""
    log = structlog.get_logger("filedrop.main")
    try:
        config = load_config()
    except ConfigError as exc:
        configure_logging()
        log.error("service.config_invalid", error=str(exc))
        print(f"filedrop: {exc}", file=sys.stderr)
        return 2

    app = create_app(config)
    log.info(
        "service.starting",
        public_url=config.public_url,
        upload_dir=str(config.upload_dir),
        host=config.host,
        port=config.port,
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0
