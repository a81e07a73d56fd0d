import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from regear.adapters.sqlite.migrator import SQLiteMigrator
from regear.adapters.sqlite.repos import SQLitePresetRepo
from regear.api.deps import get_rules, get_settings
from regear.app_shell.config import validate_ops_rules
from regear.components.presets import PresetService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules(settings)
        validate_ops_rules(rules, settings.data_dir)
        logger.info(f"Rules loaded from {settings.rules_path}")
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"Rules load failed: {e}")
        sys.exit(1)

    SQLiteMigrator(settings.db_path, settings.migrations_dir).run_migrations()

    if rules.ops.seed_presets_on_startup:
        PresetService(repo=SQLitePresetRepo(settings.db_path)).seed_defaults()

    yield


app = FastAPI(
    title="Guild Regear Planner API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from regear.api.routes import gear, members, presets, threads  # noqa: E402

app.include_router(members.router, prefix="/api/members", tags=["Members"])
app.include_router(threads.router, prefix="/api/threads", tags=["Threads"])
app.include_router(presets.router, prefix="/api/presets", tags=["Presets"])
app.include_router(gear.router, prefix="/api/gear", tags=["Gear"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://maharlika-regear-system.vercel.app",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
