"""FastAPI application serving the agent catalog and run API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from agenthub.adapters import MemoryStore, RecordStore
from agenthub.dispatch import ExecutionBackend, ExecutionDispatcher
from agenthub.registry import AgentRegistry
from server.agent_db import SqliteAgentStore
from server.agent_routes import router as agent_router
from server.config import (
    AGENT_STORE,
    AGENTS_DB_PATH,
    CORS_HEADERS,
    CORS_ORIGINS,
    HOST,
    PORT,
    VERSION,
)
from server.errors import install_error_handlers
from server.logger import configure_logging, logger


def build_store(kind: str = AGENT_STORE) -> RecordStore:
    """Construct the configured record store."""
    if kind == "memory":
        return MemoryStore()
    if kind == "sqlite":
        return SqliteAgentStore(AGENTS_DB_PATH)
    raise ValueError(f"Unknown AGENT_STORE: {kind}")


def create_app(
    store: RecordStore | None = None,
    backend: ExecutionBackend | None = None,
) -> FastAPI:
    """Build the application with its registry and dispatcher wired in."""
    registry = AgentRegistry(store if store is not None else build_store())
    dispatcher = ExecutionDispatcher(registry, backend)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Agent hub {VERSION} started with {type(registry.store).__name__}")
        yield

    app = FastAPI(
        title="Agent Hub API",
        description="Catalog of deployable agents and execution requests",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.state.dispatcher = dispatcher

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        # CORS header set on every response, errors included
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    install_error_handlers(app)
    app.include_router(agent_router)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {
            "status": "ok",
            "version": VERSION,
            "store": type(registry.store).__name__,
            "endpoints": {
                "agents": "/agents",
                "run": "/agents/{id}/run",
            },
        }

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
