import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from cim import config  # noqa: E402
from cim.api import api_router  # noqa: E402
from cim.infra.supabase import get_supabase_client  # noqa: E402
from cim.infra.supabase.repositories import RepositoryFactory  # noqa: E402
from cim.services.spark import SparkService  # noqa: E402
from cim.services.workspace import WorkspaceRegistry  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.workspaces = WorkspaceRegistry(RepositoryFactory(get_supabase_client()))
    app.state.spark = SparkService()
    logger.info("CIM backend started")
    yield
    await app.state.workspaces.drain_all()
    logger.info("CIM backend stopped")


app = FastAPI(
    title="CIM Backend API",
    description="Backend API for CIM - creative idea management for content creators",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": "CIM Backend API",
        "docs": "/docs",
        "version": "1.0.0"
    }
