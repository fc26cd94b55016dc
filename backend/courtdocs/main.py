from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courtdocs.core.config import settings
from courtdocs.services.formatting.rules_store import get_court_rules_store
import logging
import sys

# Configure Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: fail fast on a broken rule dataset
    store = get_court_rules_store()
    logger.info(f"Court rules ready: {len(store)} courts")
    yield
    logger.info("Shutting down...")

app = FastAPI(
    title="Court Document Formatter API",
    version="1.0.0",
    description="Court-specific caption, signature, service and compliance formatting for legal filings",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health_check():
    return {"status": "ok", "courts": len(get_court_rules_store())}

# Include Routers
from courtdocs.api.routes import courts, formatting
app.include_router(courts.router, prefix="/api/courts", tags=["Courts"])
app.include_router(formatting.router, prefix="/api/formatting", tags=["Formatting"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
