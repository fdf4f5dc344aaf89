from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from config import client_store_config, upload_config
from portfolio.client.storage import LocalStorage
from portfolio.client.store import ProjectStore
from portfolio.controllers.v1.project_management.project import router as project_router
from portfolio.controllers.v1.contact_management.contact import router as contact_router
from portfolio.controllers.v1.analytics.analytics import router as analytics_router
from portfolio.controllers.v1.portfolio_page.portfolio_page import router as portfolio_page_router
from portfolio.database.conn import mongo_client
from portfolio.database.schema import ensure_collections_and_indexes
from portfolio.utils.errors import PortfolioError
from portfolio.utils.logger_utils import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""

    # Startup
    logger.info("🚀 Starting up the portfolio service...")
    await mongo_client.connect()
    # Ensure DB collections, validators and indexes
    try:
        await ensure_collections_and_indexes()
        logger.info("✅ Ensured DB schema (collections, validators, indexes)")
    except Exception as e:
        logger.warning(f"⚠️ Failed to ensure DB schema: {e}")

    app.state.project_store = ProjectStore(LocalStorage(client_store_config["DATA_DIR"]))

    yield

    # Shutdown
    logger.info("🛑 Shutting down the portfolio service...")
    await mongo_client.close()

# Create FastAPI application
app = FastAPI(title="Portfolio API", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Uploaded images
_upload_root = Path(upload_config["UPLOAD_ROOT"])
_upload_root.mkdir(parents=True, exist_ok=True)
app.mount(upload_config["URL_PREFIX"], StaticFiles(directory=str(_upload_root)), name="uploads")

# Routers
app.include_router(project_router, tags=["Project"])
app.include_router(contact_router, tags=["Contact"])
app.include_router(analytics_router, tags=["Analytics"])
app.include_router(portfolio_page_router, tags=["Portfolio Page"])


@app.get("/health")
async def health():
    try:
        await mongo_client.database.command("ping")
        database = "connected"
    except PortfolioError:
        database = "not-initialized"
    except Exception as e:
        logger.warning(f"Health check ping failed: {e}")
        database = "unreachable"
    return {"status": "ok", "service": "portfolio-api", "database": database}


if __name__ == "__main__":
    import uvicorn
    from config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
