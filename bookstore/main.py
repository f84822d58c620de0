# /bookstore/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from loguru import logger

# --- Application-specific Router Imports ---
from .routers import (
    authors_router,
    books_router,
    categories_router,
    author_books_router,
)

# --- Startup Dependencies ---
from .core import config
from .core.logging_config import configure_logging
from .db.database import engine, init_db


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    configure_logging()
    init_db(engine)
    logger.info("{} {} started", config.APP_TITLE, config.APP_VERSION)
    yield
    # This code runs ONCE when the application shuts down.
    engine.dispose()


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title=config.APP_TITLE,
    description="CRUD service over the authors, books and categories of a bookstore catalog.",
    version=config.APP_VERSION,
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(authors_router.router, prefix="/authors", tags=["Authors"])
app.include_router(books_router.router, prefix="/books", tags=["Books"])
app.include_router(categories_router.router, prefix="/categories", tags=["Categories"])
app.include_router(author_books_router.router, prefix="/authorbooks", tags=["Author-Book Links"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Bookstore Catalog is running!", "version": app.version}
