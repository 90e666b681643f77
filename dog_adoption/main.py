# /dog_adoption/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from . import config
from .routers import dogs_router
from .services import service_provider

config.configure_logging()


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once on startup: build the pipeline and issue the first load.
    service = service_provider.provide_dog_list_service()
    app.state.dog_list_service = service
    if config.LOAD_ON_STARTUP:
        await service.load()
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Dog Adoption API",
    description="Browse adoptable dogs from the bundled list and mark them as adopted.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(dogs_router.router, prefix="/api/dogs", tags=["Dogs"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Dog Adoption API is running!", "version": app.version}
