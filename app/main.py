#!/usr/bin/env python

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
import uvicorn

# Configuration
from app.core.config import settings

# Services and Utilities (Import types needed for getters first)
from app.services.dogs.dog_api_client import DogApiClient
from app.services.gallery.gallery_service import GalleryService
from app.ui.theme import Theme, load_theme
from app.utils.error_handling import DogApiError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

# --- Define State and Dependency Getters FIRST --- #
app_state = {}

def get_dog_api_client() -> DogApiClient:
    service = app_state.get("dog_api_client")
    if not service:
        raise HTTPException(status_code=503, detail="Dog API client not available.")
    return service

def get_gallery_service() -> GalleryService:
    service = app_state.get("gallery_service")
    if not service:
        raise HTTPException(status_code=503, detail="Gallery Service not available.")
    return service

def get_theme() -> Theme:
    theme = app_state.get("theme")
    if not theme:
        raise HTTPException(status_code=503, detail="Theme not loaded.")
    return theme

# --- Import Routers AFTER Getters are Defined --- #
from app.api.v1.endpoints import dogs as dogs_router_module
from app.api.v1.endpoints import gallery as gallery_router_module
from app.ui import pages as pages_router_module

# --- Lifespan Manager --- #
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events: create clients/services on startup."""
    logger.info("Application startup: Loading resources...")
    try:
        app_state["theme"] = load_theme(settings)

        dog_api_client = DogApiClient(
            api_url=settings.DOG_API_URL,
            timeout=settings.REQUEST_TIMEOUT
        )
        app_state["dog_api_client"] = dog_api_client

        app_state["gallery_service"] = GalleryService(client=dog_api_client)
        logger.info("Gallery service initialized.")

    except Exception as e:
        logger.exception("Fatal error during application resource initialization.")
        raise RuntimeError("Application startup failed.") from e

    yield # Application runs here

    logger.info("Application shutdown: Cleaning up resources...")
    client = app_state.get("dog_api_client")
    if client:
        client.close()
    app_state.clear()

# Create FastAPI app with lifespan manager
app = FastAPI(
    title="Dog Gallery",
    description="Random dog images from the Dog CEO API, labelled by breed",
    version="1.0.0",
    lifespan=lifespan
)

# --- Custom OpenAPI Schema to Remove 422 Responses --- #
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    # Validation errors are answered with 400, see the handler below
    for path in openapi_schema["paths"]:
        for method in openapi_schema["paths"][path]:
            if "responses" in openapi_schema["paths"][path][method]:
                responses = openapi_schema["paths"][path][method]["responses"]
                if "422" in responses:
                    if "400" not in responses:
                        responses["400"] = responses["422"]
                        responses["400"]["description"] = "Bad Request - Invalid input parameters"
                    del responses["422"]

    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi

# --- Exception Handlers --- #

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(DogApiError)
async def dog_api_exception_handler(request: Request, exc: DogApiError):
    logger.error(f"Dog API error ({type(exc).__name__}): {exc}")
    return JSONResponse(
        status_code=502, # Bad Gateway
        content={"message": f"Failed to load a dog from the Dog API: {exc}"},
    )

# Generic handler for unexpected errors
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected internal server error occurred."},
    )

# --- Middleware --- #

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# --- Static Files --- #

app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

# --- Routers --- #

app.include_router(
    dogs_router_module.router,
    prefix="/api/v1",
    tags=["dogs"],
)
app.include_router(
    gallery_router_module.router,
    prefix="/api/v1",
    tags=["gallery"],
)
# Home and Gallery pages
app.include_router(pages_router_module.router, include_in_schema=False)

# --- Health Check --- #
@app.get("/health",
    description="Health check endpoint to verify API services are running properly."
)
async def health_check():
    required = ["dog_api_client", "gallery_service", "theme"]
    missing = [s for s in required if s not in app_state]
    if missing:
        raise HTTPException(status_code=503, detail=f"Service not ready. Missing: {missing}")
    return {"status": "ok"}

# --- Main Execution --- #

if __name__ == "__main__":
    logger.info(f"Starting server on {settings.BASE_URL}")
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )
