from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from applyly.api.routes.parse import router as parse_router
from applyly.core.config import configure_logging

configure_logging()

app = FastAPI(
    title="Applyly (Resume Parsing Service)",
    description="Deterministic resume parsing service that turns PDF resumes into structured profile data",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "applyly", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Applyly API",
        version="0.1.0",
        description="PDF resume parsing into camelCase profile records",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
