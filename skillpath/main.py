from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import init_db
from .errors import register_exception_handlers
from .logging_config import setup_logging
from .api.routes import catalog, learning, paths, profile, reset, roadmaps

setup_logging()

# Init DB tables on startup
init_db()

app = FastAPI(
    title="SkillPath API",
    description="AI-generated learning paths, skill roadmaps, lessons and quizzes",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(profile.router,  prefix="/api/v1/profile",  tags=["Profile"])
app.include_router(catalog.router,  prefix="/api/v1/catalog",  tags=["Catalog"])
app.include_router(paths.router,    prefix="/api/v1/paths",    tags=["Learning Paths"])
app.include_router(roadmaps.router, prefix="/api/v1/roadmaps", tags=["Roadmaps"])
app.include_router(learning.router, prefix="/api/v1/learning", tags=["Learning"])
app.include_router(reset.router,    prefix="/api/v1",          tags=["Reset"])


@app.get("/")
def root():
    return {
        "name": "SkillPath API",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "profile":  "/api/v1/profile",
            "catalog":  "/api/v1/catalog",
            "paths":    "/api/v1/paths",
            "roadmaps": "/api/v1/roadmaps",
            "learning": "/api/v1/learning",
            "reset":    "/api/v1/reset",
        },
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
