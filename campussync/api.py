"""
FastAPI app entry point aggregating per-domain routers under campussync/routes.
Keep as `uvicorn campussync.api:app`.
"""
from __future__ import annotations


from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .migrations import ensure_schema


app = FastAPI(title="campussync-api", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:1420",
        "http://127.0.0.1:1420",
        "tauri://localhost",
        "http://tauri.localhost",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    ensure_schema()


# Include routers (split by business domain)
from .routes import base as base_routes
from .routes import academic_years as academic_year_routes
from .routes import classes as class_routes
from .routes import staff as staff_routes
from .routes import school as school_routes
from .routes import enquiries as enquiry_routes
from .routes import students as student_routes
from .routes import images as image_routes
from .routes import logs as logs_routes
from .routes import invoke as invoke_routes

app.include_router(base_routes.router)
app.include_router(academic_year_routes.router)
app.include_router(class_routes.router)
app.include_router(staff_routes.router)
app.include_router(school_routes.router)
app.include_router(enquiry_routes.router)
app.include_router(student_routes.router)
app.include_router(image_routes.router)
app.include_router(logs_routes.router)
app.include_router(invoke_routes.router)
