"""
FastAPI Application Entry Point
Main application setup and route registration
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from placement_portal.config import settings
from placement_portal.database import connect_db, disconnect_db
from placement_portal.logging_config import configure_logging, get_logger
from placement_portal.services.record_validator import describe_schema_errors
from placement_portal.services.user_service import user_service

configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Training & Placement Office portal: events, students, alumni and attendance",
    version="1.0.0",
    debug=settings.DEBUG
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    detail = getattr(exc, "detail", None) or "Not Found"
    return JSONResponse(status_code=404, content={"detail": detail})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed requests are reported as 400 with a readable message"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": describe_schema_errors(exc.errors())}
    )


# Startup event
@app.on_event("startup")
async def startup():
    """Run on application startup"""
    await connect_db()
    await user_service.ensure_default_admin()
    logger.info("%s started in %s mode", settings.APP_NAME, settings.APP_ENV)


# Shutdown event
@app.on_event("shutdown")
async def shutdown():
    """Run on application shutdown"""
    await disconnect_db()
    logger.info("Shutdown complete")


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": "1.0.0"
    }


# Import and include routers
from placement_portal.routes import (  # noqa: E402
    alumni,
    attendance,
    auth,
    dashboard,
    events,
    imports,
    news,
    notifications,
    placements,
    students,
)

app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(students.router, prefix="/api/students", tags=["Students"])
app.include_router(alumni.router, prefix="/api/alumni", tags=["Alumni"])
app.include_router(attendance.router, prefix="/api/attendance", tags=["Attendance"])
app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
app.include_router(news.router, prefix="/api/news", tags=["News"])
app.include_router(placements.router, prefix="/api/placements", tags=["Placements"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(imports.router, prefix="/api", tags=["Import / Export"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "placement_portal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
