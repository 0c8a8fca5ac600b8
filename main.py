from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from tinyapp.config import settings
from tinyapp.api.errors import tinyapp_error_handler
from tinyapp.api.v1 import auth, urls, redirect
from tinyapp.exceptions import TinyAppError

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener with user accounts, built with FastAPI",
    debug=settings.debug
)

# Signed cookie session: carries user_id after login and the anonymous visitor_id
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    https_only=settings.https_only,
)

app.add_exception_handler(TinyAppError, tinyapp_error_handler)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}




######## Include routers
app.include_router(auth.router)
app.include_router(urls.router, prefix="/api/v1")
app.include_router(redirect.router)
