"""
Rendering of TinyApp errors as HTTP responses.

Each error kind maps to a status code and a page the client can go back to.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from tinyapp.exceptions import (
    EmailAlreadyRegistered,
    Forbidden,
    GenerationExhausted,
    InvalidCredentials,
    InvalidURL,
    NotFound,
    TinyAppError,
    Unauthenticated,
)


# error kind -> (status code, return url)
ERROR_RESPONSES = {
    EmailAlreadyRegistered: (status.HTTP_400_BAD_REQUEST, "/register"),
    InvalidCredentials: (status.HTTP_400_BAD_REQUEST, "/register"),
    InvalidURL: (status.HTTP_400_BAD_REQUEST, "/api/v1/urls"),
    Unauthenticated: (status.HTTP_401_UNAUTHORIZED, "/login"),
    Forbidden: (status.HTTP_403_FORBIDDEN, "/api/v1/urls"),
    NotFound: (status.HTTP_404_NOT_FOUND, "/api/v1/urls"),
    GenerationExhausted: (status.HTTP_503_SERVICE_UNAVAILABLE, "/api/v1/urls"),
}


def render_error(status_code: int, error: str, detail: str, return_url: str) -> JSONResponse:
    """Error body shared by all failure responses"""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail, "return_url": return_url},
    )


async def tinyapp_error_handler(request: Request, exc: TinyAppError) -> JSONResponse:
    """FastAPI exception handler for every TinyAppError"""
    status_code, return_url = ERROR_RESPONSES.get(
        type(exc), (status.HTTP_500_INTERNAL_SERVER_ERROR, "/")
    )
    response = render_error(status_code, type(exc).__name__, str(exc), return_url)

    if isinstance(exc, GenerationExhausted):
        # Server-side and transient: ask the client to try again
        response.headers["Retry-After"] = "1"
        print(f"❌ {request.method} {request.url.path}: {exc}")

    return response
