from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from tinyapp.api.errors import render_error
from tinyapp.dependencies import (
    SESSION_USER_KEY,
    get_current_user,
    get_user_directory,
)
from tinyapp.models.user import User
from tinyapp.schemas.user import Credentials, UserResponse
from tinyapp.services.user_directory import UserDirectory

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    credentials: Credentials,
    request: Request,
    users: UserDirectory = Depends(get_user_directory)
):
    """Create an account and log it in (bcrypt runs in the thread pool)"""
    user = await run_in_threadpool(users.create, credentials.email, credentials.password)
    request.session[SESSION_USER_KEY] = user.id
    return user


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: Credentials,
    request: Request,
    users: UserDirectory = Depends(get_user_directory)
):
    """Log in with email and password"""
    user = await run_in_threadpool(users.verify, credentials.email, credentials.password)
    if user is None:
        # Same answer for unknown email and wrong password
        return render_error(
            status.HTTP_403_FORBIDDEN,
            "InvalidCredentials",
            "Invalid email or password",
            "/login",
        )
    request.session[SESSION_USER_KEY] = user.id
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: Request):
    """Forget the logged-in user (the visitor id stays)"""
    request.session.pop(SESSION_USER_KEY, None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)):
    """Currently logged-in user"""
    return user
