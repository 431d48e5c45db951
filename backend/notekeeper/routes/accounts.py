"""
NoteKeeper Backend — Account Route Handlers
============================================

What:  POST /signup and POST /login.
How:   Reads the raw body, decodes it leniently, delegates to AccountService.
Who:   Called by any JSON client; login returns the `sid` used by /notes.

Handlers are plain functions, so FastAPI runs each request on its own
threadpool worker.
"""

from fastapi import APIRouter, Depends, status

from notekeeper.dependencies import get_store, read_body
from notekeeper.schemas.requests import LoginRequest, SignupRequest
from notekeeper.schemas.responses import ErrorResponse, LoginResponse
from notekeeper.services.account_service import account_service
from notekeeper.services.store import MemoryStore

router = APIRouter(tags=["Accounts"])


@router.post(
    "/signup",
    response_model=int,
    responses={
        200: {"description": "Account created; body is the number 200"},
        400: {"description": "All fields empty or undecodable body", "model": ErrorResponse},
    },
    summary="Create an account",
)
def signup(
    raw: bytes = Depends(read_body),
    store: MemoryStore = Depends(get_store),
) -> int:
    """
    Register a user from `{"name", "email", "password"}`.

    The success body is the bare JSON number 200, not an object.
    """
    account_service.signup(store, SignupRequest.decode(raw))
    return status.HTTP_200_OK


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Email and password empty or undecodable body", "model": ErrorResponse},
        401: {"description": "No user matches the credentials", "model": ErrorResponse},
    },
    summary="Log in and obtain a session id",
)
def login(
    raw: bytes = Depends(read_body),
    store: MemoryStore = Depends(get_store),
) -> LoginResponse:
    session_id = account_service.login(store, LoginRequest.decode(raw))
    return LoginResponse(sid=session_id)
