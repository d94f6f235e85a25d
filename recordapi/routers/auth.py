from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from recordapi.domain.records import LoginRequest, User
from recordapi.services.auth_service import AuthService, InvalidCredentialsError

router = APIRouter(tags=["auth"])


def _get_auth_service(request: Request) -> AuthService:
    svc = getattr(getattr(request.app, "state", None), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService not configured")
    return svc


@router.post("/register")
def register(user: User, request: Request):
    _get_auth_service(request).register(user)
    return Response(status_code=200)


@router.post("/login", response_class=PlainTextResponse)
def login(body: LoginRequest, request: Request):
    try:
        _get_auth_service(request).login(body.username, body.password)
    except InvalidCredentialsError as exc:
        return PlainTextResponse(str(exc), status_code=400)
    return PlainTextResponse("Logged in!")
