"""Login screen endpoints: sign up, sign in, sign out and the routing state."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from famealy.api.deps import get_context
from famealy.domain.Results import AuthError, NotFound, Unconfirmed
from famealy.session.bootstrap import AppContext
from famealy.utilities.validators import SignInInput, SignUpInput

router = APIRouter(tags=["auth"])


def session_payload(ctx: AppContext) -> dict:
    data = ctx.session.auth_state.to_dict()
    data["screen"] = ctx.session.screen.value
    return data


@router.get("/api/session")
def get_session(ctx: AppContext = Depends(get_context)):
    return session_payload(ctx)


@router.post("/api/auth/signup")
def sign_up(payload: SignUpInput, ctx: AppContext = Depends(get_context)):
    result = ctx.provider.sign_up(payload.email, payload.password, payload.name)
    if isinstance(result, Unconfirmed):
        # No session yet: back to the login screen with a notice
        return JSONResponse(status_code=status.HTTP_202_ACCEPTED,
                            content={**result.to_dict(), **session_payload(ctx)})
    if isinstance(result, AuthError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    return session_payload(ctx)


@router.post("/api/auth/login")
def sign_in(payload: SignInInput, ctx: AppContext = Depends(get_context)):
    result = ctx.provider.sign_in(payload.email, payload.password)
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if isinstance(result, AuthError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.message)
    return session_payload(ctx)


@router.post("/api/auth/logout")
def sign_out(ctx: AppContext = Depends(get_context)):
    ctx.session.logout()
    return session_payload(ctx)
