"""Account registration and profile endpoints."""

from fastapi import APIRouter, status

from chirpy.api.v1.dependencies import AccountRepoDep, BearerTokenDep
from chirpy.schemas.account import AccountCreate, AccountOut, AccountUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    summary="Register an account",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountOut,
)
def create_account(payload: AccountCreate, repo: AccountRepoDep) -> AccountOut:
    return repo.create(payload.email, payload.password)


@router.put("", summary="Update the current account", response_model=AccountOut)
def update_account(
    payload: AccountUpdate,
    repo: AccountRepoDep,
    token: BearerTokenDep,
) -> AccountOut:
    """Change email and/or password; omitted or empty fields stay as they are."""
    return repo.update(token, email=payload.email, password=payload.password)
