from fastapi import APIRouter, Depends

from prephub.common.deps import get_user_repository
from prephub.features.users.repository import UserRepository
from prephub.features.users.schemas import UserIdentity
from .schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from .service import AuthService, build_profile, validate_login, validate_registration

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse)
def register(payload: RegisterRequest, repository: UserRepository = Depends(get_user_repository)):
    user = AuthService(repository).register(validate_registration(payload))
    return RegisterResponse(
        message=f"Welcome {user.name}! Registration successful.",
        user=UserIdentity(name=user.name, email=user.email),
    )


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, repository: UserRepository = Depends(get_user_repository)):
    """Verify credentials and return the full progress profile."""
    user = AuthService(repository).login(validate_login(payload))
    return LoginResponse(user=build_profile(user))
