"""
Authentication endpoints.
"""

from fastapi import APIRouter, HTTPException, status

from blog_api.api.deps import CurrentIdentity, DbSession
from blog_api.kernel.identity.identity_service import IdentityService
from blog_api.schemas.auth import TokenResponse, UserCreate, UserLogin, UserResponse

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, db: DbSession):
    """
    Register a new user account.

    Returns an access token on successful registration.
    """
    identity_service = IdentityService(db)

    try:
        user = await identity_service.register_user(
            name=data.name,
            email=data.email,
            password=data.password,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    token = identity_service.jwt_manager.create_access_token(user_id=user.id, email=user.email)
    return TokenResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=TokenResponse)
async def login(data: UserLogin, db: DbSession):
    """Authenticate with email and password."""
    identity_service = IdentityService(db)
    result = await identity_service.authenticate(email=data.email, password=data.password)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user, token = result
    return TokenResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def me(identity: CurrentIdentity, db: DbSession):
    """Get the authenticated user's profile."""
    user = await IdentityService(db).get_user_by_id(identity.id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return UserResponse.model_validate(user)
