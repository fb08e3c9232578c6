# app/routes/user.py
import logging
from typing import Annotated
from fastapi import APIRouter, HTTPException, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from fastapi.concurrency import run_in_threadpool
from app.auth import hash_password, verify_password, create_access_token, get_current_user
from app.config import Settings, get_settings
from app.database import get_database, USER_COLLECTION
from app.models.user import UserModel
from app.schemas.user import UserCreate, LoginRequest, TokenOut, TokenClaims, ProfileOut
from app.utils.errors import create_error_response, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter()

def invalid_credentials() -> HTTPException:
    # Same response for unknown email and wrong password
    return HTTPException(
        status_code=401,
        detail=create_error_response(
            message="Invalid email or password",
            example="Sign up via POST /users before logging in"
        )
    )

@router.post("/users", status_code=201)
async def create_user(
    user: UserCreate,
    db: AsyncIOMotorDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings)
):
    try:
        try:
            hashed = await run_in_threadpool(hash_password, user.password, settings.BCRYPT_ROUNDS)
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=create_error_response(
                    message="Password is too long",
                    details="Passwords are limited to 72 bytes",
                )
            )

        result = await db[USER_COLLECTION].insert_one({"email": user.email, "password": hashed})
        logger.info("Created user account %s", result.inserted_id)

        return {
            "message": "New user account has been created",
            "userId": str(result.inserted_id)
        }
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error creating user account")
        raise internal_server_error()

@router.post("/login", response_model=TokenOut)
async def login(
    credentials: LoginRequest,
    db: AsyncIOMotorDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings)
):
    try:
        document = await db[USER_COLLECTION].find_one({"email": credentials.email})
        if not document:
            raise invalid_credentials()

        user = UserModel.from_document(document)
        if not await run_in_threadpool(verify_password, credentials.password, user.password):
            raise invalid_credentials()

        access_token = create_access_token(
            user.id,
            user.email,
            settings.TOKEN_SECRET,
            algorithm=settings.TOKEN_ALGORITHM,
            expires_delta=settings.access_token_lifetime,
        )
        return TokenOut(access_token=access_token)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error during login")
        raise internal_server_error()

@router.get("/profile", response_model=ProfileOut)
async def get_profile(user: Annotated[TokenClaims, Depends(get_current_user)]):
    return ProfileOut(user=user)
