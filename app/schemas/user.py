# app/schemas/user.py
from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class TokenOut(BaseModel):
    access_token: str = Field(..., alias="accessToken")

    class Config:
        populate_by_name = True

class TokenClaims(BaseModel):
    """Decoded access token payload"""
    user_id: str
    email: str
    iat: int
    exp: int

class ProfileOut(BaseModel):
    user: TokenClaims
