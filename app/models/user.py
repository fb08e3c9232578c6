# app/models/user.py
from pydantic import BaseModel, Field

class UserModel(BaseModel):
    id: str = Field(default="", alias="_id")
    email: str
    password: str  # bcrypt hash

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, document: dict) -> "UserModel":
        return cls(**{**document, "_id": str(document["_id"])})
