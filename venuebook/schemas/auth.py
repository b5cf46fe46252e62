from pydantic import BaseModel, EmailStr
from typing import Literal

"""
AUTH ROUTE SCHEMA
"""


#Payload used to log in with email + password
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


#Public profile returned alongside the token
class UserOut(BaseModel):
    name: str
    role: Literal["admin", "user"]

    model_config = {"from_attributes": True}


#Response returned after successful authentication containing the JWT
class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: UserOut
