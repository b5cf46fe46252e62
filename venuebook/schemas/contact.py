from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional

class ContactCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=10, max_length=20)
    subject: str = Field(min_length=5, max_length=200)
    message: str = Field(min_length=10, max_length=2000)

class ContactOut(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    subject: str
    message: str
    created_at: Optional[datetime]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
