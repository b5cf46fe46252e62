from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional

"""
PUBLIC ROUTE SCHEMA
"""


#Generic acknowledgement for public form submissions
class SubmissionResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class TimeSlotOut(BaseModel):
    id: str
    label: str
    base_price: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EventTypeOut(BaseModel):
    value: str
    label: str

    model_config = {"from_attributes": True}


class MenuItemOut(BaseModel):
    name: str
    price: int
    description: str


class MenuCategoryOut(BaseModel):
    id: str
    name: str
    items: List[MenuItemOut]


class FacilityOut(BaseModel):
    title: str
    description: str
