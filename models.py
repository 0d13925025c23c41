from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator
from typing import Annotated, Any, Optional
from datetime import datetime
from bson import ObjectId

from utils import as_datetime


def _validate_object_id(v: Any) -> ObjectId:
    if isinstance(v, ObjectId):
        return v
    if not ObjectId.is_valid(v):
        raise ValueError("Invalid objectid")
    return ObjectId(v)


PyObjectId = Annotated[ObjectId, BeforeValidator(_validate_object_id)]


class Record(BaseModel):
    """Base for every seeded document: validated on construction, dumped as a Mongo document."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class User(Record):
    name: str
    email: str
    password: str  # bcrypt hash, never the plaintext


class Invoice(Record):
    customer_id: Optional[PyObjectId] = None  # soft reference to Customer._id
    amount: float
    status: str
    date: datetime

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, v):
        return as_datetime(v)


class Customer(Record):
    # source "id" is dropped; mongo assigns _id
    name: str
    email: str
    image_url: str


class Revenue(Record):
    month: str
    revenue: float
