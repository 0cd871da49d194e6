import datetime as dt
from typing import Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.core.date_utils import parse_date

COMPLETED_DATE_REQUIRED = "completed_date is required for completed hikes"


class Parking(str, Enum):
    yes = "Yes"
    no = "No"


class Difficulty(str, Enum):
    easy = "Easy"
    moderate = "Moderate"
    hard = "Hard"


class RouteType(str, Enum):
    none = ""
    loop = "Loop"
    out_and_back = "Out & Back"
    point_to_point = "Point to Point"
    lollipop = "Lollipop"


class LocationCoords(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


def _coerce_date(v):
    # Clients send plain dates or full JS-style timestamps
    if isinstance(v, (str, dt.datetime)):
        return parse_date(v)
    return v


class HikeBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    date: dt.date
    parking: Parking
    length: float = Field(gt=0, allow_inf_nan=False)  # km
    route_type: RouteType = RouteType.none
    difficulty: Difficulty

    description: str = ""
    notes: str = ""
    weather: str = ""

    photos: list[str] = Field(default_factory=list)
    location_coords: Optional[LocationCoords] = Field(default=None, alias="locationCoords")

    is_completed: bool = False
    completed_date: Optional[dt.date] = None

    @field_validator("name", "location", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", "notes", "weather", "route_type", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("photos", mode="before")
    @classmethod
    def _none_to_list(cls, v):
        return [] if v is None else v

    @field_validator("date", "completed_date", mode="before")
    @classmethod
    def _dates(cls, v):
        return _coerce_date(v)

    @field_validator("length", mode="before")
    @classmethod
    def _reject_bool_length(cls, v):
        if isinstance(v, bool):
            raise ValueError("length must be a number")
        return v


class HikeCreate(HikeBase):
    """Schema for logging a new hike."""

    @model_validator(mode="after")
    def _completion_needs_date(self):
        if self.is_completed and self.completed_date is None:
            raise ValueError(COMPLETED_DATE_REQUIRED)
        return self


class HikeUpdate(BaseModel):
    """Schema for editing a hike (all fields optional, merged over the stored record)."""

    # id / created_at and any other client extras are dropped
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    location: Optional[str] = None
    date: Optional[dt.date] = None
    parking: Optional[Parking] = None
    length: Optional[float] = None
    route_type: Optional[RouteType] = None
    difficulty: Optional[Difficulty] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    weather: Optional[str] = None
    photos: Optional[list[str]] = None
    location_coords: Optional[LocationCoords] = Field(default=None, alias="locationCoords")
    is_completed: Optional[bool] = None
    completed_date: Optional[dt.date] = None

    @field_validator("date", "completed_date", mode="before")
    @classmethod
    def _dates(cls, v):
        return _coerce_date(v)

    @field_validator("name", "location", "date", "parking", "length", "difficulty", "is_completed")
    @classmethod
    def _required_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be cleared")
        return v


class HikeRead(HikeBase):
    """A stored hike as returned to callers."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    created_at: dt.datetime


class HikeStats(BaseModel):
    total_hikes: int
    completed_hikes: int
    total_length_km: float
    by_difficulty: dict[str, int]


class Result(BaseModel):
    success: bool
    error: Optional[str] = None


class HikeIdResult(Result):
    id: Optional[int] = None


class HikeResult(Result):
    hike: Optional[HikeRead] = None


class HikeListResult(Result):
    hikes: list[HikeRead] = Field(default_factory=list)


class HikeStatsResult(Result):
    stats: Optional[HikeStats] = None
