"""DTOs for the random-user API (https://randomuser.me/documentation)."""
from pydantic import BaseModel, Field


class RandomUserName(BaseModel):
    first: str | None = None
    last: str | None = None


class RandomUserStreet(BaseModel):
    number: int | str | None = None
    name: str | None = None


class RandomUserLocation(BaseModel):
    street: RandomUserStreet = Field(default_factory=RandomUserStreet)
    city: str | None = None
    country: str | None = None


class RandomUserDob(BaseModel):
    date: str | None = None
    age: int | None = None


class RandomUserPicture(BaseModel):
    large: str | None = None
    medium: str | None = None
    thumbnail: str | None = None


class RandomUserResult(BaseModel):
    """One entry of the ``results`` array."""

    gender: str | None = None
    name: RandomUserName = Field(default_factory=RandomUserName)
    location: RandomUserLocation = Field(default_factory=RandomUserLocation)
    dob: RandomUserDob = Field(default_factory=RandomUserDob)
    picture: RandomUserPicture = Field(default_factory=RandomUserPicture)


class RandomUserResponse(BaseModel):
    results: list[RandomUserResult] = Field(default_factory=list)


class RandomUserParams(BaseModel):
    """Query params for the random-user endpoint."""

    results: int = 1
