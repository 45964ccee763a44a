"""Auth Schemas — registration, login and caller profile.

Invariants:
    - RegistrationRequest mirrors the participant sign-up form; role is not accepted
    - username >= 3 chars, password >= 6 chars, phone >= 10 chars, email well-formed
    - Text fields are stripped; passwords are kept exactly as sent
"""

from typing import Annotated

from pydantic import EmailStr, Field, StringConstraints

from makesta.schemas.base import CamelModel, CamelRequest, UserSummary
from makesta.schemas.participant import ParticipantProfile
from makesta.schemas.instructor import InstructorProfile

# Profile fields copied verbatim onto the Participant row
PROFILE_FIELDS = (
    "birth_place", "address", "elementary_school", "junior_high_school",
    "senior_high_school", "purpose", "organization_experience",
    "interests", "talents", "motto",
)

# Passwords are compared byte for byte: never stripped
RawPassword = Annotated[str, StringConstraints(strip_whitespace=False)]


class RegistrationRequest(CamelRequest):
    username: str = Field(min_length=3, max_length=100)
    password: RawPassword = Field(min_length=6, max_length=128)
    full_name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(min_length=10, max_length=30)

    birth_place: str = Field(min_length=1, max_length=200)
    address: str = Field(min_length=1)
    elementary_school: str = Field(min_length=1, max_length=200)
    junior_high_school: str | None = Field(None, max_length=200)
    senior_high_school: str | None = Field(None, max_length=200)
    purpose: str = Field(min_length=1)
    organization_experience: str | None = None
    interests: str = Field(min_length=1)
    talents: str = Field(min_length=1)
    motto: str | None = None

    def profile(self) -> dict:
        return self.model_dump(include=set(PROFILE_FIELDS))


class LoginRequest(CamelRequest):
    username: str = Field(min_length=1)
    password: RawPassword = Field(min_length=1)


class AuthResponse(CamelModel):
    message: str
    user: UserSummary
    token: str


class MeResponse(UserSummary):
    participant: ParticipantProfile | None = None
    instructor: InstructorProfile | None = None
