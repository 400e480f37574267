"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Resource payloads use the camelCase field names stored in MongoDB.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Annotated
from enum import Enum

from app.core.permissions import Role


# ============================================================
# SHARED FIELD TYPES
# ============================================================

HTTP_URL_PATTERN = r"^https?://.+"
PHONE_PATTERN = r"^[+]?[1-9]\d{0,15}$"

Language = Annotated[str, Field(min_length=2, max_length=50)]
Title = Annotated[str, Field(min_length=3, max_length=255)]
LongText = Annotated[str, Field(min_length=10)]
Category = Annotated[str, Field(min_length=2, max_length=100)]
Location = Annotated[str, Field(min_length=2, max_length=255)]
HttpUrl = Annotated[str, Field(pattern=HTTP_URL_PATTERN)]


class ResourcePayload(BaseModel):
    """Base for create/update bodies. Unknown keys are dropped."""
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    language: Language


# ============================================================
# ENUMS
# ============================================================

class TrainingType(str, Enum):
    video = "video"
    pdf = "pdf"
    text = "text"
    infographic = "infographic"


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobPayload(ResourcePayload):
    title: Title
    description: LongText
    category: Category
    location: Location


# ============================================================
# TRAINING CONTENT SCHEMAS
# ============================================================

class TrainingPayload(ResourcePayload):
    title: Title
    type: TrainingType
    url: HttpUrl
    # may be omitted, but an explicit null is rejected
    description: str = Field(None, max_length=1000)


# ============================================================
# MARKETPLACE SCHEMAS
# ============================================================

class ContactInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    phone: str = Field(..., pattern=PHONE_PATTERN)
    email: EmailStr
    address: LongText

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()


class MarketplacePayload(ResourcePayload):
    businessName: str = Field(..., min_length=2, max_length=255)
    ownerName: str = Field(..., min_length=2, max_length=255)
    productService: LongText
    contact: ContactInfo
    location: Location


# ============================================================
# SCHEME SCHEMAS
# ============================================================

class SchemePayload(ResourcePayload):
    title: Title
    description: LongText
    eligibility: LongText
    link: HttpUrl
    category: Category


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: Role = Role.user

    @field_validator("role")
    @classmethod
    def no_self_elevation(cls, value: Role) -> Role:
        if value == Role.admin:
            raise ValueError("admin accounts cannot be self-registered")
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: Role
