"""
Schemas module - Request payload schemas for API endpoints.
"""

from app.schemas.schemas import (
    ContactInfo, JobPayload, LoginRequest, MarketplacePayload, RegisterRequest,
    ResourcePayload, SchemePayload, TrainingPayload, TrainingType, UserResponse
)

__all__ = [
    "ContactInfo", "JobPayload", "LoginRequest", "MarketplacePayload", "RegisterRequest",
    "ResourcePayload", "SchemePayload", "TrainingPayload", "TrainingType", "UserResponse",
]
