"""Auth service request and response models."""

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Account creation payload."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Login response."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1, description="Bearer token")
    token_type: str = Field(default="bearer", description="Token type")
