"""Request and response models shared by the API endpoints.

Field names follow the camelCase keys of the public JSON interface. Empty
strings are rejected like missing fields.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class RegisterUserRequest(BaseModel):
    """Registration request model for validation."""

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Email address")


class RegisterUserResponseModel(BaseModel):
    """Registration response model."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", description="Identifier derived from the email")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")


class ChatRequest(BaseModel):
    """Chat request model for validation."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, description="User identifier")
    message: str = Field(..., min_length=1, description="User's message")


class ChatResponseModel(BaseModel):
    """Chat response model."""

    reply: str = Field(..., description="Generated reply text")


class MessagesRequest(BaseModel):
    """History request model for validation."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, description="User identifier")


class MessagesResponseModel(BaseModel):
    """History response model."""

    messages: List[Dict[str, Any]] = Field(
        default_factory=list, description="Stored chat exchanges of the user"
    )
