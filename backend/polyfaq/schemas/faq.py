"""FAQ request/response schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FAQCreateRequest(BaseModel):
    """POST /faqs request body. Text is in the canonical locale."""

    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)


class FAQResponse(BaseModel):
    """POST /faqs response body: the persisted FAQ with every locale map."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    question: dict[str, str]
    answer: dict[str, str]
    created_at: datetime
    updated_at: datetime


class TranslatedFAQ(BaseModel):
    """Single FAQ resolved to one locale. Also the cached list element."""

    question: str
    answer: str


class ErrorResponse(BaseModel):
    message: str
    error: str
