"""FAQ endpoints."""

from fastapi import APIRouter, Depends, Query, status

from polyfaq.api.deps import get_read_service, get_write_service
from polyfaq.schemas.faq import (
    ErrorResponse,
    FAQCreateRequest,
    FAQResponse,
    TranslatedFAQ,
)
from polyfaq.services.faq.read import FAQReadService
from polyfaq.services.faq.write import FAQWriteService

router = APIRouter(prefix="/faqs", tags=["faqs"])


@router.get(
    "",
    response_model=list[TranslatedFAQ],
    responses={500: {"model": ErrorResponse}},
)
async def list_faqs(
    lang: str | None = Query(default=None, max_length=16),
    service: FAQReadService = Depends(get_read_service),
) -> list[TranslatedFAQ]:
    """List every FAQ resolved to ``lang`` (canonical locale by default)."""
    return await service.list_faqs(lang)


@router.post(
    "",
    response_model=FAQResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorResponse}},
)
async def create_faq(
    body: FAQCreateRequest,
    service: FAQWriteService = Depends(get_write_service),
) -> FAQResponse:
    """Create an FAQ, auto-translated into every supported locale."""
    faq = await service.create_faq(body.question, body.answer)
    return FAQResponse.model_validate(faq)
