from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.core.config import get_settings
from schemas.script_generation import (
    ProviderStatusResponse,
    ScriptGenerationRequest,
    ScriptGenerationResponse,
)
from services.errors import ProviderUnavailableError, UpstreamError, ValidationError
from services.providers.base import ProviderConfig
from services.script_generator import ScriptGeneratorService
from services.script_models import GenerationRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scripts"])


def get_script_generator() -> ScriptGeneratorService:
    return ScriptGeneratorService(ProviderConfig.from_settings(get_settings()))


@router.post(
    "/generate-script",
    response_model=ScriptGenerationResponse,
    response_model_by_alias=True,
)
async def generate_script(
    payload: ScriptGenerationRequest,
    service: ScriptGeneratorService = Depends(get_script_generator),
) -> ScriptGenerationResponse:
    request = GenerationRequest(
        product_name=payload.product_name,
        audience=payload.audience,
        description=payload.description,
        key_features=payload.key_features,
        pain_points=payload.pain_points,
        tone=payload.tone,
        format=payload.format,
        template=payload.template,
        audience_type=payload.audience_type,
    )

    try:
        result = await service.generate(request)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ProviderUnavailableError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except UpstreamError as exc:
        status_code = 401 if exc.authentication else 502
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc

    return ScriptGenerationResponse(script=result.script, talking_points=result.talking_points)


@router.get("/provider-status", response_model=ProviderStatusResponse)
async def provider_status(
    service: ScriptGeneratorService = Depends(get_script_generator),
) -> ProviderStatusResponse:
    status = service.status()
    if not status.configured:
        logger.warning("Provider %s selected without an API key", status.provider)
    return ProviderStatusResponse(provider=status.provider, configured=status.configured)
