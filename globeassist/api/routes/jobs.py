"""Professional job endpoints (apply-link resolution)."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from globeassist.agents.apply_link import ApplyLinkResolver
from globeassist.api.dependencies import get_apply_link_resolver
from globeassist.api.limiter import limiter
from globeassist.api.schemas import ApplyLinkResponse, ErrorResponse
from globeassist.config import settings
from globeassist.models import InvalidJobError

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Job title or company missing"},
    500: {"model": ErrorResponse, "description": "Malformed body or internal failure"},
}


async def _resolve_from_request(
    request: Request,
    resolver: ApplyLinkResolver,
    validate_link: bool | None = None,
):
    try:
        body = await request.json()
        job = body.get("job")

        result = await run_in_threadpool(resolver.resolve, job, validate_link)
        return ApplyLinkResponse(link=result.link)

    except InvalidJobError:
        return JSONResponse(status_code=400, content={"error": "Invalid job data"})
    except Exception:
        logger.exception("Error fetching job apply link")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch application link"})


@router.post("/apply-link", response_model=ApplyLinkResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def get_apply_link(
    request: Request,
    resolver: ApplyLinkResolver = Depends(get_apply_link_resolver),
):
    """Resolve the application link for a job: `{job}` -> `{link}`."""
    return await _resolve_from_request(request, resolver)


@router.post("/{country_name}/apply-link", response_model=ApplyLinkResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def get_country_apply_link(
    country_name: str,
    request: Request,
    resolver: ApplyLinkResolver = Depends(get_apply_link_resolver),
):
    """Same as /apply-link for the country job pages, with link validation on."""
    logger.info(f"Apply link requested from the {country_name} job listings")
    return await _resolve_from_request(request, resolver, validate_link=True)
