# api/v1/recs.py
from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse

from core.recommender import assess
from core.render import render_html
from api.v1.schemas import RecRequest, RecResponse

router = APIRouter()
_LOG = logging.getLogger(__name__)


@router.post("", response_model=RecResponse, status_code=status.HTTP_200_OK)
def recommend(body: RecRequest) -> RecResponse:
    bundle = assess(body)
    _LOG.info("recommendation served (class=%s)", bundle.bmi_class.value)
    return RecResponse.model_validate(bundle.model_dump())


@router.post(
    "/html",
    response_class=HTMLResponse,
    status_code=status.HTTP_200_OK,
    summary="Same as POST /recommendations, rendered as an HTML fragment",
)
def recommend_html(body: RecRequest) -> HTMLResponse:
    bundle = assess(body)
    _LOG.info("recommendation rendered (class=%s)", bundle.bmi_class.value)
    return HTMLResponse(render_html(bundle))
