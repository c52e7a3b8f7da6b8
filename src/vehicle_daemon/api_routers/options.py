"""
Defines FastAPI APIRouter for decoding option-code strings.

This module includes routes for:
- Decoding an option-code string into a structured configuration and text report.
- Returning only the text report.
- Describing each token using the option catalog.
- Listing option codes the decoder has seen but could not place.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from option_decoder import describe_options
from vehicle_daemon import app_state
from vehicle_daemon.models import DecodedOptionsResponse, OptionCodesRequest, OptionDescription

logger = logging.getLogger(__name__)

api_router_options = APIRouter()  # FastAPI router for option decoding endpoints


@api_router_options.post("/options/decode", response_model=DecodedOptionsResponse)
async def decode_options(request: OptionCodesRequest):
    """
    Decode an option-code string.

    Unknown codes never cause an error; they show up as "Unknown" attributes and in
    ``configuration.unrecognized_codes``.
    """
    options = app_state.decode_option_codes(request.option_codes)
    return DecodedOptionsResponse(
        option_codes=request.option_codes,
        configuration=options.to_configuration(),
        report=options.report(),
        malformed_tokens=list(options.index.malformed),
    )


@api_router_options.post("/options/report", response_class=PlainTextResponse)
async def options_report(request: OptionCodesRequest):
    """Return the text report for an option-code string."""
    return app_state.decode_option_codes(request.option_codes).report()


@api_router_options.post("/options/describe", response_model=List[OptionDescription])
async def describe(request: OptionCodesRequest):
    """Describe each option code using the catalog and the known categories."""
    return [
        OptionDescription(code=code, description=description)
        for code, description in describe_options(request.option_codes, app_state.option_catalog)
    ]


@api_router_options.get("/unknown_codes", response_model=Dict[str, int])
async def get_unknown_codes():
    """Return every unrecognised option code seen so far, with how often it was seen."""
    return app_state.unknown_codes
