"""GET /api/identicon/{message} and POST /api/identicon: rendered identicon images."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from hashicon.config import Settings
from hashicon.dependencies import get_settings
from hashicon.engine.compositor import message_digest, render_identicon
from hashicon.engine.config import ConfigError, IdenticonConfig
from hashicon.models.requests import IdenticonOptions, IdenticonRequest
from hashicon.utils.imaging import encode_image, media_type_for, normalize_format

logger = logging.getLogger(__name__)

router = APIRouter()


def build_config(options: IdenticonOptions, settings: Settings) -> IdenticonConfig:
    """Validate request options on top of the service defaults (HTTP 422 on failure)."""
    size = options.size if options.size is not None else settings.default_size
    if size > settings.max_size:
        raise HTTPException(status_code=422, detail=f"size must not exceed {settings.max_size}")

    builder = IdenticonConfig.builder().size(size)
    builder.padding(options.padding if options.padding is not None else settings.default_padding)
    builder.hues(options.hues)
    if options.color_saturation is not None:
        builder.color_saturation(options.color_saturation)
    if options.grayscale_saturation is not None:
        builder.grayscale_saturation(options.grayscale_saturation)
    if options.background is not None:
        builder.background_color(options.background)

    try:
        return builder.build()
    except ConfigError as e:
        logger.warning("Rejected identicon options (%s): %s", e.kind.name, e)
        raise HTTPException(status_code=422, detail=str(e)) from e


def _image_response(hash_bytes: bytes, options: IdenticonOptions, settings: Settings) -> Response:
    try:
        fmt = normalize_format(options.format)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    config = build_config(options, settings)
    image = render_identicon(hash_bytes, config)
    logger.info("Rendered %dpx %s identicon", config.size, fmt)
    return Response(
        content=encode_image(image, fmt),
        media_type=media_type_for(fmt),
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
    )


@router.get("/identicon/{message}")
def identicon_for_message(
    message: str,
    options: Annotated[IdenticonOptions, Query()],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    return _image_response(message_digest(message), options, settings)


@router.post("/identicon")
def identicon(
    req: IdenticonRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    if req.hash is not None:
        hash_bytes = bytes.fromhex(req.hash)
    else:
        hash_bytes = message_digest(req.message or "")
    return _image_response(hash_bytes, req, settings)
