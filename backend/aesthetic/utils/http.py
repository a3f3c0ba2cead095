"""Resolve an image reference into a base64 payload.

Callers may send raw base64, a data URI, an http(s) URL or a local file
path. Downloaded and local bytes are decoded with Pillow before use so a
truncated or non-image file fails here rather than inside a provider.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import io
from pathlib import Path

import httpx
import structlog
from PIL import Image, UnidentifiedImageError

from aesthetic.errors import NoImageData
from aesthetic.models.contracts import ImagePayload

log = structlog.get_logger("aesthetic.http")

DEFAULT_MIME_TYPE = "image/jpeg"


def sniff_mime_type(data: bytes) -> str | None:
    """Mime type from the image header, or ``None`` if Pillow can't tell."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError):
        return None


def _verified_mime_type(data: bytes, source: str) -> str:
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()  # Force full decode to catch truncation
            fmt = img.format or ""
    except (UnidentifiedImageError, OSError) as exc:
        log.warning("image_corrupt", source=source[:100])
        raise NoImageData() from exc
    return Image.MIME.get(fmt, DEFAULT_MIME_TYPE)


def _from_base64(value: str, mime_type: str | None, source_uri: str | None) -> ImagePayload:
    if value.startswith("data:"):
        header, _, value = value.partition(",")
        mime_type = mime_type or header[5:].split(";")[0] or None
    try:
        data = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise NoImageData() from exc
    if not data:
        raise NoImageData()
    return ImagePayload(
        base64=value,
        mime_type=mime_type or sniff_mime_type(data) or DEFAULT_MIME_TYPE,
        source_uri=source_uri,
    )


async def fetch_image_bytes(client: httpx.AsyncClient, url: str) -> bytes:
    """Download one image, rejecting non-image responses."""
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        log.warning("image_download_failed", url=url[:100], error=type(exc).__name__)
        raise NoImageData() from exc

    if response.status_code >= 400:
        log.warning("image_download_failed", url=url[:100], status=response.status_code)
        raise NoImageData()

    content_type = response.headers.get("content-type", "")
    if content_type and not content_type.startswith("image/"):
        log.warning("image_download_wrong_type", url=url[:100], content_type=content_type)
        raise NoImageData()
    return response.content


async def load_image_payload(
    image_uri: str | None,
    image_base64: str | None = None,
    mime_type: str | None = None,
    *,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ImagePayload | None:
    """``ImagePayload`` for the reference, ``None`` if nothing was referenced.

    Raises ``NoImageData`` when an image was referenced but could not be read.
    """
    if image_base64:
        return _from_base64(image_base64.strip(), mime_type, image_uri)

    uri = (image_uri or "").strip()
    if not uri:
        return None

    if uri.startswith("data:"):
        return _from_base64(uri, mime_type, None)

    if uri.lower().startswith(("http://", "https://")):
        async with httpx.AsyncClient(
            timeout=timeout, transport=transport, follow_redirects=True
        ) as client:
            data = await fetch_image_bytes(client, uri)
    else:
        path = Path(uri.removeprefix("file://"))
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            log.warning("image_read_failed", path=str(path)[:100])
            raise NoImageData() from exc

    detected = _verified_mime_type(data, uri)
    return ImagePayload(
        base64=base64.b64encode(data).decode("ascii"),
        mime_type=mime_type or detected,
        source_uri=uri,
    )
