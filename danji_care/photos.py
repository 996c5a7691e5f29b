"""Read submitted photo files into data URLs, all or nothing."""

import base64
import logging
import mimetypes
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Sequence

from danji_care.exceptions import PhotoReadError

logger = logging.getLogger(__name__)


def read_as_data_url(source: Any) -> str:
    """Encode one photo as a ``data:`` URL.

    ``source`` may be a path, raw bytes, a binary file object, or an
    already-encoded data URL (returned unchanged).
    """
    if isinstance(source, str) and source.startswith("data:"):
        return source
    if isinstance(source, (str, Path)):
        name = str(source)
        payload = Path(source).read_bytes()
    elif isinstance(source, (bytes, bytearray)):
        name = ""
        payload = bytes(source)
    else:
        name = getattr(source, "name", "") or ""
        payload = source.read()
    if not isinstance(payload, (bytes, bytearray)):
        raise TypeError(f"Photo {name or source!r} is not opened in binary mode")
    mime = mimetypes.guess_type(str(name))[0] or "application/octet-stream"
    return f"data:{mime};base64,{base64.b64encode(payload).decode('ascii')}"


def read_photos(files: Sequence[Any], max_workers: int = 4) -> list[str]:
    """Read every file concurrently and join the results in input order.

    Raises
    ------
    PhotoReadError
        If any single file fails; no partial result is returned.
    """
    if not files:
        return []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(files))) as pool:
        futures = [pool.submit(read_as_data_url, f) for f in files]
        try:
            urls = [future.result() for future in futures]
        except (OSError, TypeError, ValueError, AttributeError) as exc:
            raise PhotoReadError(f"Reading {len(files)} photos failed: {exc}") from exc
    logger.debug("Read %d photos", len(urls))
    return urls
