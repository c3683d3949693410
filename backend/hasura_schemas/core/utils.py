from __future__ import annotations

from urllib.parse import urlparse

from fastapi import HTTPException


def is_http_url(value: str) -> bool:
    return urlparse(value).scheme in {"http", "https"}


def validate_http_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"}:
        raise HTTPException(status_code=400, detail="endpointUrl must be http or https")
    if not parsed.netloc:
        raise HTTPException(status_code=400, detail="endpointUrl is missing host")
