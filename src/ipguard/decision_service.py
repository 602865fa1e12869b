"""
Request-level orchestration a handler calls: image -> (cache | vision extractor) -> router.
Errors propagate; status_for_error suggests the HTTP status a handler should use.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from commons.logging_utils import get_logger

from entity.policy import RoutingResult
from ipguard.cache import ObservationCache, content_hash
from ipguard.decision import DecisionRouter, get_router
from ipguard.errors import (
    ImageTooLargeError,
    InvalidInputError,
    RouterError,
    UnclassifiedError,
    VisionParseError,
)
from ipguard.extractors import AttributeExtractor
from ipguard.policy import licensing_view

logger = get_logger(__name__)

_STATUS_BY_ERROR = (
    (InvalidInputError, 400),
    (ImageTooLargeError, 413),
    (VisionParseError, 422),
    (UnclassifiedError, 500),
)


def status_for_error(exc: BaseException) -> int:
    """Suggested HTTP status for a routing/vision error; 500 for anything unexpected."""
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 500


def error_body(exc: BaseException) -> Dict[str, Any]:
    """JSON error body in the shape handlers return."""
    body: Dict[str, Any] = {"error": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, VisionParseError):
        body["raw"] = exc.raw_text
    if isinstance(exc, ImageTooLargeError):
        body["max_size"] = exc.max_size
    if not isinstance(exc, RouterError):
        body["message"] = "analysis_failed"
    return body


def build_response(result: RoutingResult, raw: Optional[Dict[str, Any]] = None, cached: bool = False) -> Dict[str, Any]:
    """Serialize a routing result plus vision metadata for the client."""
    raw = raw or {}
    body = result.to_dict()
    body["group"] = body["category"]
    body["licensing"] = licensing_view(result.category, result.observation)
    body["title"] = raw.get("title") if isinstance(raw.get("title"), str) else ""
    body["description"] = raw.get("description") if isinstance(raw.get("description"), str) else ""
    body["cached"] = cached
    return body


class DecisionService:
    """Ties an extractor, an optional cache and a router together for one request at a time."""

    def __init__(
        self,
        extractor: AttributeExtractor,
        router: Optional[DecisionRouter] = None,
        cache: Optional[ObservationCache] = None,
    ):
        self.extractor = extractor
        self.router = router or get_router()
        self.cache = cache

    def _observe_image(self, image_bytes: bytes, mime_type: str) -> tuple[Dict[str, Any], bool]:
        if not image_bytes:
            raise InvalidInputError("No image data received", image_bytes)
        key = content_hash(image_bytes)
        if self.cache is not None:
            hit = self.cache.get(key)
            if hit is not None:
                logger.debug("Observation cache hit for %s", key[:12])
                return hit, True
        raw = self.extractor.extract(image_bytes, mime_type)
        if self.cache is not None:
            self.cache.set(key, raw)
        return raw, False

    def analyze_image(
        self,
        image_bytes: bytes,
        mime_type: str = "image/png",
        selfie_verified: Optional[bool] = None,
    ) -> Dict[str, Any]:
        raw, cached = self._observe_image(image_bytes, mime_type)
        result = self.router.route(raw, selfie_verified=selfie_verified)
        return build_response(result, raw, cached=cached)

    def route_payload(self, payload: Any, selfie_verified: Optional[bool] = None) -> Dict[str, Any]:
        """Route an already-extracted attribute mapping or licensing-router payload."""
        result = self.router.route(payload, selfie_verified=selfie_verified)
        return build_response(result, payload if isinstance(payload, dict) else None)
