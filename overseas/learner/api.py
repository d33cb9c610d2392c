"""
Async HTTP client for the learner-facing JSON endpoints.

Responses are parsed into the same camelCase schemas the server renders, so
both sides of the wire share one contract.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from overseas.schemas.auth import SessionResponse
from overseas.schemas.learn import (
    AccessResponse,
    EnrollResponse,
    LessonsResponse,
    ProgressUpdateResponse,
)
from overseas.schemas.payment import PurchaseResponse, VerifyPaymentResponse

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class APIError(Exception):
    """A request that failed or answered with a body the client cannot parse."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def extract_error_message(payload: Any, fallback: str) -> str:
    """Best-effort message from an error body, else ``fallback``."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        for key in ("message", "detail"):
            if isinstance(payload.get(key), str) and payload[key]:
                return payload[key]
    return fallback


class PlatformClient:
    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "PlatformClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        model: Type[ResponseModel],
        *,
        json: Optional[Dict[str, Any]] = None,
        fallback: str = "Request failed",
    ) -> ResponseModel:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise APIError(fallback) from e

        try:
            payload = response.json() if response.content else None
        except ValueError:
            payload = None
            if response.is_success:
                logger.warning(f"{method} {path} returned a non-JSON body")
                raise APIError(fallback, status_code=response.status_code)

        if not response.is_success:
            raise APIError(extract_error_message(payload, fallback), status_code=response.status_code, payload=payload)

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"{method} {path} returned an unexpected body: {e.error_count()} validation error(s)")
            raise APIError(fallback, status_code=response.status_code, payload=payload) from e

    async def get_session(self) -> SessionResponse:
        return await self._request("GET", "/api/auth/session", SessionResponse, fallback="Failed to check session")

    async def check_access(self, course_id: int) -> AccessResponse:
        return await self._request(
            "GET", f"/api/courses/{course_id}/access", AccessResponse, fallback="Failed to check course access"
        )

    async def get_lessons(self, course_id: int) -> LessonsResponse:
        return await self._request(
            "GET", f"/api/courses/{course_id}/lessons", LessonsResponse, fallback="Failed to load lessons"
        )

    async def record_progress(
        self, course_id: int, lesson_id: int, percentage: int, time_spent: Optional[int] = None
    ) -> ProgressUpdateResponse:
        body: Dict[str, Any] = {"lessonId": lesson_id, "progressPercentage": percentage}
        if time_spent is not None:
            body["timeSpent"] = time_spent
        return await self._request(
            "POST", f"/api/courses/{course_id}/progress", ProgressUpdateResponse,
            json=body, fallback="Failed to update progress",
        )

    async def enroll(self, course_id: int) -> EnrollResponse:
        return await self._request(
            "POST", f"/api/courses/{course_id}/enroll", EnrollResponse, fallback="Failed to enroll in course"
        )

    async def purchase(self, course_id: int) -> PurchaseResponse:
        return await self._request(
            "POST", f"/api/courses/{course_id}/purchase", PurchaseResponse, fallback="Failed to create payment order"
        )

    async def verify_payment(self, course_id: int, body: Dict[str, Any]) -> VerifyPaymentResponse:
        return await self._request(
            "POST", f"/api/courses/{course_id}/verify-payment", VerifyPaymentResponse,
            json=body, fallback="Payment verification failed",
        )
