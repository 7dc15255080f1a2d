"""Problem Details — RFC-7807 bodies, the status-to-problem map, and the middleware applying it.

Invariants:
    - Every error response leaves the service as application/problem+json
    - Status -> ProblemType mapping lives here and only here; unknown statuses map to 500
    - Responses already carrying application/problem+json pass through unchanged
    - Unhandled exceptions inside handlers become a 500 problem; the process keeps serving
    - Exception text reaches `detail` only when expose_error_details is enabled

Design Decisions:
    - Post-processing middleware over per-handler mapping: the router's own 404/405,
      FastAPI's default handlers, and any handler returning a bare error status all
      get the same treatment
    - Only statuses >= 400 are rewritten: 3xx redirects (trailing slash) stay intact
"""

import json
import logging

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from user_service.config import get_settings
from user_service.core.domain_types import ProblemType
from user_service.core.errors import FieldError

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"

# Headers worth keeping when a plain error response is rewritten
_PRESERVED_HEADERS = ("allow", "retry-after", "www-authenticate")

_STATUS_PROBLEM: dict[int, ProblemType] = {
    400: ProblemType.BAD_REQUEST,
    404: ProblemType.NOT_FOUND,
    405: ProblemType.METHOD_NOT_ALLOWED,
    409: ProblemType.DUPLICATE_EMAIL,
    415: ProblemType.UNSUPPORTED_MEDIA_TYPE,
    422: ProblemType.INVALID_JSON,
    500: ProblemType.INTERNAL_SERVER_ERROR,
    503: ProblemType.SERVICE_UNAVAILABLE,
}


class ProblemResponse(JSONResponse):
    media_type = PROBLEM_MEDIA_TYPE


def problem_for_status(status_code: int) -> ProblemType:
    """Map any error status to its problem kind; unknown statuses are internal errors."""
    return _STATUS_PROBLEM.get(status_code, ProblemType.INTERNAL_SERVER_ERROR)


def build_problem(
    problem: ProblemType,
    instance: str | None = None,
    detail: str | None = None,
    title: str | None = None,
    errors: list[FieldError] | None = None,
) -> dict:
    """Build the problem-details body. Optional members are omitted, never null."""
    body = {
        "type": f"{get_settings().problem_type_base_url}{problem.value}",
        "title": title or problem.title,
        "status": problem.status,
    }
    if detail:
        body["detail"] = detail
    if instance:
        body["instance"] = instance
    if errors:
        body["errors"] = [e.to_dict() for e in errors]
    return body


def problem_response(
    problem: ProblemType,
    instance: str | None = None,
    detail: str | None = None,
    title: str | None = None,
    errors: list[FieldError] | None = None,
    headers: dict[str, str] | None = None,
) -> ProblemResponse:
    return ProblemResponse(
        status_code=problem.status,
        content=build_problem(problem, instance, detail, title, errors),
        headers=headers,
    )


def is_problem_response(response: Response) -> bool:
    content_type = response.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == PROBLEM_MEDIA_TYPE


class ProblemDetailsMiddleware(BaseHTTPMiddleware):
    """Rewrite every non-problem error response, and every escaped exception, as problem details."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={"path": request.url.path, "method": request.method},
            )
            detail = str(exc) if get_settings().expose_error_details else None
            return problem_response(
                ProblemType.INTERNAL_SERVER_ERROR,
                instance=request.url.path,
                detail=detail,
            )

        if response.status_code < 400 or is_problem_response(response):
            return response

        problem = problem_for_status(response.status_code)
        detail = await _read_detail(response)
        if detail in (problem.title, None) or problem is ProblemType.INTERNAL_SERVER_ERROR:
            detail = None
        logger.info(
            f"Mapped {response.status_code} on {request.url.path} to {problem.value}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "problem_type": problem.value,
            },
        )
        headers = {
            name: response.headers[name]
            for name in _PRESERVED_HEADERS if name in response.headers
        }
        return problem_response(
            problem, instance=request.url.path, detail=detail, headers=headers,
        )


async def _read_detail(response: Response) -> str | None:
    """Drain the original body and pull a string `detail` out of it, if it has one."""
    chunks = []
    async for chunk in response.body_iterator:
        chunks.append(chunk if isinstance(chunk, bytes) else chunk.encode())
    try:
        payload = json.loads(b"".join(chunks) or b"null")
    except (ValueError, UnicodeDecodeError):
        return None
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    return None
