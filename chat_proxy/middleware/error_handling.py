"""
Error handling middleware.
Centralizes error handling and response formatting for the chat proxy.
"""
import json
import logging
import traceback
from typing import Callable, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.utils.errors import ChatProxyError, UnknownChatError

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def _get_request_body(self, request: Request) -> Optional[dict]:
        """
        Safely extract request body for error logging.
        """
        try:
            if hasattr(request.state, "body"):
                body_bytes = request.state.body
            else:
                body_bytes = await request.body()
                request.state.body = body_bytes

            if not body_bytes:
                return None

            body_str = body_bytes.decode("utf-8")
            return json.loads(body_str)
        except Exception:
            return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except ChatProxyError as e:
            logger.warning(
                "Chat proxy error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": e.status_code,
                    "error": e.error,
                    "details": e.details,
                },
            )
            return JSONResponse(status_code=e.status_code, content=e.to_content())

        except Exception as e:
            # Get request body for context
            body = await self._get_request_body(request)

            # Get full traceback for dev mode
            tb_str = traceback.format_exc()

            from chat_proxy.config.settings import get_settings

            try:
                is_production = get_settings().is_production
            except Exception:
                is_production = True  # Default to production mode for safety

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "request_body": body,
                    "traceback": tb_str if not is_production else None,
                },
                exc_info=True,
            )

            # Clients only ever see the generic failure body
            fallback = UnknownChatError()
            return JSONResponse(
                status_code=fallback.status_code,
                content=fallback.to_content(),
            )
