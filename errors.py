# errors.py
"""
Application error taxonomy and the FastAPI handlers that map it to the
JSON error envelope: {"success": false, "error": ..., "step"?: ..., "details"?: ...}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
     """Base class for errors surfaced through the JSON error envelope."""
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

     def __init__(self, message: str, step: str | None = None, details=None):
          super().__init__(message)
          self.message = message
          self.step = step
          self.details = details

     def to_payload(self) -> dict:
          payload = {"success": False, "error": self.message}
          if self.step:
               payload["step"] = self.step
          if self.details is not None:
               payload["details"] = self.details
          return payload


class ValidationError(AppError):
     """Missing or invalid input. Raised before any side effect."""
     status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(AppError):
     """A required credential or setting is missing."""


class GatewayError(AppError):
     """Non-2xx response or transport failure from the payment gateway."""

     def __init__(self, message: str, upstream_status: int | None = None, upstream_body=None, step: str | None = None):
          details = None
          if upstream_status is not None or upstream_body is not None:
               details = {"upstream_status": upstream_status, "upstream_body": upstream_body}
          super().__init__(message, step=step, details=details)
          self.upstream_status = upstream_status
          self.upstream_body = upstream_body


class StoreError(AppError):
     """The persistence layer rejected a read or write."""


class NotFoundError(AppError):
     """An expected ledger row or gateway schedule entry is absent."""


def _validation_details(exc: RequestValidationError) -> dict:
     details = {}
     for err in exc.errors():
          loc = [str(part) for part in err.get("loc", ()) if part != "body"]
          details[".".join(loc) or "body"] = err.get("msg", "invalid")
     return details


async def app_error_handler(request: Request, exc: AppError):
     if exc.status_code >= 500:
          logger.error("%s %s failed at step=%s: %s", request.method, request.url.path, exc.step, exc.message)
     else:
          logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
     return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError):
     logger.warning("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
     return JSONResponse(
          status_code=status.HTTP_400_BAD_REQUEST,
          content={
               "success": False,
               "error": "Required fields are missing or invalid.",
               "details": _validation_details(exc),
          },
     )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
     if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
          message = "Route not found"
     else:
          message = exc.detail
     return JSONResponse(status_code=exc.status_code, content={"success": False, "error": message})


async def unhandled_exception_handler(request: Request, exc: Exception):
     logger.exception("Unhandled error on %s %s", request.method, request.url.path)
     return JSONResponse(
          status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
          content={"success": False, "error": "Internal server error"},
     )


def register_error_handlers(app: FastAPI) -> None:
     app.add_exception_handler(AppError, app_error_handler)
     app.add_exception_handler(RequestValidationError, request_validation_handler)
     app.add_exception_handler(StarletteHTTPException, http_exception_handler)
     app.add_exception_handler(Exception, unhandled_exception_handler)
