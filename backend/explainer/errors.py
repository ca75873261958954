from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("explainer.api")


class ExplainError(Exception):
	"""Base class for failures that end an explain request with ``{"error": message}``."""

	status_code: int = 500

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message


class InputValidationError(ExplainError):
	status_code = 400


class ConfigurationError(ExplainError):
	status_code = 500


class UpstreamError(ExplainError):
	"""The provider could not be reached or answered with a non-success status."""

	status_code = 500

	def __init__(self, message: str, *, provider_status: int | None = None) -> None:
		super().__init__(message)
		self.provider_status = provider_status


class MalformedOutputError(ExplainError):
	status_code = 500


class UnexpectedServerError(ExplainError):
	status_code = 500


async def _explain_error_handler(request: Request, exc: ExplainError) -> JSONResponse:
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	logger.info("Rejected unreadable request body on %s", request.url.path)
	return JSONResponse(status_code=400, content={"error": "Request body must be JSON with a text field."})


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
	logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
	return JSONResponse(status_code=500, content={"error": str(exc) or "Unexpected server error."})


def register_error_handlers(app: FastAPI) -> None:
	app.add_exception_handler(ExplainError, _explain_error_handler)
	app.add_exception_handler(RequestValidationError, _request_validation_handler)
	app.add_exception_handler(Exception, _unexpected_error_handler)
