from __future__ import annotations
import json
import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..errors import ExplainError, InputValidationError, MalformedOutputError, UnexpectedServerError
from ..models import ErrorResponse, ExplainRequest, ExplanationResult
from ..openai_client import OpenAIClient
from ..prompts import build_explain_prompt
from ..settings import settings

logger = logging.getLogger("explainer.api")

router = APIRouter(prefix="/api", tags=["explain"])

ClientFactory = Callable[[], OpenAIClient]


def get_client_factory() -> ClientFactory:
	# Overridden in tests to point the client at a mock transport
	return OpenAIClient


def _reject_constant(name: str) -> Any:
	# NaN and Infinity are not JSON and cannot be rendered back out
	raise ValueError(f"invalid JSON constant {name}")


def parse_explanation(text: str, *, strict: bool = False) -> Any:
	try:
		data = json.loads(text, parse_constant=_reject_constant)
	except ValueError:
		# Fail loudly rather than guess at a partial answer
		raise MalformedOutputError("Model did not return valid JSON. Try again.")
	if strict:
		try:
			ExplanationResult.model_validate(data)
		except ValidationError:
			raise MalformedOutputError("Model returned an incomplete explanation. Try again.")
	return data


@router.post(
	"/explain",
	responses={
		200: {"model": ExplanationResult},
		400: {"model": ErrorResponse},
		500: {"model": ErrorResponse},
	},
)
async def explain(req: ExplainRequest, client_factory: ClientFactory = Depends(get_client_factory)):
	text = req.text.strip()
	if len(text) < settings.min_chars:
		raise InputValidationError(f"Please enter at least {settings.min_chars} characters.")
	try:
		async with client_factory() as client:
			out_text = await client.generate(build_explain_prompt(text))
	except ExplainError as err:
		logger.warning("Explain request failed: %s", err.message)
		raise
	except Exception as e:
		logger.exception("Unexpected error while calling the model")
		raise UnexpectedServerError(str(e) or "Unexpected server error.")
	if not out_text:
		logger.warning("Model response carried no output text")
		raise MalformedOutputError("No output received from model.")
	try:
		parsed = parse_explanation(out_text, strict=settings.strict_result)
	except MalformedOutputError as err:
		logger.warning("%s Raw output starts with: %r", err.message, out_text[:200])
		raise
	logger.info("Explained topic of %d characters", len(text))
	return JSONResponse(content=parsed)
