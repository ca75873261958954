from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..models import ExplanationResult
from ..settings import settings

logger = logging.getLogger("explainer.ui")


class ExplainRequestFailed(Exception):
	"""Carries the single message the page shows when a request fails."""


class ExplainApiClient:
	def __init__(
		self,
		base_url: Optional[str] = None,
		*,
		transport: Optional[httpx.BaseTransport] = None,
	) -> None:
		self.base_url = base_url or settings.explainer_api_url
		self._transport = transport

	def explain(self, text: str) -> Dict[str, Any]:
		# One client per request; no client-side timeout, the page waits for the endpoint
		try:
			with httpx.Client(base_url=self.base_url, timeout=None, transport=self._transport) as client:
				r = client.post("/api/explain", json={"text": text})
		except httpx.HTTPError as err:
			logger.error("Explain request did not complete: %s", err)
			raise ExplainRequestFailed("Something went wrong. Try again.") from err
		try:
			data = r.json()
		except ValueError:
			data = None
		if not r.is_success:
			message = data.get("error") if isinstance(data, dict) else None
			raise ExplainRequestFailed(message or "Failed to generate explanation.")
		if not isinstance(data, dict):
			raise ExplainRequestFailed("Something went wrong. Try again.")
		# Never hand a partial result to the page
		try:
			ExplanationResult.model_validate(data)
		except ValidationError:
			logger.warning("Endpoint returned an incomplete explanation with keys %s", sorted(data))
			raise ExplainRequestFailed("Model returned an incomplete explanation. Try again.")
		return data
