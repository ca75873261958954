from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, Optional
from .errors import ConfigurationError, UpstreamError
from .settings import settings

logger = logging.getLogger("explainer.openai")


def extract_output_text(data: Any) -> str:
	"""Pull the generated text out of a Responses API envelope.

	Accepts the structured shape (``output[*].content[*]`` with an ``output_text``
	item) and the flattened ``output_text`` field some SDKs and proxies return.
	Returns an empty string when neither shape carries text.
	"""
	if not isinstance(data, dict):
		return ""
	output = data.get("output")
	if isinstance(output, list):
		for item in output:
			if not isinstance(item, dict):
				continue
			content = item.get("content")
			if not isinstance(content, list):
				continue
			for part in content:
				if isinstance(part, dict) and part.get("type") == "output_text":
					text = part.get("text")
					if isinstance(text, str) and text:
						return text
	flattened = data.get("output_text")
	if isinstance(flattened, str):
		return flattened
	return ""


class OpenAIClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.openai_api_key
		if not self.api_key:
			raise ConfigurationError("Missing OPENAI_API_KEY in environment")
		self.model = model or settings.openai_model
		self.base_url = (base_url or settings.openai_base_url).rstrip("/")
		self._client = httpx.AsyncClient(
			timeout=timeout if timeout is not None else settings.openai_timeout_seconds,
			transport=transport,
		)

	async def generate(self, prompt: str) -> str:
		payload: Dict[str, Any] = {"model": self.model, "input": prompt}
		headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		try:
			r = await self._client.post(f"{self.base_url}/responses", headers=headers, json=payload)
		except httpx.RequestError as net_err:
			logger.error("OpenAI request failed: %s", net_err)
			raise UpstreamError(f"OpenAI request failed: {net_err}") from net_err
		if not r.is_success:
			logger.warning("OpenAI returned status %s", r.status_code)
			raise UpstreamError(f"OpenAI error ({r.status_code}): {r.text}", provider_status=r.status_code)
		try:
			data = r.json()
		except ValueError:
			logger.warning("OpenAI returned a non-JSON envelope")
			return ""
		return extract_output_text(data)

	async def aclose(self) -> None:
		await self._client.aclose()

	async def __aenter__(self) -> "OpenAIClient":
		return self

	async def __aexit__(self, *exc_info: Any) -> None:
		await self.aclose()
