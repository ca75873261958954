from __future__ import annotations
import json
from typing import Any, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from explainer.main import app
from explainer.openai_client import OpenAIClient
from explainer.routers.explain import get_client_factory
from explainer.settings import settings

SIX_SECTIONS = {
	"plain": "Bitcoin is digital money that no bank controls.",
	"sec30": "Bitcoin is a currency kept on a public ledger run by many computers.",
	"kid10": "Imagine a notebook everyone can read where nobody can erase a line.",
	"manager": "A decentralised payment network with volatile value and regulatory risk.",
	"linkedin": "Bitcoin in one paragraph: a shared ledger, scarce supply, no central issuer.",
	"tweet": "Bitcoin: money run by a network instead of a bank.",
}


def responses_envelope(text: str) -> dict:
	return {
		"id": "resp_test",
		"object": "response",
		"output": [
			{
				"type": "message",
				"role": "assistant",
				"content": [{"type": "output_text", "text": text, "annotations": []}],
			}
		],
	}


class FakeProvider:
	"""Stands in for the Responses API and records every request it receives."""

	def __init__(self) -> None:
		self.calls: List[httpx.Request] = []
		self.status_code = 200
		self.body: Any = responses_envelope(json.dumps(SIX_SECTIONS))
		self.error: Optional[Exception] = None

	def reply_text(self, text: str) -> None:
		self.body = responses_envelope(text)

	def handler(self, request: httpx.Request) -> httpx.Response:
		self.calls.append(request)
		if self.error is not None:
			raise self.error
		if isinstance(self.body, (dict, list)):
			return httpx.Response(self.status_code, json=self.body)
		return httpx.Response(self.status_code, text=self.body or "")

	def sent_payload(self, index: int = 0) -> dict:
		return json.loads(self.calls[index].content)


@pytest.fixture
def provider() -> FakeProvider:
	return FakeProvider()


@pytest.fixture
def configured(monkeypatch):
	monkeypatch.setattr(settings, "openai_api_key", "test-key")
	monkeypatch.setattr(settings, "openai_model", "gpt-4.1-mini")
	monkeypatch.setattr(settings, "openai_base_url", "https://api.openai.test/v1")
	monkeypatch.setattr(settings, "strict_result", False)
	monkeypatch.setattr(settings, "min_chars", 3)
	return settings


@pytest.fixture
def client(configured, provider):
	transport = httpx.MockTransport(provider.handler)
	app.dependency_overrides[get_client_factory] = lambda: (lambda: OpenAIClient(transport=transport))
	try:
		with TestClient(app) as c:
			yield c
	finally:
		app.dependency_overrides.pop(get_client_factory, None)
