from __future__ import annotations
from typing import Any, Dict, List, NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator


SECTION_KEYS: List[str] = ["plain", "sec30", "kid10", "manager", "linkedin", "tweet"]


class SectionMeta(NamedTuple):
	key: str
	title: str
	subtitle: str


# Display order of the result panels
SECTION_META: List[SectionMeta] = [
	SectionMeta("plain", "Plain English", "Simple, clear explanation"),
	SectionMeta("sec30", "30-second version", "Fast, punchy summary"),
	SectionMeta("kid10", "Like I am 10", "Kid-friendly clarity"),
	SectionMeta("manager", "For a non-tech manager", "Business-safe wording"),
	SectionMeta("linkedin", "LinkedIn post", "Ready to paste"),
	SectionMeta("tweet", "Tweet", "Short and sharp"),
]

EXAMPLES: List[str] = [
	"Explain inflation",
	"Explain Bitcoin",
	"Explain React hooks",
	"Explain startup equity",
	"Explain what an API is",
]


class ExplainRequest(BaseModel):
	text: str = ""

	@field_validator("text", mode="before")
	@classmethod
	def _coerce_text(cls, value: Any) -> str:
		# Missing or null text counts as empty; anything else is stringified
		if value is None:
			return ""
		return value if isinstance(value, str) else str(value)


class ExplanationResult(BaseModel):
	model_config = ConfigDict(extra="forbid", strict=True)

	plain: str
	sec30: str
	kid10: str
	manager: str
	linkedin: str
	tweet: str


class ErrorResponse(BaseModel):
	error: str


def section_text(result: Dict[str, Any], key: str) -> str:
	value = result.get(key)
	return value if isinstance(value, str) else ""
