from __future__ import annotations

from .models import SECTION_KEYS


def build_explain_prompt(topic: str) -> str:
	output_format = ",\n".join(f'  "{key}": "..."' for key in SECTION_KEYS)
	return (
		"You are a clarity-first explainer.\n\n"
		"TASK:\n"
		"Explain the user's topic in 6 formats.\n\n"
		"RULES:\n"
		"- Be accurate and practical.\n"
		"- Use simple language.\n"
		"- Avoid filler and hype.\n"
		"- No emojis.\n"
		"- Keep each section concise.\n\n"
		"OUTPUT FORMAT (must be valid JSON with these exact keys):\n"
		"{\n"
		f"{output_format}\n"
		"}\n\n"
		"TOPIC:\n"
		f"{topic}"
	)
