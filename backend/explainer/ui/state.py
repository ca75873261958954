"""Page state for the explainer UI.

Holds everything the page shows (input, loading flag, result, error and the
section that was just copied) and applies the transitions between them. The
Streamlit script renders this object; nothing here imports Streamlit.
"""
from __future__ import annotations
import logging
import time
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Protocol

from ..models import SECTION_META, SectionMeta, section_text
from ..settings import settings
from .api_client import ExplainRequestFailed

logger = logging.getLogger("explainer.ui")

COPY_FEEDBACK_SECONDS = 1.2


class ExplainApi(Protocol):
	def explain(self, text: str) -> Dict[str, Any]: ...


class SectionView(NamedTuple):
	meta: SectionMeta
	text: str
	copied: bool


class ExplainerState:
	def __init__(
		self,
		api: ExplainApi,
		clipboard: Callable[[str], None],
		*,
		clock: Callable[[], float] = time.monotonic,
		copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
		min_chars: Optional[int] = None,
	) -> None:
		self._api = api
		self._clipboard = clipboard
		self._clock = clock
		self.copy_feedback_seconds = copy_feedback_seconds
		self.min_chars = min_chars if min_chars is not None else settings.min_chars
		self._input = ""
		self.is_loading = False
		self.result: Optional[Dict[str, Any]] = None
		self.error: Optional[str] = None
		self._copied_key: Optional[str] = None
		self._copied_at = 0.0
		self._scroll_requested = False

	@property
	def input_text(self) -> str:
		return self._input

	@property
	def can_explain(self) -> bool:
		return len(self._input.strip()) >= self.min_chars and not self.is_loading

	@property
	def copied_key(self) -> Optional[str]:
		if self._copied_key is not None and self._clock() - self._copied_at >= self.copy_feedback_seconds:
			self._copied_key = None
		return self._copied_key

	def set_input(self, text: str) -> None:
		if text == self._input:
			return
		self._input = text
		self._reset_output()

	def use_example(self, example: str) -> None:
		self._input = example
		self._reset_output()

	def clear(self) -> None:
		self._input = ""
		self._reset_output()

	def explain(self) -> bool:
		"""Send the current input; returns True when a new result arrived."""
		if not self.can_explain:
			return False
		self.error = None
		self._copied_key = None
		self.is_loading = True
		try:
			self.result = self._api.explain(self._input)
			self._scroll_requested = True
			return True
		except ExplainRequestFailed as err:
			self.error = str(err) or "Something went wrong. Try again."
			self.result = None
		except Exception:
			logger.exception("Explain request raised unexpectedly")
			self.error = "Something went wrong. Try again."
			self.result = None
		finally:
			self.is_loading = False
		return False

	def copy(self, key: str) -> bool:
		if self.result is None:
			return False
		self._clipboard(section_text(self.result, key))
		self._copied_key = key
		self._copied_at = self._clock()
		return True

	def take_scroll_request(self) -> bool:
		requested, self._scroll_requested = self._scroll_requested, False
		return requested

	def sections(self) -> List[SectionView]:
		if self.result is None:
			return []
		copied = self.copied_key
		return [SectionView(meta, section_text(self.result, meta.key), meta.key == copied) for meta in SECTION_META]

	def _reset_output(self) -> None:
		self.result = None
		self.error = None
		self._copied_key = None
		self._scroll_requested = False
