"""Streamlit page for Explain Like I'm Busy.

Run with ``streamlit run backend/explainer/ui/streamlit_app.py`` while the API
is served at ``EXPLAINER_API_URL``.
"""
import streamlit as st

from explainer.models import EXAMPLES
from explainer.settings import settings
from explainer.ui.api_client import ExplainApiClient
from explainer.ui.browser import copy_to_clipboard, scroll_into_view
from explainer.ui.state import ExplainerState

RESULTS_ANCHOR = "results"

st.set_page_config(page_title="Explain Like I'm Busy", layout="centered")


def _queue_copy(text: str) -> None:
	# Callbacks run before the page renders, so the copy script is emitted later
	st.session_state["pending_copy"] = text
	st.session_state["copy_nonce"] = st.session_state.get("copy_nonce", 0) + 1


def _get_state() -> ExplainerState:
	if "explainer" not in st.session_state:
		st.session_state["explainer"] = ExplainerState(
			ExplainApiClient(settings.explainer_api_url),
			_queue_copy,
		)
	return st.session_state["explainer"]


state = _get_state()


def _on_input_change() -> None:
	state.set_input(st.session_state["topic"])


def _use_example(example: str) -> None:
	st.session_state["topic"] = example
	state.use_example(example)


def _clear() -> None:
	st.session_state["topic"] = ""
	state.clear()


def _render_results() -> None:
	pending = st.session_state.pop("pending_copy", None)
	if pending is not None:
		copy_to_clipboard(pending, st.session_state.get("copy_nonce", 0))
	sections = state.sections()
	if not sections:
		st.caption("Your result will appear here.")
		return
	for section in sections:
		with st.container(border=True):
			title_col, button_col = st.columns([4, 1])
			with title_col:
				st.subheader(section.meta.title)
				st.caption(section.meta.subtitle)
			with button_col:
				st.button(
					"Copied ✓" if section.copied else "Copy",
					key=f"copy_{section.meta.key}",
					help="Copy to clipboard",
					on_click=state.copy,
					args=(section.meta.key,),
				)
			st.write(section.text)


st.caption("Understand anything in 30 seconds")
st.title("Explain Like I’m Busy")
st.write(
	"Paste a topic. Get six versions: plain English, 30-second summary, kid mode, "
	"manager mode, LinkedIn post, and a tweet."
)

st.session_state.setdefault("topic", state.input_text)
state.set_input(st.session_state["topic"])

st.text_area(
	"What do you want explained?",
	key="topic",
	placeholder="e.g., Explain quantum computing",
	height=120,
	on_change=_on_input_change,
)

clear_col, explain_col = st.columns([1, 1])
with clear_col:
	st.button("Clear", on_click=_clear)
with explain_col:
	explain_slot = st.empty()
	explain_clicked = explain_slot.button("Explain like I’m busy 🚀", type="primary", disabled=not state.can_explain)

if explain_clicked:
	# Swap in a disabled button for the length of the request, then redraw the page
	explain_slot.button("Explaining…", type="primary", disabled=True, key="explaining")
	state.explain()
	st.rerun()

if state.error:
	st.error(state.error)

example_cols = st.columns(len(EXAMPLES))
for col, example in zip(example_cols, EXAMPLES):
	with col:
		st.button(example, key=f"example_{example}", on_click=_use_example, args=(example,))

st.markdown(f'<div id="{RESULTS_ANCHOR}"></div>', unsafe_allow_html=True)
# Re-run the panels on a timer while a result is shown so "Copied ✓" reverts on its own
refresh = state.copy_feedback_seconds / 2 if state.result is not None else None
st.fragment(run_every=refresh)(_render_results)()

if state.take_scroll_request():
	scroll_into_view(RESULTS_ANCHOR)
