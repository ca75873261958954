"""Small scripts run in the browser from the Streamlit page.

Streamlit components render inside a same-origin iframe, so the scripts
reach the page through ``window.parent``.
"""
from __future__ import annotations
import json

import streamlit.components.v1 as components

_COPY_SCRIPT = """<script>
// copy #{nonce}
(function () {{
  const text = {payload};
  function fallbackCopy() {{
    const doc = window.parent.document;
    const textarea = doc.createElement("textarea");
    textarea.value = text;
    textarea.style.position = "fixed";
    textarea.style.opacity = "0";
    doc.body.appendChild(textarea);
    textarea.select();
    doc.execCommand("copy");
    doc.body.removeChild(textarea);
  }}
  const clipboard = window.parent.navigator.clipboard;
  if (window.parent.isSecureContext && clipboard && clipboard.writeText) {{
    clipboard.writeText(text).catch(fallbackCopy);
  }} else {{
    fallbackCopy();
  }}
}})();
</script>"""

_SCROLL_SCRIPT = """<script>
(function () {{
  const target = window.parent.document.getElementById({anchor});
  if (target) {{
    setTimeout(function () {{ target.scrollIntoView({{ behavior: "smooth", block: "start" }}); }}, 50);
  }}
}})();
</script>"""


def _js_string(value: str) -> str:
	# Keep "</script>" inside the payload from closing the tag
	return json.dumps(value).replace("</", "<\\/")


def build_copy_script(text: str, nonce: int = 0) -> str:
	return _COPY_SCRIPT.format(payload=_js_string(text), nonce=nonce)


def build_scroll_script(anchor_id: str) -> str:
	return _SCROLL_SCRIPT.format(anchor=_js_string(anchor_id))


def copy_to_clipboard(text: str, nonce: int = 0) -> None:
	# A changing nonce makes Streamlit remount the iframe so repeated copies run again
	components.html(build_copy_script(text, nonce), height=0)


def scroll_into_view(anchor_id: str) -> None:
	components.html(build_scroll_script(anchor_id), height=0)
