"""Chatrelay - Streamlit chat UI.

Pick a model in the sidebar, optionally paste your own API keys in the
settings panel, and chat.  Keys and theme are stored locally and sent to the
relay server only as per-request headers.
"""

from __future__ import annotations

import os

import httpx
import streamlit as st

from chatrelay.client import ChatAPIClient, ChatSession, SettingsStore
from chatrelay.client.settings_store import ApiKeys

# ── Configuration ─────────────────────────────────────────────────────────────

API_BASE = os.environ.get("CHATRELAY_API_BASE", "http://localhost:8000/api")
HEALTH_URL = API_BASE.rsplit("/api", 1)[0] + "/health"

# Shown when the server's model list is unavailable.
FALLBACK_MODELS = [
    {"id": "gemini", "name": "Gemini"},
    {"id": "gpt-4", "name": "GPT-4"},
    {"id": "claude-3", "name": "Claude 3"},
    {"id": "openrouter", "name": "OpenRouter"},
    {"id": "grok", "name": "Grok"},
    {"id": "deepseek", "name": "DeepSeek"},
    {"id": "mistral", "name": "Mistral"},
]

KEY_LABELS = {
    "gemini": "Google Gemini",
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "openrouter": "OpenRouter",
    "grok": "Grok (xAI)",
    "deepseek": "DeepSeek",
}

LIGHT_THEME_CSS = """
<style>
.stApp { background-color: #ffffff; color: #111827; }
section[data-testid="stSidebar"] { background-color: #f9fafb; }
</style>
"""


# ── State ─────────────────────────────────────────────────────────────────────

store = SettingsStore()

if "settings" not in st.session_state:
    st.session_state.settings = store.load()

if "client" not in st.session_state:
    st.session_state.client = ChatAPIClient(api_base=API_BASE)


def _update_settings(new_settings) -> None:
    """Persist a settings change immediately."""
    st.session_state.settings = new_settings
    store.save(new_settings)


def _load_models() -> list[dict]:
    if "models_cache" not in st.session_state:
        st.session_state.models_cache = (
            st.session_state.client.list_models() or FALLBACK_MODELS
        )
    return st.session_state.models_cache


# ── Page Config ───────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Chatrelay",
    page_icon="💬",
    layout="wide",
    initial_sidebar_state="expanded",
)

if st.session_state.settings.theme == "light":
    st.markdown(LIGHT_THEME_CSS, unsafe_allow_html=True)

# ── Sidebar ───────────────────────────────────────────────────────────────────

st.sidebar.title("💬 Chatrelay")

try:
    health = httpx.get(HEALTH_URL, timeout=3).json()
    st.sidebar.success(f"API connected  (v{health.get('version', '?')})", icon="✅")
except (httpx.HTTPError, ValueError):
    st.sidebar.error("API unreachable", icon="🔴")

st.sidebar.divider()

models = _load_models()
model_names = {m["id"]: m["name"] for m in models}
selected_model = st.sidebar.radio(
    "Model",
    list(model_names),
    format_func=lambda mid: model_names[mid],
)

if "chat" not in st.session_state:
    st.session_state.chat = ChatSession(st.session_state.client, selected_model)
chat: ChatSession = st.session_state.chat
if chat.model != selected_model:
    chat.select_model(selected_model)

st.sidebar.divider()

if st.sidebar.button("New chat", use_container_width=True):
    st.session_state.chat = ChatSession(st.session_state.client, selected_model)
    st.rerun()

# ── Settings ──────────────────────────────────────────────────────────────────

with st.sidebar.expander("⚙️ Settings"):
    current = st.session_state.settings
    dark = st.toggle("Dark mode", value=current.theme == "dark")
    theme = "dark" if dark else "light"
    if theme != current.theme:
        _update_settings(current.model_copy(update={"theme": theme}))
        st.rerun()

    st.markdown("**API Keys**")
    st.caption("Stored locally. Leave blank to use the server's keys.")
    for vendor in ApiKeys.model_fields:
        value = st.text_input(
            KEY_LABELS.get(vendor, vendor),
            value=getattr(st.session_state.settings.api_keys, vendor),
            type="password",
            key=f"key_{vendor}",
        )
        if value != getattr(st.session_state.settings.api_keys, vendor):
            _update_settings(st.session_state.settings.with_api_key(vendor, value))

# ── Chat ──────────────────────────────────────────────────────────────────────

st.title(model_names.get(selected_model, selected_model))

for message in chat.messages:
    with st.chat_message(message.role):
        st.markdown(message.content)

prompt = st.chat_input(
    f"Message {model_names.get(selected_model, selected_model)}...",
    disabled=chat.pending,
)
if prompt:
    with st.chat_message("user"):
        st.markdown(prompt)
    with st.chat_message("assistant"):
        with st.spinner("Thinking..."):
            reply = chat.submit(prompt, st.session_state.settings.api_keys)
        if reply is not None:
            st.markdown(reply.content)

st.caption("AI can make mistakes. Consider checking important information.")
