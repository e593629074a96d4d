# ui/generator_page.py
from __future__ import annotations
import json
from typing import MutableMapping

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components
from loguru import logger

from core.config import get_settings
from core.history import PasswordHistory
from core.password_utils import (
    MAX_LENGTH,
    MIN_LENGTH,
    CharacterClass,
    GenerationConfig,
    RandomSourceError,
    estimate_strength,
    generate,
    strength_breakdown,
    validation_message,
)
from core.settings_store import SettingsStore

# session_state keys for the form controls
_FLAG_KEYS = {
    "pw_upper": CharacterClass.UPPER,
    "pw_lower": CharacterClass.LOWER,
    "pw_digits": CharacterClass.DIGIT,
    "pw_symbols": CharacterClass.SYMBOL,
}


# Widget keys are dropped by Streamlit on runs where the widget isn't drawn
# (e.g. another page is shown), so each value also lives under "_<key>".
_WIDGET_KEYS = ("pw_length", *_FLAG_KEYS, "pw_easy")


def _shadow(key: str) -> str:
    return "_" + key


def _store() -> SettingsStore:
    s = get_settings()
    return SettingsStore(s.settings_path, s.settings_key)


def init_state(state: MutableMapping, config: GenerationConfig, history_size: int) -> None:
    """Seed form values from a loaded config (first run of a session only)."""
    if "pw_history" in state:
        return
    state[_shadow("pw_length")] = config.length
    for key, cls_ in _FLAG_KEYS.items():
        state[_shadow(key)] = config.uses(cls_)
    state[_shadow("pw_easy")] = config.easy_to_read
    state["pw_history"] = PasswordHistory(history_size)
    state["pw_current"] = ""
    state["pw_error"] = ""


def restore_widgets(state: MutableMapping) -> None:
    for key in _WIDGET_KEYS:
        state[key] = state[_shadow(key)]


def remember(state: MutableMapping, key: str) -> None:
    state[_shadow(key)] = state[key]


def config_from_state(state: MutableMapping) -> GenerationConfig:
    return GenerationConfig(
        length=int(state.get(_shadow("pw_length"), MIN_LENGTH)),
        classes=frozenset(cls_ for key, cls_ in _FLAG_KEYS.items() if state.get(_shadow(key))),
        easy_to_read=bool(state.get(_shadow("pw_easy"), True)),
    )


def do_generate(state: MutableMapping) -> None:
    cfg = config_from_state(state)
    if not cfg.can_generate:
        return
    try:
        pw = generate(cfg.length, cfg)
    except RandomSourceError as e:
        logger.error(f"Password generation aborted: {e}")
        state["pw_error"] = str(e)
        return
    state["pw_error"] = ""
    state["pw_current"] = pw
    state["pw_history"].push(pw)
    logger.debug(f"Generated password: length={cfg.length} pools={cfg.pools_count}")


def use_history(state: MutableMapping, password: str) -> None:
    state["pw_current"] = password


def _copy_box_html(password: str) -> str:
    return f"""
<style>
  :root {{ color-scheme: light dark; }}
  .pw {{ font-family: ui-monospace,Consolas,Monaco,monospace; font-size: 20px;
         padding: 8px 10px; border: 1px solid #d1d5db; border-radius: 8px; flex: 1;
         user-select: all; word-break: break-all; }}
  button.cpy {{
    background:#2563eb; border:none; color:#fff; padding:8px 14px; border-radius:6px; cursor:pointer;
  }}
  #status {{ color:#6b7280; min-width: 90px; }}
  #status.err {{ color:#ef4444; }}
  @media (prefers-color-scheme: dark) {{
    .pw {{ border-color:#374151; color:#e5e7eb; }}
  }}
</style>

<div style="display:flex;gap:8px;align-items:center;font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;">
  <div class="pw" id="pw"></div>
  <button class="cpy" id="cpy">Copy</button>
  <span id="status"></span>
</div>

<script>
const pw = {json.dumps(password)};
document.getElementById("pw").textContent = pw;
const btn = document.getElementById("cpy");
const status = document.getElementById("status");
btn.disabled = !pw;

// Copy with fallback
function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  const ta = document.createElement('textarea');
  ta.value = text;
  ta.style.position = 'fixed';
  ta.style.opacity = '0';
  document.body.appendChild(ta);
  ta.focus();
  ta.select();
  try {{
    return document.execCommand('copy') ? Promise.resolve() : Promise.reject();
  }} finally {{
    document.body.removeChild(ta);
  }}
}}

let timer = null;
function flash(text, isError, ms) {{
  status.textContent = text;
  status.classList.toggle("err", isError);
  if (timer) clearTimeout(timer);
  timer = setTimeout(() => {{ status.textContent = ""; }}, ms);
}}

btn.addEventListener("click", () => {{
  if (!pw) return;
  copyText(pw)
    .then(() => flash("Copied", false, 1500))
    .catch(() => flash("Copy failed", true, 1800));
}});
</script>
"""


def render():
    st.subheader("🔐 Password Generator")

    settings = get_settings()
    state = st.session_state
    first_run = "pw_history" not in state
    init_state(state, _store().load(), settings.history_size)
    restore_widgets(state)

    colL, colR = st.columns([3, 2])
    with colL:
        st.slider(
            "Password length", MIN_LENGTH, MAX_LENGTH, step=1,
            key="pw_length", on_change=remember, args=(state, "pw_length"),
        )
    with colR:
        st.markdown("**Character sets**")
        for key, label in (("pw_upper", "A–Z"), ("pw_lower", "a–z"), ("pw_digits", "0–9"), ("pw_symbols", "Symbols")):
            st.checkbox(label, key=key, on_change=remember, args=(state, key))

        st.markdown("**Filters**")
        st.checkbox("Easy to read (no 1 l I 0 O o)", key="pw_easy", on_change=remember, args=(state, "pw_easy"))

    cfg = config_from_state(state)
    if first_run:
        do_generate(state)

    # ==== Strength (of the configuration, not of the string) ====
    strength = estimate_strength(cfg.length, cfg.pools_count, cfg.has_symbols)
    st.progress(strength.score, text=f"Strength: **{strength.label}** ({strength.score}/100)")
    with st.expander("How is this scored?"):
        parts = strength_breakdown(cfg.length, cfg.pools_count, cfg.has_symbols)
        df = pd.DataFrame([parts]).T
        df.columns = ["Points"]
        st.dataframe(df, width="stretch")

    warning = validation_message(cfg)
    if warning:
        st.warning(warning)

    st.button(
        "🎲 Generate",
        type="primary",
        width="stretch",
        disabled=bool(warning),
        on_click=do_generate,
        args=(state,),
    )

    if state["pw_error"]:
        st.error(f"Generation error: {state['pw_error']}")

    components.html(_copy_box_html(state["pw_current"]), height=70)

    # ==== Session history ====
    st.markdown("**Recent (this session)**")
    history: PasswordHistory = state["pw_history"]
    if not len(history):
        st.caption("No passwords yet.")
    for i, pw in enumerate(history.items()):
        c1, c2 = st.columns([5, 1])
        with c1:
            st.code(pw, language=None)
        with c2:
            st.button("Use", key=f"pw_use_{i}", on_click=use_history, args=(state, pw))

    if st.button("💾 Save settings"):
        if _store().save(cfg):
            st.success("Settings saved.")
        else:
            st.warning("Could not save settings; they will apply to this session only.")
