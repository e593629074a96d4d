# app.py
from pathlib import Path
import sys
import importlib
import streamlit as st
from loguru import logger

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import configure_logging  # noqa: E402

configure_logging()

# ==== Streamlit ====
st.set_page_config(
    page_title="Keysmith",
    page_icon="🔐",
    layout="centered",
)

# ==== Pages ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "generator_page":  "🔐 Password Generator",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except Exception as e:
        logger.exception(f"Failed to import ui.{mod_name}")
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

# Show import errors but keep the remaining pages usable
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar navigation ====
labels = list(PAGES.keys())
choice = st.sidebar.radio(" ", labels, index=len(labels) - 1)
PAGES[choice]()
