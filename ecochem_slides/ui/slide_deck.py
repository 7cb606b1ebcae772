"""
Slide deck viewer: header controls, slide panel, notes, navigation
"""
import json
from typing import MutableMapping

import streamlit as st
import streamlit.components.v1 as components

from ecochem_slides import config
from ecochem_slides.navigation import KEY_BINDINGS, current_slide, image_url, is_first, is_last, slide_counter
from ecochem_slides.services.image_service import ImageService
from ecochem_slides.state import Next, Previous, PresentationController, Regenerate

NAV_LABELS = {
    Next: "Next ›",
    Previous: "‹ Previous",
}

# Fullscreen button label, keyed by the current fullscreen flag
FULLSCREEN_LABELS = {
    False: "⛶",
    True: "🗗",
}

FULLSCREEN_CSS = """
<style>
header[data-testid="stHeader"] {display: none;}
.block-container {padding: 0.5rem 1rem !important; max-width: 100% !important;}
</style>
"""

_FIND_BUTTON_JS = (
    "const findButton = (label) => "
    "Array.from(doc.querySelectorAll('button')).find(b => b.innerText.trim() === label);"
)


def fullscreen_script(enter: bool) -> str:
    """
    Browser side of a fullscreen request. A refused enter clicks the
    toggle again, so the flag that was set optimistically is turned back.
    """
    exit_label = json.dumps(FULLSCREEN_LABELS[True])
    if enter:
        action = (
            "doc.documentElement.requestFullscreen().catch(() => {"
            f" const b = findButton({exit_label}); if (b) b.click(); "
            "});"
        )
    else:
        action = "if (doc.fullscreenElement) doc.exitFullscreen().catch(() => {});"
    return f"<script>const doc = window.parent.document; {_FIND_BUTTON_JS} {action}</script>"


def fullscreen_sync_script() -> str:
    """Leaving fullscreen from the browser (Esc) clears the flag through the toggle button."""
    exit_label = json.dumps(FULLSCREEN_LABELS[True])
    return f"""
<script>
const doc = window.parent.document;
{_FIND_BUTTON_JS}
if (!doc.__slideFullscreen) {{
  doc.__slideFullscreen = true;
  doc.addEventListener('fullscreenchange', () => {{
    if (doc.fullscreenElement) return;
    const btn = findButton({exit_label});
    if (btn) btn.click();
  }});
}}
</script>
"""


class StreamlitFullscreenDriver:
    """
    Queues a browser fullscreen request; the script is emitted on the next
    render. ``request`` only reports that the request was issued. The browser
    answer comes back later through the toggle button: a refusal or an Esc
    exit clicks it again and the flag is cleared.
    """
    STATE_KEY = "fullscreen_request"

    def __init__(self, store: MutableMapping = None):
        self.store = st.session_state if store is None else store

    def request(self, enter: bool) -> bool:
        self.store[self.STATE_KEY] = enter
        return True

    def pending(self):
        return self.store.pop(self.STATE_KEY, None)

    def flush(self):
        enter = self.pending()
        if enter is not None:
            components.html(fullscreen_script(enter), height=0)
        components.html(fullscreen_sync_script(), height=0)


def keyboard_script() -> str:
    """JS bridge clicking the navigation buttons for bound keys"""
    bindings = {key: NAV_LABELS[event] for key, event in KEY_BINDINGS.items()}
    return f"""
<script>
const doc = window.parent.document;
const bindings = {json.dumps(bindings)};
if (!doc.__slideKeys) {{
  doc.__slideKeys = true;
  doc.addEventListener('keydown', (e) => {{
    if (['INPUT', 'TEXTAREA'].includes(e.target.tagName)) return;
    const label = bindings[e.key] || bindings[e.code];
    if (!label) return;
    const btn = Array.from(doc.querySelectorAll('button')).find(b => b.innerText.trim() === label);
    if (btn && !btn.disabled) {{
      e.preventDefault();
      btn.click();
    }}
  }});
}}
</script>
"""


def session_image_cache() -> MutableMapping:
    if 'image_cache' not in st.session_state:
        st.session_state.image_cache = {}
    return st.session_state.image_cache


def render_slide_deck(controller: PresentationController, image_service: ImageService):
    fullscreen_driver = StreamlitFullscreenDriver()
    fullscreen_driver.flush()
    components.html(keyboard_script(), height=0)

    state = controller.state
    if state.view.fullscreen:
        st.markdown(FULLSCREEN_CSS, unsafe_allow_html=True)

    # === Top bar ===
    title_col, regen_col, notes_col, fs_col = st.columns([12, 1, 1, 1])
    with title_col:
        st.markdown(f"**:green[{config.APP_TITLE.upper()}]**")
    with regen_col:
        if st.button("🔄", help="Regenerate Deck", key="regenerate"):
            st.session_state.pop("image_cache", None)
            controller.dispatch(Regenerate())
            st.rerun()
    with notes_col:
        if st.button("ℹ️", help="Speaker Notes", key="notes",
                     type="primary" if state.view.notes_visible else "secondary"):
            controller.toggle_notes()
            st.rerun()
    with fs_col:
        if st.button(FULLSCREEN_LABELS[state.view.fullscreen], help="Toggle Fullscreen", key="fullscreen"):
            controller.toggle_fullscreen(fullscreen_driver)
            st.rerun()

    slide = current_slide(state)
    index = state.view.current_index

    # === Slide ===
    with st.container(border=True):
        text_col, visual_col = st.columns([7, 5])

        with text_col:
            st.caption(slide_counter(state).upper())
            st.markdown(f"## {slide.title}")
            st.markdown("\n".join(f"- {bullet}" for bullet in slide.bullets))
            st.success(f"*\"{slide.highlight}\"*")

        with visual_col:
            content = image_service.fetch_cached(image_url(slide), session_image_cache())
            if content is not None:
                controller.mark_image_loaded(index)

            if controller.state.view.is_image_loaded(index) and content is not None:
                st.image(content, use_container_width=True)
            else:
                st.markdown(
                    "<div style='height: 320px; background: #e2e8f0; border-radius: 8px; "
                    "display: flex; align-items: center; justify-content: center; color: #94a3b8'>"
                    "Loading Visual...</div>",
                    unsafe_allow_html=True
                )
            st.caption(f"CONCEPT: {slide.image_keyword.upper()}")

    # === Speaker notes ===
    if state.view.notes_visible:
        with st.container(border=True):
            st.markdown("**SPEAKER NOTES**")
            st.text(slide.notes)

    # === Controls ===
    prev_col, dots_col, next_col = st.columns([2, 8, 2])
    with prev_col:
        if st.button(NAV_LABELS[Previous], disabled=is_first(state), use_container_width=True):
            controller.previous()
            st.rerun()
    with dots_col:
        dots = st.columns(len(state.presentation))
        for i, dot in enumerate(dots):
            with dot:
                if st.button("●" if i == index else "○", key=f"dot_{i}", help=f"Slide {i + 1}"):
                    controller.jump_to(i)
                    st.rerun()
    with next_col:
        if st.button(NAV_LABELS[Next], disabled=is_last(state), use_container_width=True):
            controller.next()
            st.rerun()
