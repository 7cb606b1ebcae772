"""Loading and error screens"""
import streamlit as st

from ecochem_slides.state import PresentationController, Regenerate

LOADING_HINTS = [
    "Analyzing renewable feedstocks...",
    "Reviewing China's policy contributions...",
    "Designing slides for energy efficiency...",
]


def render_loading():
    st.markdown("<div style='height: 12vh'></div>", unsafe_allow_html=True)
    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.markdown("<h2 style='text-align: center'>🌿 Synthesizing Presentation</h2>", unsafe_allow_html=True)
        st.markdown(
            "<p style='text-align: center; color: #64748b'>"
            "Consulting Gemini for the latest in Green Chemistry &amp; Energy Efficiency..."
            "</p>",
            unsafe_allow_html=True
        )
        with st.container(border=True):
            for hint in LOADING_HINTS:
                st.caption(f"✨ {hint}")


def render_error(controller: PresentationController):
    st.markdown("<div style='height: 12vh'></div>", unsafe_allow_html=True)
    _, center, _ = st.columns([1, 2, 1])
    with center:
        with st.container(border=True):
            st.markdown("<h2 style='text-align: center'>⚠️ Generation Failed</h2>", unsafe_allow_html=True)
            st.error(controller.state.error)
            if st.button("🔄 Try Again", type="primary", use_container_width=True):
                st.session_state.pop("image_cache", None)
                controller.dispatch(Regenerate())
                st.rerun()
