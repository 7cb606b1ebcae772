"""Streamlit entry point: streamlit run ecochem_slides/ui/app.py"""
import streamlit as st

from ecochem_slides import config
from ecochem_slides.models import Lifecycle
from ecochem_slides.services import ImageService, SlideGenerator
from ecochem_slides.state import PresentationController
from ecochem_slides.ui.slide_deck import render_slide_deck
from ecochem_slides.ui.views import render_error, render_loading
from ecochem_slides.utils.logger import setup_logger, get_logger

setup_logger("root", config.LOG_FILE, config.LOG_LEVEL)
logger = get_logger(__name__)

st.set_page_config(page_title=config.APP_TITLE, page_icon=config.PAGE_ICON, layout="wide")

# === Session State ===
if 'controller' not in st.session_state:
    st.session_state.controller = PresentationController(SlideGenerator())
if 'image_service' not in st.session_state:
    st.session_state.image_service = ImageService()

controller = st.session_state.controller
lifecycle = controller.state.lifecycle

if lifecycle in (Lifecycle.IDLE, Lifecycle.LOADING):
    render_loading()
    with st.spinner("Generating slides..."):
        if lifecycle is Lifecycle.IDLE:
            controller.start()
        else:
            controller.run_generation()
    st.rerun()
elif lifecycle is Lifecycle.ERROR:
    render_error(controller)
else:
    render_slide_deck(controller, st.session_state.image_service)
