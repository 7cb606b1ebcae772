"""
Read-only projections from state to what is displayed, and input mapping
"""
from typing import Optional

from ecochem_slides import config
from ecochem_slides.models import AppState, SlideContent
from ecochem_slides.state import Event, Next, Previous

# Keyboard bindings (browser KeyboardEvent.key / .code values)
KEY_BINDINGS = {
    "ArrowRight": Next,
    " ": Next,
    "Space": Next,
    "ArrowLeft": Previous,
}


def event_for_key(key: str) -> Optional[Event]:
    event_type = KEY_BINDINGS.get(key)
    return event_type() if event_type else None


def image_url(slide: SlideContent) -> str:
    """
    Placeholder image for a slide. Seeded by keyword only, so slides that
    share a keyword share a picture.
    """
    return (
        f"{config.IMAGE_HOST}/seed/{slide.image_keyword}{config.IMAGE_SEED_SUFFIX}"
        f"/{config.IMAGE_WIDTH}/{config.IMAGE_HEIGHT}"
    )


def current_slide(state: AppState) -> Optional[SlideContent]:
    if state.presentation is None or len(state.presentation) == 0:
        return None
    return state.presentation[state.view.current_index]


def slide_counter(state: AppState) -> str:
    total = len(state.presentation) if state.presentation is not None else 0
    return f"Slide {state.view.current_index + 1} / {total}"


def is_first(state: AppState) -> bool:
    return state.view.current_index == 0


def is_last(state: AppState) -> bool:
    if state.presentation is None:
        return True
    return state.view.current_index >= len(state.presentation) - 1
