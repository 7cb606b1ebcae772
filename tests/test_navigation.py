"""
Tests for display projections and key bindings
"""
from dataclasses import replace

from ecochem_slides.models import AppState, Lifecycle, SlideContent, ViewState
from ecochem_slides.navigation import current_slide, event_for_key, image_url, is_first, is_last, slide_counter
from ecochem_slides.state import Next, Previous
from tests.conftest import make_slide_dict


def test_image_url_format():
    slide = SlideContent.model_validate(make_slide_dict(0) | {"imageKeyword": "solar"})
    assert image_url(slide) == "https://picsum.photos/seed/solar123/1200/800"


def test_image_url_stable_per_keyword():
    a = SlideContent.model_validate(make_slide_dict(1) | {"imageKeyword": "molecule"})
    b = SlideContent.model_validate(make_slide_dict(2) | {"imageKeyword": "molecule"})
    assert image_url(a) == image_url(b)


def test_key_bindings():
    assert isinstance(event_for_key("ArrowRight"), Next)
    assert isinstance(event_for_key(" "), Next)
    assert isinstance(event_for_key("Space"), Next)
    assert isinstance(event_for_key("ArrowLeft"), Previous)
    assert event_for_key("ArrowUp") is None
    assert event_for_key("Enter") is None


def test_current_slide_follows_index(presentation):
    state = AppState(lifecycle=Lifecycle.SUCCESS, presentation=presentation, view=ViewState(current_index=4))
    assert current_slide(state) is presentation[4]
    assert slide_counter(state) == "Slide 5 / 10"


def test_current_slide_without_presentation():
    assert current_slide(AppState()) is None


def test_bounds(presentation):
    state = AppState(lifecycle=Lifecycle.SUCCESS, presentation=presentation)
    assert is_first(state)
    assert not is_last(state)

    last = replace(state, view=ViewState(current_index=9))
    assert is_last(last)
    assert not is_first(last)
