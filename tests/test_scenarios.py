"""
End-to-end scenarios: generator + controller + navigation, real parsing
"""
from ecochem_slides.models import Lifecycle
from ecochem_slides.navigation import current_slide
from ecochem_slides.services.slide_generator import SlideGenerator
from ecochem_slides.state import PresentationController
from tests.conftest import FakeClient


def test_startup_success(slide_dicts, slides_json):
    controller = PresentationController(SlideGenerator(client=FakeClient(text=slides_json)))

    state = controller.start()

    assert state.lifecycle is Lifecycle.SUCCESS
    assert state.view.current_index == 0
    assert len(state.presentation) == 10
    assert current_slide(state).title == slide_dicts[0]["title"]


def test_startup_malformed_then_retry(slides_json):
    client = FakeClient(text="this is not json")
    controller = PresentationController(SlideGenerator(client=client))

    state = controller.start()
    assert state.lifecycle is Lifecycle.ERROR
    assert "Invalid JSON" in state.error
    assert state.presentation is None

    client.text = slides_json
    state = controller.regenerate()
    assert len(client.calls) == 2
    assert state.lifecycle is Lifecycle.SUCCESS


def test_startup_empty_deck_is_an_error():
    controller = PresentationController(SlideGenerator(client=FakeClient(text="[]")))

    state = controller.start()

    assert state.lifecycle is Lifecycle.ERROR
    assert state.error == "Response contains no slides"
    assert state.presentation is None


def test_walk_to_the_end(slides_json):
    controller = PresentationController(SlideGenerator(client=FakeClient(text=slides_json)))
    controller.start()

    for _ in range(9):
        controller.next()
    assert controller.state.view.current_index == 9

    controller.next()
    assert controller.state.view.current_index == 9
