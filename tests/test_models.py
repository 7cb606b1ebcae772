"""
Tests for slide and presentation models
"""
import pytest
from pydantic import ValidationError

from ecochem_slides.models import AppState, Lifecycle, Presentation, SlideContent, ViewState, parse_slides
from tests.conftest import make_slide_dict


class TestSlideContent:

    def test_wire_name_for_image_keyword(self):
        slide = SlideContent.model_validate(make_slide_dict(1))
        assert slide.image_keyword == "keyword1"
        assert slide.model_dump(by_alias=True)["imageKeyword"] == "keyword1"

    def test_values_kept_verbatim(self):
        data = make_slide_dict(0)
        data["title"] = "  Padded Title  "
        data["bullets"] = [" a ", "b\n"]
        slide = SlideContent.model_validate(data)
        assert slide.title == "  Padded Title  "
        assert slide.bullets == [" a ", "b\n"]

    @pytest.mark.parametrize("field", ["title", "bullets", "highlight", "imageKeyword", "notes"])
    def test_every_field_required(self, field):
        data = make_slide_dict(0)
        del data[field]
        with pytest.raises(ValidationError):
            SlideContent.model_validate(data)

    def test_null_field_rejected(self):
        data = make_slide_dict(0)
        data["highlight"] = None
        with pytest.raises(ValidationError):
            SlideContent.model_validate(data)

    def test_wrong_types_rejected(self):
        data = make_slide_dict(0)
        data["bullets"] = "not a list"
        with pytest.raises(ValidationError):
            SlideContent.model_validate(data)

        data = make_slide_dict(0)
        data["title"] = 42
        with pytest.raises(ValidationError):
            SlideContent.model_validate(data)

    def test_bullet_count_not_enforced(self):
        data = make_slide_dict(0)
        data["bullets"] = []
        assert SlideContent.model_validate(data).bullets == []

    def test_frozen(self):
        slide = SlideContent.model_validate(make_slide_dict(0))
        with pytest.raises(ValidationError):
            slide.title = "changed"

    def test_extra_keys_ignored(self):
        data = make_slide_dict(0)
        data["unexpected"] = "x"
        slide = SlideContent.model_validate(data)
        assert not hasattr(slide, "unexpected")


class TestParseSlides:

    def test_order_preserved(self, slide_dicts):
        slides = parse_slides(slide_dicts)
        assert [s.title for s in slides] == [d["title"] for d in slide_dicts]

    def test_top_level_must_be_list(self):
        with pytest.raises(ValidationError):
            parse_slides({"slides": []})


class TestPresentation:

    def test_slides_become_tuple(self, presentation):
        assert isinstance(presentation.slides, tuple)
        assert len(presentation) == 10
        assert presentation[3].title == "Slide title 3"


class TestStateDefaults:

    def test_app_state_starts_idle(self):
        state = AppState()
        assert state.lifecycle is Lifecycle.IDLE
        assert state.presentation is None
        assert state.error is None
        assert state.view == ViewState()

    def test_view_state_defaults(self):
        view = ViewState()
        assert view.current_index == 0
        assert view.notes_visible is False
        assert view.fullscreen is False
        assert view.is_image_loaded(0) is False
