"""
Pytest configuration and fixtures
"""
import json
from typing import Any, Dict, List, Optional

import pytest

from ecochem_slides.models import Presentation, SlideContent


def make_slide_dict(i: int) -> Dict[str, Any]:
    return {
        "title": f"Slide title {i}",
        "bullets": [f"Point {i}.1", f"Point {i}.2", f"Point {i}.3"],
        "highlight": f"Takeaway {i}",
        "imageKeyword": f"keyword{i}",
        "notes": f"Speaker notes for slide {i}.",
    }


class FakeClient:
    """Stands in for GeminiClient; records every call."""

    def __init__(self, text: Optional[str] = "", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def generate(self, prompt, model, system_instruction=None, response_schema=None):
        self.calls.append({
            "prompt": prompt,
            "model": model,
            "system_instruction": system_instruction,
            "response_schema": response_schema,
        })
        if self.error is not None:
            raise self.error
        return self.text


class FakeGenerator:
    """Returns queued results in order; exceptions are raised."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def generate(self) -> Presentation:
        self.calls += 1
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def slide_dicts() -> List[Dict[str, Any]]:
    return [make_slide_dict(i) for i in range(10)]


@pytest.fixture
def slides_json(slide_dicts) -> str:
    return json.dumps(slide_dicts)


@pytest.fixture
def presentation(slide_dicts) -> Presentation:
    return Presentation(
        topic="Test topic",
        slides=[SlideContent.model_validate(d) for d in slide_dicts]
    )


@pytest.fixture
def make_presentation():
    def _make(count: int = 10, topic: str = "Test topic") -> Presentation:
        return Presentation(
            topic=topic,
            slides=[SlideContent.model_validate(make_slide_dict(i)) for i in range(count)]
        )
    return _make
