"""
Slide content model, shared by generation and rendering
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SlideContent(BaseModel):
    """
    One generated slide. Field values are kept exactly as the service
    returned them, nothing is trimmed or coerced.
    """
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Catalysis and Energy Reduction",
                "bullets": [
                    "Catalysts lower activation energy",
                    "Milder temperatures and pressures",
                    "Fewer purification steps"
                ],
                "highlight": "Up to 90% of chemical processes rely on catalysts",
                "imageKeyword": "catalyst",
                "notes": "Explain how catalysis cuts process energy demand."
            }
        }
    )

    title: str = Field(..., description="The headline of the slide")
    bullets: List[str] = Field(..., description="3-4 concise bullet points for the slide body")
    highlight: str = Field(..., description="A short, punchy key takeaway or statistic")
    image_keyword: str = Field(..., alias="imageKeyword", description="Single English word seeding the placeholder image")
    notes: str = Field(..., description="Speaker notes explaining the slide in detail")


_SLIDE_LIST = TypeAdapter(List[SlideContent])


def parse_slides(data: Any) -> List[SlideContent]:
    """Validate decoded JSON as an ordered list of slides. Raises pydantic.ValidationError."""
    return _SLIDE_LIST.validate_python(data)
