"""
Slide generation: fixed prompt + structured schema -> Presentation
"""
import json

from pydantic import ValidationError

from ecochem_slides import config
from ecochem_slides.exceptions import EmptyResponseError, MalformedResponseError
from ecochem_slides.models import Presentation, parse_slides
from ecochem_slides.services.gemini_client import GeminiClient
from ecochem_slides.utils.logger import get_logger

logger = get_logger(__name__)

SYSTEM_INSTRUCTION = "You are a world-class expert in Sustainable Chemistry and Chemical Engineering."

OUTLINE = [
    "Introduction to Green Chemistry principles relevant to energy.",
    "Designing chemicals for energy efficiency.",
    "Catalysis and energy reduction.",
    "Solvent-free processes.",
    "Renewable feedstocks.",
    "Case Study: Solar or Battery technology advancements via green chemistry.",
    "SPECIFIC SLIDE: China's contribution to Green Chemistry and Energy Efficiency "
    "(policies, major research, or industrial shifts).",
    "Industrial applications and scaling.",
    "Future challenges and opportunities.",
    "Conclusion and Call to Action.",
]

SLIDE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING", "description": "The headline of the slide."},
        "bullets": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "3-4 concise bullet points for the slide body."
        },
        "highlight": {"type": "STRING", "description": "A short, punchy key takeaway or statistic."},
        "imageKeyword": {
            "type": "STRING",
            "description": "A single English word describing the visual theme "
                           "(e.g. 'laboratory', 'solar', 'china', 'molecule')."
        },
        "notes": {"type": "STRING", "description": "Speaker notes explaining the slide in detail."}
    },
    "required": ["title", "bullets", "highlight", "imageKeyword", "notes"]
}

PRESENTATION_SCHEMA = {
    "type": "ARRAY",
    "items": SLIDE_SCHEMA
}


def build_prompt(topic: str = config.PRESENTATION_TOPIC, slide_count: int = config.SLIDE_COUNT) -> str:
    outline = "\n".join(f"{i}. {item}" for i, item in enumerate(OUTLINE, start=1))
    return (
        f"Create a professional, modern {slide_count}-slide presentation about \"{topic}\".\n\n"
        f"The content should cover:\n{outline}\n\n"
        "Tone: Academic yet accessible, inspiring, and sustainability-focused.\n"
        "Ensure the JSON structure matches the schema exactly."
    )


class SlideGenerator:
    """
    Produces a Presentation from exactly one generation request.

    Failures are raised, never repaired or retried here: empty text raises
    EmptyResponseError, bad JSON or a schema mismatch raises
    MalformedResponseError, service failures propagate from the client.
    """

    def __init__(self, client=None, model: str = config.GEMINI_MODEL, topic: str = config.PRESENTATION_TOPIC):
        self.client = client
        self.model = model
        self.topic = topic

    def _get_client(self):
        if self.client is None:
            self.client = GeminiClient(config.GEMINI_API_KEY)
        return self.client

    def generate(self) -> Presentation:
        prompt = build_prompt(self.topic)

        logger.info("=== Slide generation started ===")
        logger.info(f"Model: {self.model}")
        logger.debug(f"Prompt ({len(prompt)} chars):\n{prompt}")

        text = self._get_client().generate(
            prompt,
            self.model,
            system_instruction=SYSTEM_INSTRUCTION,
            response_schema=PRESENTATION_SCHEMA
        )

        if not text:
            raise EmptyResponseError()

        logger.debug(f"Raw response ({len(text)} chars):\n{text}")
        presentation = Presentation(topic=self.topic, slides=self.parse(text))

        logger.info(f"Slides received: {len(presentation)}")
        logger.info("=== Slide generation finished ===")
        return presentation

    @staticmethod
    def parse(text: str):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Invalid JSON from generation service: {e}") from e

        try:
            slides = parse_slides(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Response does not match slide schema: {e}") from e

        if not slides:
            raise MalformedResponseError("Response contains no slides")
        return slides
