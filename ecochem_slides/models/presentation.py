"""
Presentation and application state models
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .slide import SlideContent


@dataclass(frozen=True)
class Presentation:
    """
    Ordered slide deck, replaced as a whole on every generation
    """
    topic: str
    slides: Tuple[SlideContent, ...]

    def __post_init__(self):
        # Accept any sequence, store an immutable one
        object.__setattr__(self, "slides", tuple(self.slides))

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> SlideContent:
        return self.slides[index]


class Lifecycle(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """What the viewer currently shows. Only meaningful while lifecycle is SUCCESS."""
    current_index: int = 0
    notes_visible: bool = False
    fullscreen: bool = False
    image_loaded: Dict[int, bool] = field(default_factory=dict)

    def is_image_loaded(self, index: int) -> bool:
        return self.image_loaded.get(index, False)


@dataclass(frozen=True)
class AppState:
    """Single state container owned by the controller"""
    lifecycle: Lifecycle = Lifecycle.IDLE
    presentation: Optional[Presentation] = None
    error: Optional[str] = None
    view: ViewState = field(default_factory=ViewState)
