"""
Presentation state machine.

All mutation goes through ``transition(state, event)``; the controller owns
the single AppState and performs the generation side effect.

Lifecycle transitions:

    IDLE    --Mount-->               LOADING   (run generation)
    LOADING --GenerationSucceeded--> SUCCESS   (install deck, reset view)
    LOADING --GenerationFailed-->    ERROR     (store message)
    ERROR   --Regenerate-->          LOADING   (clear error, run generation)
    SUCCESS --Regenerate-->          LOADING   (keep old deck until replaced)

Any other (lifecycle, event) pair leaves the state unchanged. Navigation
events only apply in SUCCESS.
"""
from dataclasses import dataclass, replace
from typing import Optional, Protocol

from ecochem_slides.models import AppState, Lifecycle, Presentation, ViewState
from ecochem_slides.utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_ERROR_MESSAGE = "Failed to generate presentation. Please try again."


# === Events ===

class Event:
    """Base class for everything dispatched into the state machine"""


@dataclass(frozen=True)
class Mount(Event):
    pass


@dataclass(frozen=True)
class Regenerate(Event):
    pass


@dataclass(frozen=True)
class GenerationSucceeded(Event):
    presentation: Presentation


@dataclass(frozen=True)
class GenerationFailed(Event):
    message: str


@dataclass(frozen=True)
class Next(Event):
    pass


@dataclass(frozen=True)
class Previous(Event):
    pass


@dataclass(frozen=True)
class JumpTo(Event):
    index: int


@dataclass(frozen=True)
class ToggleNotes(Event):
    pass


@dataclass(frozen=True)
class FullscreenChanged(Event):
    fullscreen: bool


@dataclass(frozen=True)
class ImageLoaded(Event):
    index: int


# === Transition function ===

def transition(state: AppState, event: Event) -> AppState:
    """Return the state after ``event``. Never mutates ``state``."""
    lifecycle = state.lifecycle

    if isinstance(event, Mount):
        if lifecycle is Lifecycle.IDLE:
            return replace(state, lifecycle=Lifecycle.LOADING)
        return state

    if isinstance(event, Regenerate):
        if lifecycle in (Lifecycle.SUCCESS, Lifecycle.ERROR):
            return replace(state, lifecycle=Lifecycle.LOADING, error=None)
        return state

    if isinstance(event, GenerationSucceeded):
        if lifecycle is Lifecycle.LOADING:
            return AppState(
                lifecycle=Lifecycle.SUCCESS,
                presentation=event.presentation,
                error=None,
                view=ViewState()
            )
        return state

    if isinstance(event, GenerationFailed):
        if lifecycle is Lifecycle.LOADING:
            return replace(state, lifecycle=Lifecycle.ERROR, error=event.message)
        return state

    if lifecycle is not Lifecycle.SUCCESS or state.presentation is None:
        return state

    return replace(state, view=_navigate(state.view, len(state.presentation), event))


def _navigate(view: ViewState, length: int, event: Event) -> ViewState:
    if isinstance(event, Next):
        if view.current_index < length - 1:
            return replace(view, current_index=view.current_index + 1)
        return view

    if isinstance(event, Previous):
        if view.current_index > 0:
            return replace(view, current_index=view.current_index - 1)
        return view

    if isinstance(event, JumpTo):
        if not 0 <= event.index < length:
            raise ValueError(f"Slide index {event.index} out of range (0..{length - 1})")
        return replace(view, current_index=event.index)

    if isinstance(event, ToggleNotes):
        return replace(view, notes_visible=not view.notes_visible)

    if isinstance(event, FullscreenChanged):
        return replace(view, fullscreen=event.fullscreen)

    if isinstance(event, ImageLoaded):
        if view.is_image_loaded(event.index):
            return view
        return replace(view, image_loaded={**view.image_loaded, event.index: True})

    raise TypeError(f"Unknown event: {event!r}")


# === Controller ===

class FullscreenDriver(Protocol):
    def request(self, enter: bool) -> bool:
        """Ask the display surface to enter/exit fullscreen. True on success."""


class PresentationController:
    """
    Owns the application state and runs the generation side effect.

    The generator is any object with ``generate() -> Presentation``.
    """

    def __init__(self, generator, state: Optional[AppState] = None):
        self.generator = generator
        self.state = state or AppState()

    def dispatch(self, event: Event) -> AppState:
        old = self.state
        self.state = transition(old, event)
        if old.lifecycle is not self.state.lifecycle:
            logger.info(f"Lifecycle: {old.lifecycle.value} -> {self.state.lifecycle.value} ({type(event).__name__})")
        return self.state

    # --- lifecycle ---

    def start(self) -> AppState:
        """Mount: first generation of the session"""
        if self.state.lifecycle is not Lifecycle.IDLE:
            return self.state
        self.dispatch(Mount())
        return self.run_generation()

    def regenerate(self) -> AppState:
        if self.state.lifecycle not in (Lifecycle.SUCCESS, Lifecycle.ERROR):
            return self.state
        self.dispatch(Regenerate())
        return self.run_generation()

    def run_generation(self) -> AppState:
        """Invoke the generator once and settle LOADING into SUCCESS or ERROR."""
        if self.state.lifecycle is not Lifecycle.LOADING:
            return self.state
        try:
            presentation = self.generator.generate()
        except Exception as e:
            logger.error(f"Slide generation failed: {e}", exc_info=True)
            return self.dispatch(GenerationFailed(str(e) or FALLBACK_ERROR_MESSAGE))
        return self.dispatch(GenerationSucceeded(presentation))

    # --- navigation ---

    def next(self) -> AppState:
        return self.dispatch(Next())

    def previous(self) -> AppState:
        return self.dispatch(Previous())

    def jump_to(self, index: int) -> AppState:
        return self.dispatch(JumpTo(index))

    def toggle_notes(self) -> AppState:
        return self.dispatch(ToggleNotes())

    def mark_image_loaded(self, index: int) -> AppState:
        return self.dispatch(ImageLoaded(index))

    def toggle_fullscreen(self, driver: FullscreenDriver) -> AppState:
        """Best effort: the flag only flips when the driver reports success."""
        if self.state.lifecycle is not Lifecycle.SUCCESS:
            return self.state
        enter = not self.state.view.fullscreen
        try:
            ok = driver.request(enter)
        except Exception as e:
            logger.warning(f"Fullscreen request failed: {e}")
            return self.state
        if not ok:
            return self.state
        return self.dispatch(FullscreenChanged(enter))
