"""Data models for slides and presentation state"""
from .slide import SlideContent, parse_slides
from .presentation import Presentation, Lifecycle, ViewState, AppState

__all__ = ['SlideContent', 'parse_slides', 'Presentation', 'Lifecycle', 'ViewState', 'AppState']
