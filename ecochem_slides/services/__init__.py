"""Services layer"""
from .gemini_client import GeminiClient
from .slide_generator import SlideGenerator
from .image_service import ImageService

__all__ = ['GeminiClient', 'SlideGenerator', 'ImageService']
