"""Configuration settings"""
import os

# Generation settings
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
PRESENTATION_TOPIC = "Green Chemistry's Contribution to Energy Efficiency Design"
SLIDE_COUNT = 10

# Placeholder image settings
IMAGE_HOST = "https://picsum.photos"
IMAGE_SEED_SUFFIX = "123"
IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 800
IMAGE_TIMEOUT = 15  # seconds

# UI settings
APP_TITLE = "EcoChem Slides"
PAGE_ICON = "🌿"

# Logging
LOG_FILE = "logs/slides.log"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
