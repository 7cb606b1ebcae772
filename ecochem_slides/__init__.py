"""EcoChem Slides - AI generated slide deck viewer"""

__version__ = "1.0.0"
