"""
Domain - inputs, entry models and response shapes of the compendium API
"""

from . import inputs
from . import models
from . import responses

__all__ = ["inputs", "models", "responses"]
