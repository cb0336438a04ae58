"""People Service - the Person entity and the API that serves it."""

__version__ = "0.1.0"

from .core.models import *
from .api import *
