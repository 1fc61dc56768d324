# marklist/ui/review/__init__.py
# Interactive review screen for marking files line by line

from .review_display import InteractiveReviewer
from .review_input import ReviewInputHandler
from .review_renderer import ReviewRenderer
from .review_state import ReviewState, ReviewStateManager

__all__ = [
    "InteractiveReviewer",
    "ReviewInputHandler",
    "ReviewRenderer",
    "ReviewState",
    "ReviewStateManager",
]
