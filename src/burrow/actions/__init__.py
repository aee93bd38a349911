"""Action handler mixins for BurrowApp."""

from .file_actions import FileActionsMixin
from .navigation_actions import NavigationActionsMixin, SearchExpired

__all__ = [
    "FileActionsMixin",
    "NavigationActionsMixin",
    "SearchExpired",
]
