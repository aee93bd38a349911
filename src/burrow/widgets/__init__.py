"""burrow widgets."""

from .grid import DirectoryGrid, build_grid
from .location_bar import LocationBar, fit_bar
from .preview import Preview, render_preview

__all__ = [
    "DirectoryGrid",
    "build_grid",
    "LocationBar",
    "fit_bar",
    "Preview",
    "render_preview",
]
