"""One-line bar showing the current directory and the search filter."""

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from textual.widgets import Static


def _drop_left(text: str, count: int) -> str:
    """Remove ``count`` cells from the start of ``text``."""
    while text and count > 0:
        count -= cell_len(text[0])
        text = text[1:]
    return text


def fit_bar(location: str, filter_text: str, width: int) -> tuple[str, str]:
    """Trim the bar to ``width`` cells, cutting from the left.

    The location gives way first, down to nothing; only then is the filter
    itself trimmed.
    """
    width = max(width, 0)
    overflow = cell_len(location) + cell_len(filter_text) - width
    if overflow <= 0:
        return location, filter_text
    cut = min(overflow, cell_len(location))
    location = _drop_left(location, cut)
    filter_text = _drop_left(filter_text, overflow - cut)
    return location, filter_text


class LocationBar(Static):
    """Location (grey) followed by the active search filter (green)."""

    DEFAULT_CSS = """
    LocationBar {
        width: 1fr;
        height: 1;
    }
    """

    def __init__(
        self,
        bar_style: Style | str = "",
        search_style: Style | str = "",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.bar_style = bar_style
        self.search_style = search_style

    def show(self, location: str, filter_text: str, width: int) -> None:
        """Update the bar contents."""
        location, filter_text = fit_bar(location, filter_text, width)
        text = Text(no_wrap=True, overflow="crop")
        text.append(location, style=self.bar_style)
        text.append(filter_text, style=self.search_style)
        self.update(text)
