"""
Search input state machine.

Owns the text typed into the search box, validates it on every change and
turns a valid submission into exactly one navigation to ``/search/<term>``.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union
from urllib.parse import quote

from .models import REJECTED, NavigationIntent, Rejected

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 50

SEARCH_ROUTE_PREFIX = "/search/"

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def validate_query(text: str) -> bool:
    """Whether the trimmed text is an acceptable search term."""
    return MIN_QUERY_LENGTH <= len(text.strip()) <= MAX_QUERY_LENGTH


def search_path(term: str) -> str:
    """Route path for an already-trimmed search term."""
    return SEARCH_ROUTE_PREFIX + quote(term, safe=_URI_COMPONENT_SAFE)


@dataclass
class SearchState:
    raw_input: str = ""
    is_valid: bool = False


class SearchController:
    """
    Search box lifecycle: on_change updates state, on_submit navigates.

    Args:
        navigate: Push-style navigation primitive taking an absolute path
    """

    def __init__(self, navigate: Callable[[str], None]):
        self._navigate = navigate
        self.state = SearchState()

    @property
    def value(self) -> str:
        return self.state.raw_input

    @property
    def is_valid(self) -> bool:
        return self.state.is_valid

    def on_change(self, new_value: Optional[str]) -> None:
        new_value = new_value or ""
        self.state = SearchState(raw_input=new_value, is_valid=validate_query(new_value))

    def on_submit(self) -> Union[NavigationIntent, Rejected]:
        """
        Submit the current input.

        Returns:
            The emitted NavigationIntent, or REJECTED when the trimmed input
            is shorter than 2 or longer than 50 characters. A rejected
            submission leaves the input untouched and navigates nowhere.
        """
        if not self.state.is_valid:
            return REJECTED

        intent = NavigationIntent(path=search_path(self.state.raw_input.strip()))
        self._navigate(intent.path)
        self.state = SearchState()
        return intent
