"""
Search input and route contract tests.

Mimics what a user does with the search box and what the search
destination page receives.
"""

from unittest.mock import MagicMock

import pytest

from tmdb_catalog.models import REJECTED, NavigationIntent
from tmdb_catalog.routes import (
    NotFoundError,
    resolve_genre_route,
    resolve_search_route,
)
from tmdb_catalog.search import SearchController, validate_query


@pytest.fixture
def navigate():
    return MagicMock()


@pytest.fixture
def controller(navigate):
    return SearchController(navigate=navigate)


class TestTyping:

    def test_starts_empty_and_invalid(self, controller):
        assert controller.value == ""
        assert controller.is_valid is False

    def test_typing_updates_value(self, controller, navigate):
        controller.on_change("avengers")

        assert controller.value == "avengers"
        assert controller.is_valid is True
        navigate.assert_not_called()

    def test_validity_tracks_trimmed_length(self, controller):
        controller.on_change("  a  ")
        assert controller.is_valid is False

        controller.on_change("  ab  ")
        assert controller.is_valid is True

    def test_none_is_treated_as_empty(self, controller):
        controller.on_change(None)

        assert controller.value == ""
        assert controller.is_valid is False


class TestSubmit:

    def test_submit_navigates_and_resets(self, controller, navigate):
        controller.on_change("spiderman")
        outcome = controller.on_submit()

        assert outcome == NavigationIntent("/search/spiderman")
        navigate.assert_called_once_with("/search/spiderman")
        assert controller.value == ""

    def test_too_short_is_rejected(self, controller, navigate):
        controller.on_change("a")
        outcome = controller.on_submit()

        assert outcome is REJECTED
        navigate.assert_not_called()
        assert controller.value == "a"

    @pytest.mark.parametrize("text", ["", "   ", "a", " a ", "a" * 51, " " + "b" * 51 + " "])
    def test_rejected_lengths(self, controller, navigate, text):
        controller.on_change(text)

        assert controller.on_submit() is REJECTED
        navigate.assert_not_called()
        assert controller.value == text

    @pytest.mark.parametrize("text", ["ab", "a" * 50, "  ab  ", "\t" + "c" * 50 + "\n"])
    def test_accepted_boundaries(self, controller, navigate, text):
        controller.on_change(text)

        assert isinstance(controller.on_submit(), NavigationIntent)
        navigate.assert_called_once()

    def test_length_counts_characters_not_bytes(self, controller, navigate):
        controller.on_change("é" * 50)

        assert isinstance(controller.on_submit(), NavigationIntent)

    def test_path_uses_trimmed_term(self, controller, navigate):
        controller.on_change("  ab  ")
        controller.on_submit()

        navigate.assert_called_once_with("/search/ab")

    def test_spaces_are_encoded(self, controller, navigate):
        controller.on_change("iron man")
        controller.on_submit()

        navigate.assert_called_once_with("/search/iron%20man")

    def test_reserved_characters_are_encoded(self, controller, navigate):
        controller.on_change("AC/DC & friends?#")
        controller.on_submit()

        navigate.assert_called_once_with("/search/AC%2FDC%20%26%20friends%3F%23")

    def test_unreserved_marks_are_kept(self, controller, navigate):
        controller.on_change("it's (a) mad-world!~*_.")
        controller.on_submit()

        navigate.assert_called_once_with("/search/it's%20(a)%20mad-world!~*_.")

    def test_second_submit_is_a_no_op(self, controller, navigate):
        controller.on_change("spiderman")
        controller.on_submit()

        assert controller.on_submit() is REJECTED
        navigate.assert_called_once()

    def test_type_again_after_submit(self, controller, navigate):
        controller.on_change("spiderman")
        controller.on_submit()
        controller.on_change("batman")
        controller.on_submit()

        assert [c.args[0] for c in navigate.call_args_list] == [
            "/search/spiderman",
            "/search/batman",
        ]

    def test_validate_query_helper(self):
        assert validate_query("ab")
        assert not validate_query(" a ")
        assert not validate_query("x" * 51)


class TestSearchRoute:

    def test_plain_term(self):
        view = resolve_search_route("avengers")

        assert view.term == "avengers"
        assert view.heading == "Welcome to the search page: avengers"

    def test_encoded_term_is_decoded(self):
        assert resolve_search_route("iron%20man").term == "iron man"

    def test_empty_term_is_not_found(self):
        with pytest.raises(NotFoundError):
            resolve_search_route("")

    def test_already_decoded_text_passes_through(self):
        assert resolve_search_route("iron man").term == "iron man"

    def test_malformed_escape_is_kept(self):
        assert resolve_search_route("100%").term == "100%"
        assert resolve_search_route("%zz").term == "%zz"

    @pytest.mark.parametrize("segment", ["%FF", "%C3", "caf%C3"])
    def test_invalid_utf8_escape_is_kept(self, segment):
        assert resolve_search_route(segment).term == segment

    @pytest.mark.parametrize("text", [
        "iron man",
        "AC/DC & friends",
        "what?#now",
        "100% pure",
        "a%41b",
        "tom+jerry",
        "amélie",
        "千と千尋",
    ])
    def test_round_trip_decodes_once(self, text):
        navigate = MagicMock()
        controller = SearchController(navigate=navigate)
        controller.on_change(f"  {text} ")
        controller.on_submit()

        path = navigate.call_args.args[0]
        segment = path[len("/search/"):]
        assert resolve_search_route(segment).term == text


class TestGenreRoute:

    def test_id_and_name(self):
        view = resolve_genre_route("28", "Action")

        assert view.heading == "Welcome to the genre with ID: 28 and name: Action"

    def test_missing_name(self):
        view = resolve_genre_route(35)

        assert view.id == "35"
        assert view.genre == ""
