# tests/core/test_classifier.py
"""
Unit tests for route classification precedence and totality.
"""
from __future__ import annotations

import pytest

from pathroute.contracts.entity import EntityId
from pathroute.contracts.function_call import ArgKind, ArgValue, FunctionCall
from pathroute.contracts.routes import (
    CollectionActionRoute,
    CollectionRoute,
    EntityActionRoute,
    EntityRoute,
    FunctionCallRoute,
    MetaRoute,
    RouteKind,
    SearchRoute,
    UnknownRoute,
)
from pathroute.core.classifier import (
    classify,
    is_collection_name,
    normalize_path,
    split_segments,
)
from pathroute.core.router_config import RouterConfig

CONTACT = EntityId(type="contact", id="abc")


class TestNormalize:
    def test_strips_slashes(self):
        assert normalize_path("/contacts/") == "contacts"
        assert normalize_path("///") == ""
        assert normalize_path("") == ""

    def test_split_segments(self):
        assert split_segments("/contact_abc/qualify/") == ["contact_abc", "qualify"]
        assert split_segments("/") == []


class TestScenarios:
    def test_collection(self):
        assert classify("contacts") == CollectionRoute(collection="contacts")

    def test_entity(self):
        assert classify("contact_abc") == EntityRoute(entity=CONTACT)

    def test_entity_action(self):
        assert classify("contact_abc/qualify") == EntityActionRoute(
            entity=CONTACT, action="qualify"
        )

    def test_collection_meta(self):
        assert classify("contacts/$schema") == MetaRoute(
            resource="schema", collection="contacts"
        )

    def test_function_call_with_entity(self):
        assert classify("score(contact_abc)") == FunctionCallRoute(
            call=FunctionCall(
                name="score",
                args=(ArgValue("contact_abc", ArgKind.ENTITY),),
            )
        )

    def test_function_call_with_url(self):
        assert classify("papa.parse(https://example.com/data.csv,header=true)") == (
            FunctionCallRoute(
                call=FunctionCall(
                    name="papa.parse",
                    args=(ArgValue("https://example.com/data.csv", ArgKind.URL),),
                    kwargs={"header": "true"},
                )
            )
        )

    def test_empty(self):
        assert classify("") == UnknownRoute(segments=())


class TestRules:
    def test_root_slash_is_unknown(self):
        assert classify("/") == UnknownRoute(segments=())

    def test_search(self):
        assert classify("search") == SearchRoute()
        assert classify("search/anything") == SearchRoute()

    def test_search_wins_over_known_collection(self):
        cfg = RouterConfig(known_collections=frozenset({"search"}))
        assert classify("search", cfg) == SearchRoute()

    def test_entity_meta(self):
        assert classify("contact_abc/$history") == MetaRoute(
            resource="history", entity=CONTACT
        )

    def test_collection_action(self):
        assert classify("contacts/create") == CollectionActionRoute(
            collection="contacts", action="create"
        )

    def test_root_meta(self):
        assert classify("$schema") == MetaRoute(resource="schema")

    def test_bare_dollar_is_root_meta_with_empty_resource(self):
        assert classify("$") == MetaRoute(resource="")

    def test_unknown_keeps_segments(self):
        assert classify("foo-bar/baz") == UnknownRoute(segments=("foo-bar", "baz"))

    def test_empty_second_segment_counts_as_absent(self):
        assert classify("contacts//create") == CollectionRoute(collection="contacts")

    def test_extra_segments_ignored_for_entity_family(self):
        assert classify("contact_abc/qualify/now") == EntityActionRoute(
            entity=CONTACT, action="qualify"
        )

    def test_function_call_needs_whole_path(self):
        route = classify("contacts/score(contact_abc)")
        assert route == CollectionActionRoute(
            collection="contacts", action="score(contact_abc)"
        )

    def test_trailing_content_after_call_falls_through(self):
        route = classify("score(contact_abc)/extra")
        assert route.kind is RouteKind.UNKNOWN

    def test_url_argument_keeps_slashes(self):
        route = classify("/fetch(https://example.com/a/b/c.json)/")
        assert isinstance(route, FunctionCallRoute)
        assert route.call.args[0].value == "https://example.com/a/b/c.json"
        assert route.call.args[0].kind is ArgKind.URL


class TestPrecedence:
    def test_entity_wins_over_known_collection(self):
        cfg = RouterConfig(known_collections=frozenset({"contact_abc", "contacts"}))
        route = classify("contact_abc", cfg)
        assert route.kind is RouteKind.ENTITY
        assert classify("contact_abc/$schema", cfg).entity == CONTACT

    def test_unlisted_type_prefix_is_not_entity(self):
        cfg = RouterConfig(type_prefixes=frozenset({"deal"}))
        assert classify("contact_abc", cfg) == UnknownRoute(segments=("contact_abc",))

    def test_unlisted_type_prefix_in_known_collections(self):
        cfg = RouterConfig(
            type_prefixes=frozenset({"deal"}),
            known_collections=frozenset({"contact_abc"}),
        )
        assert classify("contact_abc", cfg) == CollectionRoute(collection="contact_abc")

    def test_function_arguments_ignore_type_prefixes(self):
        cfg = RouterConfig(type_prefixes=frozenset({"contact"}))
        route = classify("score(deal_abc)", cfg)
        assert route.kind is RouteKind.FUNCTION
        assert route.call.args[0].kind is ArgKind.ENTITY

    def test_short_id_falls_back_to_unknown(self):
        assert classify("contact_ab").kind is RouteKind.UNKNOWN


class TestCollections:
    def test_heuristic_accepts_unknown_names(self):
        assert classify("widgets") == CollectionRoute(collection="widgets")

    def test_strict_rejects_unknown_names(self):
        cfg = RouterConfig(
            known_collections=frozenset({"contacts"}), strict_collections=True
        )
        assert classify("widgets", cfg) == UnknownRoute(segments=("widgets",))
        assert classify("contacts", cfg) == CollectionRoute(collection="contacts")

    def test_is_collection_name(self):
        cfg = RouterConfig()
        assert is_collection_name("contacts", cfg) is True
        assert is_collection_name("2contacts", cfg) is False
        assert is_collection_name("$schema", cfg) is False
        assert is_collection_name("contact_abc", cfg) is False


class TestTrailingSlashIdempotence:
    @pytest.mark.parametrize(
        "path",
        [
            "contacts",
            "contact_abc",
            "contact_abc/qualify",
            "contacts/$schema",
            "score(contact_abc)",
            "papa.parse(https://example.com/data.csv,header=true)",
            "$schema",
            "search",
            "foo-bar/baz",
        ],
    )
    def test_same_route(self, path):
        assert classify(path) == classify(path + "/") == classify("/" + path + "/")


class TestTotality:
    @pytest.mark.parametrize(
        "path",
        [
            "",
            "/",
            "()",
            "(((",
            ")))",
            "$$$",
            "~~~",
            "!@#%^&*",
            ",,,",
            "a(b,c",
            "\n",
            "\x00",
            "contact_abc\n",
            "ü_abc",
            "a" * 100_000,
            "/".join(["x"] * 10_000),
            "f(" + "," * 50_000 + ")",
        ],
    )
    def test_never_raises(self, path):
        route = classify(path)
        assert route.kind in set(RouteKind)

    def test_none_is_root(self):
        assert classify(None) == UnknownRoute(segments=())
