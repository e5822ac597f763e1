"""Unit tests for facet configuration and facet items."""

from __future__ import annotations

import pytest

from search_state.application.facets import (
    Controller,
    FacetConfigurationLookup,
    FacetFieldConfig,
    FacetItem,
    SearchConfiguration,
    facet_value,
    resolve_facet_item,
)
from search_state.config import SearchStateSettings
from search_state.kernel.errors import UnknownFacetFieldError


def _config() -> SearchConfiguration:
    config = SearchConfiguration()
    config.add_facet_field("genre_ssim", key="genre")
    config.add_facet_field("format", single=True, label="Format")
    return config


class TestFacetFieldConfig:
    def test_key_defaults_to_field(self) -> None:
        assert FacetFieldConfig("format").key == "format"

    def test_explicit_key(self) -> None:
        assert FacetFieldConfig("genre_ssim", key="genre").key == "genre"

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            FacetFieldConfig("format").single = True  # type: ignore[misc]


class TestSearchConfiguration:
    def test_lookup_by_field(self) -> None:
        assert _config().facet_configuration_for_field("genre_ssim").key == "genre"

    def test_lookup_by_key(self) -> None:
        assert _config().facet_configuration_for_field("genre").field == "genre_ssim"

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(UnknownFacetFieldError) as exc_info:
            _config().facet_configuration_for_field("author")
        assert exc_info.value.field == "author"

    def test_add_returns_config(self) -> None:
        config = SearchConfiguration().add_facet_field("format", single=True, label="Format")
        assert config == FacetFieldConfig("format", key="format", single=True, label="Format")

    def test_default_paginator_keys(self) -> None:
        assert SearchConfiguration().facet_paginator_keys() == (
            "facet.page", "facet.sort", "facet.prefix",
        )

    def test_default_show_route(self) -> None:
        assert SearchConfiguration().show_route == {"controller": Controller.CURRENT}

    def test_from_settings(self) -> None:
        settings = SearchStateSettings(facet_paginator_request_keys=["facet.offset"])
        config = SearchConfiguration.from_settings(settings, show_route=None)
        assert config.facet_paginator_keys() == ("facet.offset",)
        assert config.show_route is None

    def test_satisfies_lookup_protocol(self) -> None:
        assert isinstance(SearchConfiguration(), FacetConfigurationLookup)


class TestFacetItem:
    def test_pairs_from_sequence(self) -> None:
        item = FacetItem("x", fq=[("a", "1"), ("b", "2")])
        assert item.pairs() == [("a", "1"), ("b", "2")]

    def test_pairs_from_mapping(self) -> None:
        item = FacetItem("x", fq={"a": "1", "b": "2"})
        assert item.pairs() == [("a", "1"), ("b", "2")]

    def test_no_pairs(self) -> None:
        assert FacetItem("x").pairs() == []

    def test_facet_value(self) -> None:
        assert facet_value(FacetItem("drama")) == "drama"
        assert facet_value("drama") == "drama"


class TestResolveFacetItem:
    def test_bare_value(self) -> None:
        config, value = resolve_facet_item("genre_ssim", "drama", _config())
        assert config.key == "genre"
        assert value == "drama"

    def test_item_field_overrides(self) -> None:
        item = FacetItem("book", field="format")
        config, value = resolve_facet_item("genre_ssim", item, _config())
        assert config.field == "format"
        assert value == "book"

    def test_item_without_field(self) -> None:
        config, value = resolve_facet_item("genre_ssim", FacetItem("drama"), _config())
        assert config.key == "genre"
        assert value == "drama"

    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownFacetFieldError):
            resolve_facet_item("author", "x", _config())
