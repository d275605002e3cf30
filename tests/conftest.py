# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from typewrap.core.entries import Accessor
from typewrap.core.registry import TypeRegistry
from typewrap.interfaces.types import INDEX, PARENT


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "integration: mark test as an end-to-end decoration scenario")


@pytest.fixture
def rect_registry():
    """A registry with a single Rect type exposing a computed area."""
    return TypeRegistry({"Rect": {"area": Accessor(lambda rect: rect.width * rect.height)}})


@pytest.fixture
def rect_data():
    """Raw rectangle data."""
    return {"width": 10, "height": 40}


@pytest.fixture
def people_registry():
    """A registry describing a homogeneous list of people."""
    return TypeRegistry(
        {
            "PersonList": {INDEX: "Person"},
            "Person": {"full_name": Accessor(lambda person: f"{person.first_name} {person.last_name}")},
        }
    )


@pytest.fixture
def people_data():
    """Raw list of people."""
    return [
        {"first_name": "Fredrik", "last_name": "Johansson"},
        {"first_name": "John", "last_name": "Smith"},
    ]


@pytest.fixture
def menu_registry():
    """A recursive menu tree where each item knows its path from the top."""

    def parent_item(item):
        # item -> item list -> owning item
        if item[PARENT] is not None:
            return item[PARENT][PARENT]
        return None

    def path(item):
        parent = item.parent_item
        if parent is not None:
            return parent.path + [item]
        return [item]

    return TypeRegistry(
        {
            "MenuItemList": {INDEX: "MenuItem"},
            "MenuItem": {
                "items": "MenuItemList",
                "parent_item": Accessor(parent_item),
                "path": Accessor(path),
                "breadcrumb": Accessor(lambda item: "/".join(i.label for i in item.path)),
            },
        }
    )


@pytest.fixture
def menu_data():
    """Raw three-level menu tree."""
    return {
        "label": "Home",
        "items": [
            {
                "label": "Products",
                "items": [
                    {"label": "Product A", "items": []},
                    {"label": "Product B", "items": []},
                    {"label": "Product C", "items": []},
                ],
            },
            {"label": "About", "items": []},
            {"label": "Contact", "items": []},
        ],
    }
