# tests/integration/test_scenarios.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from typewrap import (
    INDEX,
    PARENT,
    ROOT,
    Accessor,
    TypeRegistry,
    Validator,
    decorate,
    type_of,
    unwrap,
)


@pytest.fixture
def blog_state():
    """Raw normalized blog state."""
    return {
        "posts": [
            {"id": "6NEN6Xuo", "title": "My first post", "author_id": "7obJ6CwW", "tags": ["foo", "bar"]},
            {"id": "vu3KPoW7", "title": "My second post", "author_id": "7obJ6CwW", "tags": ["foo"]},
            {"id": "FocE8EQ7", "title": "My first post", "author_id": "N6TKjJ3M", "tags": ["qux"]},
        ],
        "authors": [
            {"id": "7obJ6CwW", "first_name": "Jane", "last_name": "Doe"},
            {"id": "N6TKjJ3M", "first_name": "John", "last_name": "Smith"},
        ],
    }


@pytest.fixture
def blog_registry():
    """Blog types declared with classes, the way an application would."""
    registry = TypeRegistry()

    @registry.define()
    class State:
        posts = "PostList"
        authors = "AuthorList"

        def get_post(state, post_id):
            return next((post for post in state.posts if post.id == post_id), None)

        def get_author(state, author_id):
            return next((author for author in state.authors if author.id == author_id), None)

    @registry.define(index="Post")
    class PostList:
        def by_tag(posts, tag):
            return [post for post in posts if tag in post.tags]

    @registry.define()
    class Post:
        @property
        def author(post):
            return post[ROOT].get_author(post.author_id)

    @registry.define(index="Author")
    class AuthorList:
        pass

    @registry.define()
    class Author:
        @property
        def full_name(author):
            return f"{author.first_name} {author.last_name}"

        @property
        def posts(author):
            return [post for post in author[ROOT].posts if post.author_id == author.id]

    return registry


@pytest.mark.integration
class TestScenarios:
    def test_rect_area(self, rect_registry, rect_data):
        """Computed properties read live raw data on every access."""
        rect = decorate(rect_registry, "Rect", rect_data)
        assert rect.width == rect_data["width"]
        assert rect.area == 400
        rect_data["width"] = 5
        assert rect.area == 200

    def test_person_list(self, people_registry):
        """A single any-index entry types every element of a list."""
        people = decorate(people_registry, "PersonList", [{"first_name": "A", "last_name": "B"}])
        assert people[0].full_name == "A B"

    def test_map_over_elements(self, people_registry, people_data):
        people = decorate(people_registry, "PersonList", people_data)
        assert [person.full_name for person in people] == [
            f"{person['first_name']} {person['last_name']}" for person in people_data
        ]

    def test_menu_breadcrumb(self, menu_registry, menu_data):
        """Getters walk PARENT links through intermediate list views."""
        menu = decorate(menu_registry, "MenuItem", menu_data)
        assert menu.items[0].items[0].breadcrumb == "Home/Products/Product A"
        assert menu.items[2].breadcrumb == "Home/Contact"
        assert menu.breadcrumb == "Home"

    def test_three_level_relations(self, menu_registry, menu_data):
        """Every depth sees the same root view and its own parent chain."""
        root = decorate(menu_registry, "MenuItem", menu_data)
        item_list = root.items
        child = item_list[0]
        grandchildren = child.items
        grandchild = grandchildren[1]

        assert grandchild[PARENT] is grandchildren
        assert grandchild[PARENT][PARENT] is child
        assert grandchild[PARENT][PARENT][PARENT] is item_list
        assert grandchild[PARENT][PARENT][PARENT][PARENT] is root
        for view in (item_list, child, grandchildren, grandchild):
            assert view[ROOT] is root
            assert unwrap(view[ROOT]) is menu_data
        assert type_of(grandchildren) == "MenuItemList"
        assert type_of(grandchild) == "MenuItem"

    def test_root_is_shared_but_reads_are_fresh(self, menu_registry, menu_data):
        root = decorate(menu_registry, "MenuItem", menu_data)
        assert root.items is not root.items
        assert root.items[0][ROOT] is root.items[1][ROOT]

    def test_blog_state(self, blog_registry, blog_state):
        Validator().validate_registry(blog_registry)
        state = decorate(blog_registry, "State", blog_state)

        assert state.get_post("vu3KPoW7").title == "My second post"
        assert len(state.posts.by_tag("foo")) == 2
        assert state.get_post("vu3KPoW7").author.full_name == "Jane Doe"
        assert [post.id for post in state.get_author("7obJ6CwW").posts] == ["6NEN6Xuo", "vu3KPoW7"]
        assert state.get_post("missing") is None

    def test_blog_state_write_through(self, blog_registry, blog_state):
        state = decorate(blog_registry, "State", blog_state)
        state.get_author("N6TKjJ3M").first_name = "Johnny"
        assert blog_state["authors"][1]["first_name"] == "Johnny"
        assert state.get_post("FocE8EQ7").author.full_name == "Johnny Smith"

    def test_plain_mapping_registry(self):
        """Registries can be given as plain dictionaries."""
        types = {
            "Post": {"author": "Author"},
            "Author": {"full_name": Accessor(lambda a: f"{a.first_name} {a.last_name}")},
        }
        post = decorate(types, "Post", {"title": "t", "author": {"first_name": "F", "last_name": "J"}})
        assert post.author.full_name == "F J"
        assert post.author[PARENT] is post

    def test_index_entry_declared_directly(self):
        registry = TypeRegistry({"Grid": {INDEX: "Row"}, "Row": {INDEX: "Cell"}, "Cell": {"double": lambda c: 2}})
        grid = decorate(registry, "Grid", [[{}, {}], [{}]])
        assert grid[1][0].double() == 2
        assert grid[0]["1"][ROOT] is grid
