"""
Tests for container structure and cascades.

Focus Areas:
1. Adding, inserting and removing children
2. Value aggregation and filters
3. Freeze, validation and string cascades
"""

import pytest

from formtree.config import set_options
from formtree.containers import Container, Fieldset, Group
from formtree.elements import HiddenInput, TextInput
from formtree.exceptions import InvalidInputError, NotFoundError


class TestStructure:
    """Test ordered child management."""

    def test_append_keeps_insertion_order(self):
        container = Container()
        a = container.append_child(TextInput("a"))
        b = container.append_child(TextInput("b"))

        assert container.get_elements() == [a, b]
        assert list(container) == [a, b]
        assert a.container is container

    def test_insert_before_reference(self):
        container = Container()
        a = container.append_child(TextInput("a"))
        c = container.append_child(TextInput("c"))
        b = container.insert_before(TextInput("b"), c)

        assert container.get_elements() == [a, b, c]

    def test_insert_before_none_appends(self):
        container = Container()
        a = container.append_child(TextInput("a"))
        b = container.insert_before(TextInput("b"))

        assert container.get_elements() == [a, b]

    def test_insert_before_foreign_reference_fails(self):
        container = Container()
        stranger = TextInput("stranger")

        with pytest.raises(NotFoundError):
            container.insert_before(TextInput("b"), stranger)
        assert len(container) == 0

    def test_remove_child_not_owned_fails(self):
        with pytest.raises(NotFoundError) as exc_info:
            Container().remove_child(TextInput("x"))

        assert exc_info.value.name == "x"

    def test_append_non_node_fails(self):
        with pytest.raises(InvalidInputError):
            Container().append_child("not a node")

    def test_container_cannot_contain_itself(self):
        container = Container()

        with pytest.raises(InvalidInputError):
            container.append_child(container)

    def test_container_cannot_contain_its_ancestor(self):
        outer = Container()
        inner = outer.append_child(Container())

        with pytest.raises(InvalidInputError):
            inner.append_child(outer)
        assert outer.container is None

    def test_moving_between_containers(self):
        first, second = Container(), Container()
        x = first.append_child(TextInput("x"))

        second.append_child(x)

        assert len(first) == 0
        assert second.get_elements() == [x]

    def test_add_element_uses_factory(self):
        container = Container()
        element = container.add_element("text", "email", {"class": "wide"}, label="Email")

        assert isinstance(element, TextInput)
        assert element.get_attribute("class") == "wide"
        assert element.get_label() == "Email"
        assert element.container is container

    def test_lookup_by_id_and_name(self):
        container = Container()
        group = container.append_child(Group("g"))
        x = group.append_child(TextInput("x", {"id": "x-id"}))

        assert container.get_element_by_id("x-id") is x
        assert container.get_element_by_id("missing") is None
        assert container.get_elements_by_name("g[x]") == [x]


class TestValues:
    """Test aggregation of descendant values."""

    def test_values_nested_by_wire_name(self):
        container = Container()
        container.append_child(TextInput("name", value="Alice"))
        group = container.append_child(Group("addr"))
        group.append_child(TextInput("city", value="Oslo"))

        assert container.get_value() == {"name": "Alice", "addr": {"city": "Oslo"}}

    def test_none_values_are_omitted(self):
        container = Container()
        container.append_child(TextInput("empty"))
        container.append_child(TextInput("full", value="x"))

        assert container.get_value() == {"full": "x"}

    def test_container_filters_apply_to_aggregate(self):
        container = Container()
        container.append_child(TextInput("a", value="1"))
        container.add_filter(lambda values, extra: {**values, "extra": extra}, "yes")

        assert container.get_value() == {"a": "1", "extra": "yes"}
        assert container.get_raw_value() == {"a": "1"}

    def test_recursive_filter_reaches_all_leaves(self):
        container = Container()
        container.append_child(TextInput("a", value=" x "))
        group = container.append_child(Group("g"))
        group.append_child(TextInput("b", value=" y "))

        container.add_recursive_filter(str.strip)

        assert container.get_value() == {"a": "x", "g": {"b": "y"}}

    def test_recursive_filter_must_be_callable(self):
        with pytest.raises(InvalidInputError):
            Container().add_recursive_filter("strip")

    def test_submit_value_skips_frozen_elements(self):
        container = Container()
        container.append_child(TextInput("open", value="1"))
        frozen = container.append_child(TextInput("frozen", value="2"))
        kept = container.append_child(TextInput("kept", value="3"))
        frozen.toggle_frozen(True)
        kept.toggle_frozen(True)
        kept.persistent_freeze(True)

        assert container.get_submit_value() == {"open": "1", "kept": "3"}
        assert container.get_value() == {"open": "1", "frozen": "2", "kept": "3"}


class TestCascades:
    """Test operations that are passed down to every child."""

    def test_toggle_frozen_cascades(self):
        container = Container()
        group = container.append_child(Group("g"))
        x = group.append_child(TextInput("x"))

        assert container.toggle_frozen(True) is True
        assert group.is_frozen()
        assert x.is_frozen()

        container.toggle_frozen(False)
        assert not x.is_frozen()

    def test_query_does_not_cascade(self):
        container = Container()
        x = container.append_child(TextInput("x"))
        x.toggle_frozen(True)

        assert container.toggle_frozen() is False
        assert x.is_frozen()

    def test_persistent_freeze_cascades(self):
        container = Container()
        x = container.append_child(TextInput("x"))

        container.persistent_freeze(True)

        assert x.persistent_freeze() is True

    def test_validate_visits_every_child(self):
        """A failing child does not stop the others from being validated."""
        container = Container()
        first = container.append_child(TextInput("first"))
        second = container.append_child(TextInput("second"))
        first.add_rule("required", "first missing")
        second.add_rule("required", "second missing")

        assert container.validate() is False
        assert first.get_error() == "first missing"
        assert second.get_error() == "second missing"

    def test_validate_includes_own_rules(self):
        container = Container()
        container.append_child(TextInput("x", value="1"))
        container.add_rule("callback", "need two fields", lambda values: len(values) >= 2)

        assert container.validate() is False
        assert container.get_error() == "need two fields"

    def test_validate_success(self):
        container = Container()
        x = container.append_child(TextInput("x", value="1"))
        x.add_rule("required")

        assert container.validate() is True
        assert x.get_error() is None


class TestStringConversion:
    """Test joining child output."""

    def test_children_joined_with_linebreak(self):
        container = Container()
        container.append_child(HiddenInput("a", value="1"))
        container.append_child(HiddenInput("b", value="2"))

        lines = str(container).split("\n")

        assert len(lines) == 2
        assert 'name="a"' in lines[0]
        assert 'name="b"' in lines[1]

    def test_linebreak_option(self):
        set_options(linebreak="<br />")
        container = Container()
        container.append_child(HiddenInput("a"))
        container.append_child(HiddenInput("b"))

        assert str(container).count("<br />") == 1


class TestFieldset:
    """Test the fieldset container."""

    def test_fieldset_does_not_rename(self):
        fieldset = Fieldset(label="Address")
        city = fieldset.append_child(TextInput("city"))

        assert city.get_name() == "city"
        assert fieldset.get_type() == "fieldset"
