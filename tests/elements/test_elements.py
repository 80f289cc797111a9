"""
Tests for leaf elements and the element factory.
"""

import pytest

from formtree.containers import Fieldset, Group
from formtree.datasources import ArrayDataSource, InboundRequest
from formtree.elements import (
    Element,
    HiddenInput,
    PasswordInput,
    SubmitInput,
    TextInput,
    create_element,
    is_type_registered,
    list_element_types,
    register_element_type,
)
from formtree.exceptions import InvalidInputError
from formtree.form import Form


class TestElementBasics:
    """Test names, ids, attributes and values of leaf elements."""

    def test_name_and_type(self):
        element = TextInput("email")

        assert element.get_name() == "email"
        assert element.name == "email"
        assert element.get_type() == "text"
        assert element.get_attribute("type") == "text"

    def test_generated_id_uses_name(self):
        element = TextInput("addr[city]")

        assert element.get_id().startswith("addr-city-")

    def test_explicit_id_is_kept(self):
        element = TextInput("email", {"id": "mail"})

        assert element.get_id() == "mail"
        assert element.id == "mail"

    def test_watched_attributes_route_to_setters(self):
        element = TextInput("email")

        element.set_attribute("name", "login")
        element.set_attribute("ID", "login-id")

        assert element.get_name() == "login"
        assert element.get_id() == "login-id"

    def test_set_id_without_value_generates_one(self):
        element = TextInput("email", {"id": "mail"})

        element.set_id()

        assert element.get_id().startswith("email-")

    def test_remove_attribute(self):
        element = TextInput("email", {"class": "wide"})

        element.remove_attribute("class")

        assert element.get_attribute("class") is None

    def test_attributes_must_be_mapping(self):
        with pytest.raises(InvalidInputError):
            TextInput("email", "class=wide")

    def test_default_value(self):
        element = TextInput("email", value="a@example.com")

        assert element.get_value() == "a@example.com"

    def test_set_value(self):
        element = TextInput("email")

        element.set_value("b@example.com")

        assert element.get_value() == "b@example.com"


    def test_filters_apply_in_order(self):
        element = TextInput("email", value="  A@Example.com ")
        element.add_filter(str.strip)
        element.add_filter(str.lower)

        assert element.get_value() == "a@example.com"
        assert element.get_raw_value() == "  A@Example.com "

    def test_filter_must_be_callable(self):
        with pytest.raises(InvalidInputError):
            TextInput("email").add_filter("lower")

    def test_disabled_element_has_no_value(self):
        element = TextInput("email", {"disabled": True}, value="x")

        assert element.get_value() is None


class TestValueResolution:
    """Test value resolution from the data sources of the owning form."""

    def test_detached_element_keeps_default(self):
        element = TextInput("email", value="default")

        element.update_value()

        assert element.get_value() == "default"

    def test_value_taken_on_attach(self):
        form = Form("f", track_submit=False)
        form.add_data_source(ArrayDataSource({"email": "from-source"}))

        element = form.append_child(TextInput("email", value="default"))

        assert element.get_value() == "from-source"

    def test_nested_name_resolved_through_group(self):
        form = Form("f", track_submit=False)
        form.add_data_source(ArrayDataSource({"addr": {"city": "Oslo"}}))
        group = form.append_child(Group("addr"))

        city = group.append_child(TextInput("city"))

        assert city.get_value() == "Oslo"

    def test_falls_back_to_default(self):
        form = Form("f", track_submit=False)
        element = form.append_child(TextInput("email", value="default"))
        form.add_data_source(ArrayDataSource({"email": "other"}))

        form.set_data_sources([])

        assert element.get_value() == "default"

    def test_frozen_element_ignores_submitted_value(self):
        request = InboundRequest(body={"_qf__f": "", "email": "submitted"})
        form = Form("f", request=request)
        element = TextInput("email", value="default")
        element.toggle_frozen(True)

        form.append_child(element)

        assert element.get_value() == "default"

    def test_frozen_element_uses_default_sources(self):
        request = InboundRequest(body={"_qf__f": "", "email": "submitted"})
        form = Form("f", request=request)
        form.add_data_source(ArrayDataSource({"email": "stored"}))
        element = TextInput("email")
        element.toggle_frozen(True)

        form.append_child(element)

        assert element.get_value() == "stored"

    def test_persistent_freeze_trusts_submitted_value(self):
        request = InboundRequest(body={"_qf__f": "", "email": "submitted"})
        form = Form("f", request=request)
        element = TextInput("email", value="default")
        element.toggle_frozen(True)
        element.persistent_freeze(True)

        form.append_child(element)

        assert element.get_value() == "submitted"

    def test_freezing_attached_element_drops_submitted_value(self):
        request = InboundRequest(body={"_qf__f": "", "email": "submitted"})
        form = Form("f", request=request)
        element = form.append_child(TextInput("email", value="default"))

        element.toggle_frozen(True)

        assert element.get_value() == "default"

    def test_renaming_attached_element(self):
        form = Form("f", track_submit=False)
        form.add_data_source(ArrayDataSource({"email": "a@example.com", "mail": "b@example.com"}))
        element = form.append_child(TextInput("email"))

        element.set_name("mail")

        assert element.get_value() == "b@example.com"


class TestInputHtml:
    """Test the markup of input elements."""

    def test_text_input_html(self):
        html = str(TextInput("email", {"id": "mail"}, value="a@example.com"))

        assert html.startswith("<input")
        assert 'type="text"' in html
        assert 'name="email"' in html
        assert 'id="mail"' in html
        assert 'value="a@example.com"' in html

    def test_values_are_escaped(self):
        html = str(TextInput("q", value='<b>"x"</b>'))

        assert 'value="&lt;b&gt;&quot;x&quot;&lt;/b&gt;"' in html

    def test_frozen_input_shows_text(self):
        element = TextInput("email", value="a&b")
        element.toggle_frozen(True)

        assert str(element) == "a&amp;b"

    def test_persistent_frozen_input_adds_hidden_field(self):
        element = TextInput("email", value="a")
        element.toggle_frozen(True)
        element.persistent_freeze(True)

        html = str(element)

        assert html.startswith("a<input")
        assert 'type="hidden"' in html
        assert 'name="email"' in html

    def test_frozen_password_is_masked(self):
        element = PasswordInput("secret", value="hunter2")
        element.toggle_frozen(True)

        assert str(element) == "********"

    def test_hidden_input_cannot_be_frozen(self):
        element = HiddenInput("token", value="abc")

        assert element.toggle_frozen(True) is False
        assert 'type="hidden"' in str(element)


class TestSubmitInput:
    """Test submit buttons."""

    def test_caption_is_rendered(self):
        button = SubmitInput("save", value="Save")

        assert 'value="Save"' in str(button)
        assert button.get_value() is None

    def test_value_only_from_submit_source(self):
        form = Form("f", track_submit=False)
        form.add_data_source(ArrayDataSource({"save": "Save"}))
        button = form.append_child(SubmitInput("save", value="Save"))

        assert button.get_value() is None

    def test_value_when_submitted_with_button(self):
        request = InboundRequest(body={"_qf__f": "", "save": "Save"})
        form = Form("f", request=request)
        button = form.append_child(SubmitInput("save", value="Save"))

        assert button.get_value() == "Save"

    def test_frozen_button_disappears(self):
        button = SubmitInput("save", value="Save")
        button.toggle_frozen(True)

        assert str(button) == ""


class TestFactory:
    """Test creating elements by type name."""

    def test_builtin_types(self):
        assert isinstance(create_element("text", "a"), TextInput)
        assert isinstance(create_element("password", "a"), PasswordInput)
        assert isinstance(create_element("hidden", "a"), HiddenInput)
        assert isinstance(create_element("submit", "a"), SubmitInput)
        assert isinstance(create_element("group", "a"), Group)
        assert isinstance(create_element("fieldset"), Fieldset)

    def test_type_names_are_case_insensitive(self):
        assert isinstance(create_element("TEXT", "a"), TextInput)
        assert is_type_registered("Hidden")

    def test_arguments_are_passed_on(self):
        element = create_element("hidden", "_qf__f1", {"id": "qf:f1"}, value="1")

        assert element.get_name() == "_qf__f1"
        assert element.get_id() == "qf:f1"
        assert element.get_value() == "1"

    def test_unknown_type(self):
        with pytest.raises(InvalidInputError) as exc_info:
            create_element("colorwheel", "a")

        assert "colorwheel" in str(exc_info.value)

    def test_register_custom_type(self):
        class EmailInput(TextInput):
            input_type = "email"

        register_element_type("email", EmailInput)

        element = create_element("email", "contact")
        assert isinstance(element, EmailInput)
        assert "email" in list_element_types()
        assert isinstance(element, Element)

    def test_register_non_node_fails(self):
        with pytest.raises(InvalidInputError):
            register_element_type("thing", dict)
