"""Tests for urlform.adapters - converters and BasicParameterType."""

import pytest

from urlform import Parameter, ParameterType, ValueConverter
from urlform.adapters import (
    BOOLEAN,
    INTEGER,
    PLAIN_STRING,
    BasicParameterType,
    BooleanConverter,
    IntegerConverter,
    PlainStringConverter,
)


class TestConverters:
    """Test the bundled value converters."""

    def test_plain_string(self):
        assert PLAIN_STRING.value_from_string(" a b ") == " a b "
        assert PLAIN_STRING.value_to_string("x") == "x"

    def test_integer(self):
        assert INTEGER.value_from_string(" 42 ") == 42
        assert INTEGER.value_from_string("-7") == -7
        assert INTEGER.value_to_string(5) == "5"

    def test_integer_rejects_text(self):
        with pytest.raises(ValueError):
            INTEGER.value_from_string("four")

    @pytest.mark.parametrize("text", ["", "true", "TRUE", "1", "yes", "on"])
    def test_boolean_true(self, text):
        assert BOOLEAN.value_from_string(text) is True

    @pytest.mark.parametrize("text", ["false", "0", "No", "off"])
    def test_boolean_false(self, text):
        assert BOOLEAN.value_from_string(text) is False

    def test_boolean_rejects_text(self):
        with pytest.raises(ValueError):
            BOOLEAN.value_from_string("maybe")

    def test_boolean_to_string(self):
        assert BOOLEAN.value_to_string(True) == "true"
        assert BOOLEAN.value_to_string(False) == "false"

    @pytest.mark.parametrize("converter", [PlainStringConverter(), IntegerConverter(), BooleanConverter()])
    def test_protocol(self, converter):
        assert isinstance(converter, ValueConverter)


class TestBasicParameterType:
    """Test name + converter parameter types."""

    def test_name(self):
        assert BasicParameterType("key", PLAIN_STRING).name == "key"

    def test_entity(self):
        assert BasicParameterType("page", INTEGER).entity(3) == Parameter(name="page", value=3)

    def test_entity_from_string(self):
        assert BasicParameterType("page", INTEGER).entity_from_string("3") == Parameter(name="page", value=3)

    def test_entity_from_none(self):
        assert BasicParameterType("page", INTEGER).entity_from_string(None) == Parameter(name="page", value=None)

    def test_entity_matches_entity_from_string(self):
        key = BasicParameterType("key", PLAIN_STRING)
        assert key.entity("value") == key.entity_from_string("value")
        assert key.entity("value") != key.entity("other")

    def test_different_names_differ(self):
        assert Parameter(name="a", value="x") != Parameter(name="b", value="x")

    def test_equality(self):
        assert BasicParameterType("key", PLAIN_STRING) == BasicParameterType("key", PLAIN_STRING)
        assert BasicParameterType("key", PLAIN_STRING) != BasicParameterType("key", INTEGER)
        assert hash(BasicParameterType("key", PLAIN_STRING)) == hash(BasicParameterType("key", INTEGER))

    def test_protocol(self):
        assert isinstance(BasicParameterType("key", PLAIN_STRING), ParameterType)

    def test_repr(self):
        assert repr(BasicParameterType("key", INTEGER)) == "BasicParameterType('key', IntegerConverter)"

    def test_parameter_is_frozen(self):
        parameter = Parameter(name="key", value="v")
        with pytest.raises(Exception):
            parameter.value = "w"
