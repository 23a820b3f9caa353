from __future__ import annotations

import pytest

from arffload.attributes import (AttributeFormat, NominalType, NumericType,
                                 parse_attribute_type)
from arffload.errors import (DuplicateNominalValueError,
                             IncompleteNominalError,
                             InvalidAttributeTypeError, ParseArffError)


@pytest.mark.parametrize("type_str", ["REAL", "Integer", "continuous", "real"])
def test_numeric_keywords_are_case_insensitive(type_str):
    assert parse_attribute_type(type_str) == NumericType()


def test_nominal_codes_follow_declaration_order():
    attr_type = parse_attribute_type("{red,green,blue}")
    assert isinstance(attr_type, NominalType)
    assert attr_type.values == ("red", "green", "blue")
    assert attr_type.codes == {"red": 0, "green": 1, "blue": 2}
    assert attr_type.code("green") == 1
    assert attr_type.name(2) == "blue"


def test_nominal_quoted_values_may_contain_commas():
    attr_type = parse_attribute_type("{'a,b',c}")
    assert attr_type.values == ("a,b", "c")


def test_nominal_values_are_stripped():
    attr_type = parse_attribute_type("{sunny, overcast, rainy}")
    assert attr_type.values == ("sunny", "overcast", "rainy")


def test_nominal_matching_is_case_sensitive():
    attr_type = parse_attribute_type("{Yes,yes}")
    assert attr_type.codes == {"Yes": 0, "yes": 1}
    with pytest.raises(KeyError):
        attr_type.code("YES")


def test_duplicate_nominal_value():
    with pytest.raises(DuplicateNominalValueError) as e:
        parse_attribute_type("{a,a}")
    assert "a" in str(e.value)
    assert isinstance(e.value, ParseArffError)


@pytest.mark.parametrize("type_str", ["{}", "{ }", "{,,}"])
def test_empty_nominal_set(type_str):
    with pytest.raises(IncompleteNominalError) as e:
        parse_attribute_type(type_str)
    assert "Incomplete nominal attribute type" in str(e.value)


@pytest.mark.parametrize("type_str", ["foo", "", "{a,b", "a,b}", "{", "string",
                                      "date"])
def test_invalid_type(type_str):
    with pytest.raises(InvalidAttributeTypeError) as e:
        parse_attribute_type(type_str)
    assert str(e.value) == f"Invalid attribute type: {type_str}"


def test_attribute_format_is_immutable():
    attr = AttributeFormat("outlook", parse_attribute_type("{sunny,rainy}"))
    assert attr.is_nominal
    with pytest.raises(AttributeError):
        attr.name = "other"


def test_describe():
    assert NumericType().describe() == "numeric"
    assert NominalType(("x", "y")).describe() == ["x", "y"]
    assert NominalType(["x", "y"]) == NominalType(("x", "y"))


def test_spaced_quoted_values():
    assert parse_attribute_type("{a, 'b'}").values == ("a", "b")
    # the leading space hides the quote, so the comma still splits
    assert parse_attribute_type("{a, 'b,c'}").values == ("a", "'b", "c'")
