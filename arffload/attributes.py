# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""Attribute (column) types of an ARFF relation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ._tokenize import QUOTE, iter_quoted
from .errors import (DuplicateNominalValueError, IncompleteNominalError,
                     InvalidAttributeTypeError)

__all__ = [
    "NUMERIC_KEYWORDS",
    "AttributeType",
    "NumericType",
    "NominalType",
    "AttributeFormat",
    "parse_attribute_type",
]

# ``integer`` values are read as floats as well
NUMERIC_KEYWORDS = ("real", "continuous", "integer")


class AttributeType:
    type_name = None


@dataclass(frozen=True)
class NumericType(AttributeType):
    type_name = "numeric"

    def describe(self):
        return self.type_name


@dataclass(frozen=True)
class NominalType(AttributeType):
    """Enumerated type; a value's code is its position in ``values``."""

    type_name = "nominal"

    values: tuple[str, ...]
    codes: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        values = tuple(self.values)
        codes = {}
        for code, name in enumerate(values):
            if name in codes:
                raise DuplicateNominalValueError(
                    f"Duplicate nominal value: {name}")
            codes[name] = code
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "codes", codes)

    def code(self, name):
        """Code of the value called ``name``; KeyError if undeclared."""
        return self.codes[name]

    def name(self, code):
        return self.values[code]

    def describe(self):
        return list(self.values)


@dataclass(frozen=True)
class AttributeFormat:
    """One column of the schema. Names need not be unique."""

    name: str
    attr_type: AttributeType

    @property
    def is_nominal(self):
        return isinstance(self.attr_type, NominalType)


def parse_attribute_type(type_str: str) -> AttributeType:
    """Classify the type part of an ``@attribute`` declaration.

    ``type_str`` is the stripped text following the attribute name: one of
    the numeric keywords (any case) or a brace-delimited list of nominal
    value names, each bare or single-quoted.

    Raises:
        InvalidAttributeTypeError: neither form matches
        IncompleteNominalError: the braces hold no names
        DuplicateNominalValueError: a name is declared twice
    """
    if type_str.lower() in NUMERIC_KEYWORDS:
        return NumericType()
    if not (len(type_str) >= 2 and type_str.startswith("{")
            and type_str.endswith("}")):
        raise InvalidAttributeTypeError(
            f"Invalid attribute type: {type_str}")

    values = []
    for token in iter_quoted(type_str[1:-1], ","):
        name = token.strip()
        # a quote behind leading whitespace is only unwrapped when the value
        # holds no comma; " 'b,c'" still splits into two names
        if len(name) >= 2 and name[0] == QUOTE and name[-1] == QUOTE:
            name = name[1:-1]
        if name:
            values.append(name)
    if not values:
        raise IncompleteNominalError("Incomplete nominal attribute type")
    return NominalType(tuple(values))
