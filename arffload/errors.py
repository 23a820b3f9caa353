# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""Exceptions raised while loading ARFF files.

Every parse error aborts the whole load. Messages always quote the
offending text so that the failure is actionable without re-reading the
file; the loader additionally records the line number once it is known.
"""

__all__ = [
    "ArffError",
    "ParseArffError",
    "InvalidAttributeTypeError",
    "IncompleteNominalError",
    "DuplicateNominalValueError",
    "MissingDirectiveArgumentError",
    "UnrecognizedDirectiveError",
    "NumericFieldError",
    "UnknownNominalValueError",
    "RowWidthError",
    "SchemaFrozenError",
    "ConfigError",
]


class ArffError(Exception):
    """Base class for all arffload errors."""


class ParseArffError(ArffError):
    """Raised when a header or data line cannot be parsed.

    Attributes:
        message: description of the failure, including the offending text
        lineno: 1-based line number in the source, or None until the loader
            annotates the error
    """

    def __init__(self, message, lineno=None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self):
        if self.lineno is None:
            return self.message
        return f"{self.message} (line {self.lineno})"


class InvalidAttributeTypeError(ParseArffError):
    """Type declaration is neither a numeric keyword nor a ``{...}`` set."""


class IncompleteNominalError(ParseArffError):
    """Nominal braces hold no value names."""


class DuplicateNominalValueError(ParseArffError):
    """The same value name is declared twice for one nominal attribute."""


class MissingDirectiveArgumentError(ParseArffError):
    """``@relation`` or ``@attribute`` without a name."""


class UnrecognizedDirectiveError(ParseArffError):
    """Header line starting with an unknown token."""


class NumericFieldError(ParseArffError):
    """Data field of a numeric column is not a floating point literal."""


class UnknownNominalValueError(ParseArffError):
    """Data field of a nominal column matches none of the declared names."""


class RowWidthError(ParseArffError):
    """Data line holds more or fewer fields than the schema has columns."""


class SchemaFrozenError(ArffError):
    """Schema changed after the header, or a row added before it ended."""


class ConfigError(ArffError):
    pass
