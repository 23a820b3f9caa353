from ._reader import (ARFFReader, decode_row, load_arff, load_data_line,
                      load_header_line, load_lines)
from ._tokenize import iter_quoted, next_quoted
from .attributes import (AttributeFormat, NominalType, NumericType,
                         parse_attribute_type)
from .config import ReaderConfig, load_config
from .dataset import load_arff_dataset
from .errors import (ArffError, ConfigError, DuplicateNominalValueError,
                     IncompleteNominalError, InvalidAttributeTypeError,
                     MissingDirectiveArgumentError, NumericFieldError,
                     ParseArffError, RowWidthError, SchemaFrozenError,
                     UnknownNominalValueError, UnrecognizedDirectiveError)
from .log import setup_logging
from .relation import Relation
from .values import MISSING, NominalValue, NumericValue

__all__ = [
    'ARFFReader',
    'load_arff_dataset',
    'load_arff',
    'load_lines',
    'load_header_line',
    'load_data_line',
    'decode_row',
    'Relation',
    'AttributeFormat',
    'NumericType',
    'NominalType',
    'parse_attribute_type',
    'NumericValue',
    'NominalValue',
    'MISSING',
    'next_quoted',
    'iter_quoted',
    'ReaderConfig',
    'load_config',
    'setup_logging',
    'ArffError',
    'ParseArffError',
    'InvalidAttributeTypeError',
    'IncompleteNominalError',
    'DuplicateNominalValueError',
    'MissingDirectiveArgumentError',
    'UnrecognizedDirectiveError',
    'NumericFieldError',
    'UnknownNominalValueError',
    'RowWidthError',
    'SchemaFrozenError',
    'ConfigError',
]
