# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""ARFF loading.

Loading is a single forward pass: header lines are handed to
``load_header_line`` until ``@data`` is seen, every later line to
``load_data_line``. The first error aborts the load.
"""

import os
import re
from contextlib import contextmanager

from ._tokenize import next_quoted
from .attributes import AttributeFormat, NominalType, parse_attribute_type
from .config import ReaderConfig
from .errors import (MissingDirectiveArgumentError, NumericFieldError,
                     ParseArffError, RowWidthError,
                     UnknownNominalValueError, UnrecognizedDirectiveError)
from .log import get_logger
from .relation import Relation
from .values import MISSING, NominalValue, NumericValue

__all__ = [
    "ARFFReader",
    "MISSING_MARKER",
    "decode_row",
    "iter_arff_lines",
    "load_arff",
    "load_data_line",
    "load_header_line",
    "load_lines",
]

logger = get_logger(__name__)

MISSING_MARKER = "?"
# ASCII only: float() alone would also take "1_0" and non-ASCII digits
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|nan|inf(?:inity)?)",
    re.IGNORECASE)
_BOM = "\ufeff"


@contextmanager
def iter_arff_lines(path, encoding="utf-8", comment_marker="%"):
    """Open ``path`` and provide its ``(lineno, text)`` pairs.

    Line endings are removed, comment lines are dropped and lines that do
    not decode are skipped. The file is closed when the block exits,
    whether or not loading succeeded. Failing to open it raises OSError.
    """
    with open(path, "rb") as f:
        yield _decoded_lines(f, encoding, comment_marker)


def _decoded_lines(f, encoding, comment_marker):
    for lineno, raw in enumerate(f, 1):
        try:
            line = raw.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("skipping undecodable line %d: %s", lineno, e)
            continue
        if lineno == 1 and line.startswith(_BOM):
            line = line[len(_BOM):]
        line = line.rstrip("\r\n")
        if line.startswith(comment_marker):
            continue
        yield lineno, line


def load_header_line(relation, line):
    """Apply one header line to ``relation``.

    Returns True once the ``@data`` marker is reached, False otherwise.
    """
    tokens = iter(line.split(" "))
    directive = next(tokens)

    if directive == "@relation":
        name = next_quoted(tokens, " ")
        if name is None:
            raise MissingDirectiveArgumentError("No relation name given")
        relation.name = name
        return False
    if directive == "@attribute":
        name = next_quoted(tokens, " ")
        if name is None:
            raise MissingDirectiveArgumentError("No attribute name given")
        attr_type = parse_attribute_type(" ".join(tokens).strip())
        relation.add_attribute(AttributeFormat(name, attr_type))
        return False
    if directive == "@data":
        return True
    if directive == "":
        return False
    raise UnrecognizedDirectiveError(
        f"Unrecognized token {directive} in header")


def _decode_value(text, attr_type):
    if text == MISSING_MARKER:
        return MISSING
    if isinstance(attr_type, NominalType):
        try:
            return NominalValue(attr_type.code(text))
        except KeyError:
            raise UnknownNominalValueError(
                f"Unrecognized value `{text}`") from None
    if _FLOAT_LITERAL.fullmatch(text) is None:
        raise NumericFieldError(
            f"could not convert string to float: {text!r}")
    return NumericValue(float(text))


def decode_row(schema, line):
    """Decode one comma separated data line against ``schema``."""
    fields = [field.strip() for field in line.split(",")]
    values = [_decode_value(text, attribute.attr_type)
              for text, attribute in zip(fields, schema)]
    # zip stops at the shorter side, so compare the raw field count
    if len(fields) != len(schema):
        raise RowWidthError(
            f"Data length ({len(fields)}) does not match schema length "
            f"({len(schema)})")
    return values


def load_data_line(relation, line):
    # blank lines, typically trailing ones, are not rows
    if not line.strip():
        return
    relation.append_row(decode_row(relation.schema, line))


def _load(numbered_lines, filename):
    relation = Relation(filename=filename)
    in_header = True
    lineno = None
    try:
        for lineno, line in numbered_lines:
            if in_header:
                if load_header_line(relation, line):
                    in_header = False
                    relation.freeze_schema()
                    logger.debug("header of %r complete at line %d: %d "
                                 "attributes", relation.name, lineno,
                                 relation.num_attributes)
            else:
                load_data_line(relation, line)
    except ParseArffError as e:
        e.lineno = lineno
        logger.error("failed to load %s: %s", filename or "<lines>", e)
        raise

    if in_header:
        logger.warning("%s has no @data section", filename or "<lines>")
        relation.freeze_schema()
    return relation


def load_lines(lines, filename=""):
    """Load a relation from already comment-free text lines."""
    numbered = ((lineno, line.rstrip("\r\n"))
                for lineno, line in enumerate(lines, 1))
    return _load(numbered, filename)


def _display_name(path):
    text = os.fsdecode(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return text


def load_arff(path, config=None):
    """Read the ARFF file at ``path`` into a Relation."""
    if config is None:
        config = ReaderConfig()
    filename = _display_name(path)
    logger.info("loading %s", filename or "<unnamed file>")
    with iter_arff_lines(path, config.encoding,
                         config.comment_marker) as lines:
        relation = _load(lines, filename)
    logger.info("loaded relation %r: %d attributes, %d rows", relation.name,
                relation.num_attributes, relation.num_rows)
    return relation


class ARFFReader(object):
    """Eagerly load an ARFF file and expose it as metadata and a matrix.

    Parameters
    ----------
    filename : str, bytes or path-like
        The ARFF file to read.
    encode_nominals : bool
        If True ``get_data`` returns a float64 array with nominal codes,
        else an object array with nominal value names.
    config : ReaderConfig, optional
        Encoding and comment marker of the file.
    """

    def __init__(self, filename, encode_nominals=True, config=None):
        self.filename = os.fsdecode(filename)
        self.encode_nominals = encode_nominals
        self.config = config if config is not None else ReaderConfig()
        self.relation = load_arff(self.filename, self.config)

    def get_metadata(self):
        return self.relation.metadata()

    def get_data(self):
        return self.relation.to_numpy(encode_nominals=self.encode_nominals)
