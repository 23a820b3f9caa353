# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""In-memory ARFF relation: a schema plus fixed-width rows."""

from collections.abc import Sequence

import numpy as np

from .attributes import NominalType
from .errors import RowWidthError, SchemaFrozenError
from .values import MISSING, NominalValue, NumericValue

__all__ = ["Relation", "RowView", "ColumnView"]


class Relation(object):
    """A loaded ARFF dataset.

    The schema is built while the header is read and frozen when ``@data``
    is reached; rows can only be appended after that, and always hold one
    value per column. Row and column lookups return None for an index that
    is out of range instead of raising.

    Parameters
    ----------
    filename : str
        Path the relation was read from, "" when not known.
    name : str
        Relation name from the ``@relation`` line.
    """

    def __init__(self, filename="", name=""):
        self.filename = filename
        self.name = name
        self._schema = []
        self._rows = []
        self._frozen = False

    @property
    def schema(self):
        return tuple(self._schema)

    @property
    def schema_frozen(self):
        return self._frozen

    @property
    def num_rows(self):
        return len(self._rows)

    @property
    def num_attributes(self):
        return len(self._schema)

    def add_attribute(self, attribute):
        if self._frozen:
            raise SchemaFrozenError(
                f"cannot add attribute {attribute.name!r} after the header")
        self._schema.append(attribute)

    def freeze_schema(self):
        self._frozen = True

    def append_row(self, values):
        if not self._frozen:
            raise SchemaFrozenError("rows can only be added after the header")
        values = list(values)
        if len(values) != len(self._schema):
            raise RowWidthError(
                f"Data length ({len(values)}) does not match schema length "
                f"({len(self._schema)})")
        self._rows.append(values)

    def row(self, index):
        """Values of row ``index`` as a tuple, or None if out of range."""
        if 0 <= index < len(self._rows):
            return tuple(self._rows[index])
        return None

    def row_mut(self, index):
        """Writable view of row ``index``, or None if out of range."""
        if 0 <= index < len(self._rows):
            return RowView(self, index)
        return None

    def _has_column(self, index):
        if not 0 <= index < len(self._schema):
            return False
        return all(index < len(row) for row in self._rows)

    def col(self, index):
        """Values of column ``index`` across all rows, or None."""
        if not self._has_column(index):
            return None
        return tuple(row[index] for row in self._rows)

    def col_mut(self, index):
        if not self._has_column(index):
            return None
        return ColumnView(self, index)

    def check_value(self, column, value):
        """Raise unless ``value`` may be stored in ``column``."""
        if value is MISSING:
            return
        attribute = self._schema[column]
        attr_type = attribute.attr_type
        if isinstance(attr_type, NominalType):
            if not isinstance(value, NominalValue):
                raise TypeError(f"attribute {attribute.name!r} is nominal, "
                                f"got {value!r}")
            if not 0 <= value.code < len(attr_type.values):
                raise ValueError(f"code {value.code} out of range for "
                                 f"attribute {attribute.name!r}")
        elif not isinstance(value, NumericValue):
            raise TypeError(f"attribute {attribute.name!r} is numeric, "
                            f"got {value!r}")

    def metadata(self):
        return {
            "filename": self.filename,
            "relation": self.name,
            "attributes": [(attr.name, attr.attr_type.describe())
                           for attr in self._schema],
        }

    def to_numpy(self, encode_nominals=True):
        """Rows as a 2-D array.

        With ``encode_nominals`` the array is float64, nominal cells hold
        their codes and missing cells are nan. Otherwise it is an object
        array of floats, nominal value names and None.
        """
        shape = (len(self._rows), len(self._schema))
        if encode_nominals:
            data = np.full(shape, np.nan, dtype=np.float64)
        else:
            data = np.empty(shape, dtype=object)
        for i, row in enumerate(self._rows):
            for j, value in enumerate(row):
                if isinstance(value, NumericValue):
                    data[i, j] = value.value
                elif isinstance(value, NominalValue):
                    if encode_nominals:
                        data[i, j] = value.code
                    else:
                        data[i, j] = self._schema[j].attr_type.name(value.code)
        return data

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        for row in self._rows:
            yield tuple(row)

    def __eq__(self, other):
        if not isinstance(other, Relation):
            return NotImplemented
        return (self.filename == other.filename and self.name == other.name
                and self._schema == other._schema
                and self._rows == other._rows)

    __hash__ = None

    def __repr__(self):
        return (f"Relation(name={self.name!r}, "
                f"attributes={len(self._schema)}, rows={len(self._rows)})")


class RowView(Sequence):
    """Fixed-width, writable window on one row of a relation."""

    def __init__(self, relation, index):
        self._relation = relation
        self._row = relation._rows[index]

    def __len__(self):
        return len(self._row)

    def __getitem__(self, column):
        if isinstance(column, slice):
            return tuple(self._row[column])
        return self._row[column]

    def __setitem__(self, column, value):
        if not isinstance(column, int):
            raise TypeError("row views only support integer indices")
        column = range(len(self._row))[column]
        self._relation.check_value(column, value)
        self._row[column] = value


class ColumnView(Sequence):
    """Writable window on one column across every row of a relation."""

    def __init__(self, relation, column):
        self._relation = relation
        self._rows = relation._rows
        self._column = column

    def __len__(self):
        return len(self._rows)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(row[self._column] for row in self._rows[index])
        return self._rows[index][self._column]

    def __setitem__(self, index, value):
        if not isinstance(index, int):
            raise TypeError("column views only support integer indices")
        self._relation.check_value(self._column, value)
        self._rows[index][self._column] = value
