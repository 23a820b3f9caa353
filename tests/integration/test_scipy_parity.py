from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from arffload import load_arff
from arffload.values import MISSING

scipy_arff = pytest.importorskip("scipy.io.arff")


def test_matches_scipy_loadarff(weather_file: Path):
    data, meta = scipy_arff.loadarff(str(weather_file))
    relation = load_arff(weather_file)
    matrix = relation.to_numpy()

    assert meta.name == relation.name
    assert meta.names() == [a.name for a in relation.schema]
    assert meta.types() == [a.attr_type.type_name for a in relation.schema]
    assert len(data) == relation.num_rows

    for k, attr in enumerate(relation.schema):
        theirs = data[attr.name]
        if attr.is_nominal:
            assert tuple(meta[attr.name][1]) == attr.attr_type.values
            expected = [None if v == b"?" else v.decode() for v in theirs]
            got = [None if v is MISSING else attr.attr_type.name(v.code)
                   for v in relation.col(k)]
            assert got == expected
        else:
            np.testing.assert_array_equal(matrix[:, k], theirs)
