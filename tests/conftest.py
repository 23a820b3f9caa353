# Shared pytest fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from arffload.log import reset_logging

WEATHER_ARFF = """% Weather data, numeric subset
% (comments are dropped by the line source)
@relation weather

@attribute outlook {sunny,overcast,rainy}
@attribute temperature real
@attribute humidity integer
@attribute windy {TRUE,FALSE}
@attribute play {yes,no}

@data
sunny,85,85,FALSE,no
sunny,80,90,TRUE,no
overcast,83,86,FALSE,yes
rainy,70,96,FALSE,yes
rainy,68,?,FALSE,yes
% a comment inside the data section
?,65,70,TRUE,no
"""


@pytest.fixture()
def weather_header_lines() -> list[str]:
    return [
        "@relation weather",
        "@attribute temperature real",
        "@attribute outlook {sunny,rainy}",
        "@data",
    ]


@pytest.fixture()
def write_arff(tmp_path: Path):
    def _write(text: str, name: str = "data.arff", encoding: str = "utf-8") -> Path:
        p = tmp_path / name
        p.write_bytes(text.encode(encoding))
        return p
    return _write


@pytest.fixture()
def weather_file(write_arff) -> Path:
    return write_arff(WEATHER_ARFF, "weather.arff")


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    reset_logging()
