import matplotlib
import pytest
import structlog

matplotlib.use("Agg")

from shadowsoul.compute import run  # noqa: E402
from shadowsoul.models import QueryInput  # noqa: E402


def make_query(**overrides) -> QueryInput:
    """New York, 6 ft, facing north in Nikes at solar-solstice noon."""
    fields = dict(
        height=6.0,
        height_unit="ft",
        latitude=40.7128,
        longitude=-74.0060,
        direction="North",
        footwear="Nike",
        when="2024-06-21 12:00",
    )
    fields.update(overrides)
    return QueryInput(**fields)


@pytest.fixture
def noon_reading():
    return run(make_query())


@pytest.fixture
def night_reading():
    return run(make_query(when="2024-06-21 23:00"))


@pytest.fixture
def query_factory():
    return make_query


@pytest.fixture(autouse=True)
def _reset_structlog():
    """setup_logging() binds the current stderr; drop it between tests."""
    yield
    structlog.reset_defaults()
