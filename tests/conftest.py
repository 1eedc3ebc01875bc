"""Shared test fixtures."""
import pytest
from occurrence_parsers.config import Settings
from occurrence_parsers.dates.numerical_parser import NumericalDateParser


@pytest.fixture
def settings():
    """Settings with defaults only, independent of the environment."""
    return Settings(_env_file=None, date_base_year=None, log_level="INFO")


@pytest.fixture
def default_parser():
    return NumericalDateParser.default()


@pytest.fixture
def parser_2005():
    """Parser reading 2-digit years into 2005..2104."""
    return NumericalDateParser.with_base_year(2005)


@pytest.fixture
def parser_1950():
    """Parser reading 2-digit years into 1950..2049."""
    return NumericalDateParser.with_base_year(1950)
