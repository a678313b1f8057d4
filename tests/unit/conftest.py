"""Shared fixtures for histobook unit tests."""

import pytest

from histobook.analytics.distributor import Distributor

SERIES1 = [0.01, 0.02, 0.03, 0.11, 0.12, 0.13, 0.14, 0.21, 0.22, 0.23, 0.24, 0.25,
           0.31, 0.32, 0.33, 0.34, 0.35, 0.36, 0.71, 0.72, 0.73, 0.74, 0.81, 0.82, 0.91]
SERIES2 = [0.0, 0.11, 0.21, 0.31, 0.41, 0.51, 0.61, 0.71, 0.81, 0.91, 1.0]
SERIES1_BUCKETS = [3, 4, 5, 6, 0, 0, 0, 4, 2, 1]
SERIES2_BUCKETS = [1, 1, 1, 1, 1, 1, 1, 1, 1, 2]


@pytest.fixture
def distributor():
    """A 10-bucket distribution over [0, 1]."""
    return Distributor(0.0, 1.0, 10)


@pytest.fixture
def filled(distributor):
    """The 10-bucket distribution with both reference series added value by value."""
    for x in SERIES2:
        distributor.add_value("series2", x)
    for x in SERIES1:
        distributor.add_value("series1", x)
    return distributor
