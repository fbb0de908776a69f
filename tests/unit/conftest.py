"""Shared order-list fixtures."""

from __future__ import annotations

import pytest

from jerseyorders.models.options import DisplayOptions
from jerseyorders.pipeline.runner import run

TEAM_ORDER = """
M---Himel---47---SHORT---NO---NO
XXL---Fuad---14---SHORT---NO---NO
L---Sanjid---02---LONG---CUFF---YES
XL---Rahat---77---SHORT---NO---NO
Z---Sumon---90---SHORT---NO---NO
L------17---SHORT---NO---NO
M---Siam---28
8---Tuhin---5---LONG---YES---NO
"""


@pytest.fixture
def team_order() -> str:
    return TEAM_ORDER


@pytest.fixture
def team_result(team_order):
    return run(team_order)


@pytest.fixture
def options() -> DisplayOptions:
    return DisplayOptions(party_name="Dhaka XI", jersey_type="POLO", fabrics_type="PP")
