"""
pytest fixtures for the infix calculator tests
"""

import pytest

from core import InfixEvaluator


@pytest.fixture
def evaluator():
    return InfixEvaluator()


@pytest.fixture
def grouping_evaluator():
    return InfixEvaluator(enforce_grouping=True)
