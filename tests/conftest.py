"""Shared fixtures for Validation Builder tests.

Services are tested against real ValidationContext objects; the controller
tests use the fakes defined in their own module.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from validation_builder.config import ConfigManager
from validation_builder.core.models import ValidationContext
from validation_builder.core.services.column_editing_service import ColumnEditingService
from validation_builder.core.services.undo_service import UndoService

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


SMALL_UNIVERSE = ("store_id", "zone_name", "cluster_name", "location", "node_count")


@pytest.fixture
def universe():
    return SMALL_UNIVERSE


@pytest.fixture
def context(universe):
    return ValidationContext.from_universe(universe)


@pytest.fixture
def editing_service():
    return ColumnEditingService()


@pytest.fixture
def undo_service():
    return UndoService(max_history=50)


@pytest.fixture
def make_configured_context(editing_service):
    """Build a context with the first *n* universe names already claimed."""
    def factory(universe=SMALL_UNIVERSE, n=0):
        ctx = ValidationContext.from_universe(universe)
        for _ in range(n):
            assert editing_service.add_column(ctx).success
        return ctx
    return factory


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the ConfigManager singleton between tests."""
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()
