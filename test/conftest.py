import sys
from pathlib import Path

import numpy as np
import pytest

# Projekt-Root in den Pfad (Tests laufen auch ohne pip install -e .)
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.feature_flags import set_flag
from omnimeasure.core.geometry import Mesh, MeshPart


# Global Feature Flag Defaults - Single Source of Truth for Test Isolation
# ========================================================================
# Jeder Test muss mit sauberen Feature-Flags starten.
# Diese Defaults müssen mit config/feature_flags.py synchron gehalten werden.
FEATURE_FLAG_DEFAULTS = {
    "analysis_debug_logging": False,
    "loader_debug_logging": False,
    "parallel_part_analysis": False,
    "analysis_summary_logging": True,
}


@pytest.fixture(autouse=True)
def _global_feature_flag_isolation():
    """
    Stellt sicher, dass jeder Test mit deterministischen Feature-Flags startet
    und Flag-Mutationen nicht in andere Tests leaken.
    """
    for key, value in FEATURE_FLAG_DEFAULTS.items():
        set_flag(key, value)

    yield

    for key, value in FEATURE_FLAG_DEFAULTS.items():
        set_flag(key, value)


# ============================================================================
# Geometrie-Fixtures
# ============================================================================

UNIT_CUBE_POSITIONS = [
    (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
    (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
]

UNIT_CUBE_INDICES = [
    0, 1, 2, 0, 2, 3,  # z = 0
    4, 5, 6, 4, 6, 7,  # z = 1
    0, 1, 5, 0, 5, 4,  # y = 0
    3, 2, 6, 3, 6, 7,  # y = 1
    0, 3, 7, 0, 7, 4,  # x = 0
    1, 2, 6, 1, 6, 5,  # x = 1
]


@pytest.fixture
def unit_square_part():
    """Flaches Einheitsquadrat aus zwei Dreiecken."""
    positions = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    return MeshPart(positions, [0, 1, 2, 0, 2, 3])


@pytest.fixture
def unit_cube_part():
    return MeshPart(UNIT_CUBE_POSITIONS, UNIT_CUBE_INDICES)


@pytest.fixture
def unit_cube_mesh(unit_cube_part):
    return Mesh((unit_cube_part,))


@pytest.fixture
def random_parts():
    """Mehrere zufällige Parts für Parallel/Sequentiell-Vergleiche."""
    rng = np.random.default_rng(42)
    parts = []
    for _ in range(6):
        n = int(rng.integers(10, 60))
        positions = rng.normal(size=(n, 3))
        indices = rng.integers(0, n, size=3 * int(rng.integers(5, 40)))
        parts.append(MeshPart(positions, indices))
    return parts


@pytest.fixture
def log_messages():
    """Sammelt loguru-Nachrichten (level >= DEBUG) für Assertions."""
    from loguru import logger

    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
