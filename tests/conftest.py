import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from orchestrator_sim.manager import DialogueEngine
from orchestrator_sim.scheduler import VirtualClock
from orchestrator_sim.settings import Settings


@pytest.fixture
def engine():
    return DialogueEngine(clock=VirtualClock(), settings=Settings())
