# type: ignore
import logging as lg

import pytest

from miniasm.asm.builder import Builder
from miniasm.common.settings import MachineSettings


@pytest.fixture
def builder():
    yield Builder()


@pytest.fixture
def tracing():
    yield MachineSettings().update(trace=True)


@pytest.fixture
def root_level():
    root = lg.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
