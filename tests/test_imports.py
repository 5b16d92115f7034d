import importlib
import pytest

@pytest.mark.parametrize("module", [
    "kcentroids",
    "kcentroids.algorithms",
    "kcentroids.assignments",
    "kcentroids.base",
    "kcentroids.distances",
    "kcentroids.initialization",
    "kcentroids.updates",
    "kcentroids.utils",
    "kcentroids.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None
