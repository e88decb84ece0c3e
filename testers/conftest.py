# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: набор векторов и изолированный Config.
"""

from typing import List

import numpy as np
import pytest

from vecs3d.math.vec3 import Vec3
from vecs3d.utils.config import Config, DEFAULT_CONFIG
from vecs3d.utils.logger import set_level


# ----------------------------------------------------------------------
# Изолированная конфигурация: чистый каталог и сброшенный singleton
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield tmp_path
    Config.reset()
    set_level(DEFAULT_CONFIG["log_level"])


# ----------------------------------------------------------------------
# Детерминированный набор векторов для проверки свойств
# ----------------------------------------------------------------------
def _sample_vectors(count: int, seed: int) -> List[Vec3]:
    rng = np.random.default_rng(seed)
    values = rng.uniform(-100.0, 100.0, size=(count, 3))
    return [Vec3(*row) for row in values]


VECTORS_A = _sample_vectors(16, seed=1)
VECTORS_B = _sample_vectors(16, seed=2)


@pytest.fixture(params=range(len(VECTORS_A)))
def vec_pair(request):
    """Пара (a, b) случайных, но воспроизводимых векторов."""
    return VECTORS_A[request.param], VECTORS_B[request.param]
