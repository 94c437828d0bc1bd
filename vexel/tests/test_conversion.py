"""Tests for extend and truncate."""
from __future__ import annotations

import numpy as np
import pytest

from vexel import FLOAT32, Vector2, Vector3, Vector4, extend, truncate
from vexel.errors import InvalidOperation


def test_extend_appends_explicit_component() -> None:
    assert extend(Vector2(1.0, 2.0), 3.0) == Vector3(1.0, 2.0, 3.0)
    assert Vector3(1.0, 2.0, 3.0).extend(1.0) == Vector4(1.0, 2.0, 3.0, 1.0)
    assert Vector2(1.0, 2.0).extend(0) == Vector3(1.0, 2.0, 0.0)


def test_truncate_drops_trailing_component() -> None:
    assert truncate(Vector4(1.0, 2.0, 3.0, 4.0)) == Vector3(1.0, 2.0, 3.0)
    assert Vector3(1.0, 2.0, 3.0).truncate() == Vector2(1.0, 2.0)


@pytest.mark.parametrize("component", [0.0, -7.5, float("inf")])
def test_truncate_undoes_extend(component) -> None:
    v2 = Vector2(0.25, -1.5)
    v3 = Vector3(0.25, -1.5, 9.0)
    assert truncate(extend(v2, component)) == v2
    assert truncate(extend(v3, component)) == v3


def test_precision_is_kept_and_enforced() -> None:
    single = Vector2.from_iter((1, 2), FLOAT32)
    assert single.extend(3.0).precision is FLOAT32
    assert single.extend(np.float32(3.0)).z == 3.0
    with pytest.raises(InvalidOperation):
        single.extend(np.float64(3.0))


def test_unsupported_arities() -> None:
    with pytest.raises(InvalidOperation):
        extend(Vector4(1.0, 2.0, 3.0, 4.0), 5.0)
    with pytest.raises(InvalidOperation):
        truncate(Vector2(1.0, 2.0))
