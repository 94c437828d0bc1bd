"""Pytest configuration for vexel tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vexel import Vector2, Vector3, Vector4  # noqa: E402


# //2.- Shared sample vectors with non-trivial components for property checks.
@pytest.fixture()
def samples3():
    return (
        Vector3(1.5, -2.25, 3.0),
        Vector3(-4.0, 0.1, 7.25),
        Vector3(0.3, 0.2, -0.7),
    )


@pytest.fixture()
def samples2():
    return (Vector2(1.5, -2.25), Vector2(-4.0, 0.1), Vector2(0.3, 0.2))


@pytest.fixture()
def samples4():
    return (
        Vector4(1.5, -2.25, 3.0, 0.5),
        Vector4(-4.0, 0.1, 7.25, -1.0),
        Vector4(0.3, 0.2, -0.7, 2.0),
    )
