"""pytest configuration and fixtures for pyqt-controls tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_controls.controls.leaf_controls import BooleanControl, NumberControl, StringControl
from pyqt_controls.controls.object_control import ObjectControl


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def person_control():
    """name is required, age is optional."""
    return ObjectControl([
        ("name", "Name", StringControl(optional=False)),
        ("age", "Age", NumberControl(optional=True)),
    ])


@pytest.fixture
def contact_control():
    """Composite with a nested address composite."""
    address = ObjectControl([
        ("street", "Street", StringControl()),
        ("city", "City", StringControl()),
    ])
    return ObjectControl([
        ("name", "Name", StringControl()),
        ("address", "Address", address),
        ("active", "Active", BooleanControl()),
    ])
