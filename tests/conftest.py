"""Shared fixtures: Qt runs offscreen with one QApplication for the session."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Ensure a QApplication exists for widgets and queued signals."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
