import pytest
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session", autouse=True)
def qt_core_application():
    # QTimer needs an application object. Only the combo timer test spins a local event loop.
    application = QCoreApplication.instance()
    if application is None:
        application = QCoreApplication([])
    yield application
