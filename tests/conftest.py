"""
errserial Test Configuration and Fixtures
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Fresh configuration per test, untouched by the caller's environment."""
    from errserial.bootstrap.config import set_config

    for name in ("ERRSERIAL_MAX_DEPTH", "ERRSERIAL_LOG_LEVEL", "ERRSERIAL_LOG_FORMAT", "ERRSERIAL_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)

    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def circular_object():
    """Mapping whose child points back at it."""
    obj = {}
    obj["child"] = {"parent": obj}
    return obj


@pytest.fixture
def plain_error_data():
    """Serialized error with every reserved field plus extras."""
    return {
        "message": "error message",
        "stack": "at <anonymous>:1:13",
        "name": "name",
        "code": "code",
        "path": "./path",
        "errno": 1,
        "syscall": "syscall",
        "random_property": "random",
    }
