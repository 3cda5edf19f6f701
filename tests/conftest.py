"""
Pytest configuration and fixtures for splittable tests
"""
import pytest

from splittable.logging_config import _Indent


@pytest.fixture
def five_items():
    """Five plain items a..e"""
    return ["a", "b", "c", "d", "e"]


@pytest.fixture
def toolbar():
    """A toolbar row with spacer items between its sections"""
    return [
        {"name": "bold", "kind": "button"},
        {"name": "italic", "kind": "button"},
        {"name": "gap-1", "kind": "spacer"},
        {"name": "font", "kind": "dropdown"},
        {"name": "gap-2", "kind": "spacer"},
        {"name": "help", "kind": "button"},
    ]


@pytest.fixture(autouse=True)
def reset_log_indent():
    """Keep log indentation from leaking between tests"""
    _Indent.reset()
    yield
    _Indent.reset()
