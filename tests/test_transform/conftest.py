"""Shared test fixtures for transform tests."""

from collections.abc import Callable
from xml.etree.ElementTree import Element

import pytest


@pytest.fixture
def wrapped_doc(make_mapping: Callable[..., Element]) -> Element:
    """Return a mapping nested one level below a wrapper element."""
    inner = make_mapping(
        '<predefType id="1" name="uint16"/>'
        '<struct id="2"><field id="3" name="w" type="1"/></struct>'
        '<type id="4" name="Wrapped" type="2"/>'
        '<operator name="Op"><input name="i" type="4"/></operator>',
        root="Op",
    )
    wrapper = Element("project")
    wrapper.append(inner)
    return wrapper
