"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from xml.etree.ElementTree import Element

import pytest
from typebridge.converters import read_mapping, read_mapping_bytes
from typebridge.diagnostics import DiagnosticLog
from typebridge.ir.store import TypeStore


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_mapping_file(fixtures_dir: Path) -> Path:
    """Return path to the sample KCG mapping.

    The model holds three structures: ``Pkg_MyStruct`` (id 20) and
    ``Pkg_Outer`` (id 30) are reachable from ``Pkg::Root``, while
    ``Pkg_Spare`` (id 50) is not.
    """
    return fixtures_dir / "sample_mapping.xml"


@pytest.fixture
def sample_doc(sample_mapping_file: Path) -> Element:
    """Return the parsed sample mapping."""
    return read_mapping(sample_mapping_file)


@pytest.fixture
def make_mapping() -> Callable[..., Element]:
    """Build a mapping document from model (and optional config) XML snippets."""

    def _make(model: str, config: str = "", root: str | None = None) -> Element:
        if root is not None:
            config += f'<option name="root" value="{root}"/>'
        config_section = f"<config>{config}</config>" if config else ""
        return read_mapping_bytes(f"<mapping>{config_section}<model>{model}</model></mapping>")

    return _make


@pytest.fixture
def diagnostics() -> DiagnosticLog:
    """Return an empty diagnostic log."""
    return DiagnosticLog()


@pytest.fixture
def store(diagnostics: DiagnosticLog) -> TypeStore:
    """Return an empty type store with default configuration."""
    return TypeStore(diagnostics=diagnostics)
