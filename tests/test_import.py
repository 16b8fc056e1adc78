"""Verify package imports work correctly."""


def test_import_simian() -> None:
    """Test that simian can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import simian

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert simian.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from simian import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable."""
    import simian

    for name in simian.__all__:
        assert hasattr(simian, name), name
