"""Verify package imports work correctly."""


def test_import_qtpl() -> None:
    """Test that qtpl can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import qtpl

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert qtpl.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from qtpl import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Everything in __all__ is importable from the package."""
    import qtpl

    for name in qtpl.__all__:
        assert hasattr(qtpl, name), name
