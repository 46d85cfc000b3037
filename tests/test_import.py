"""Verify package imports work correctly."""


def test_import_htmlindent() -> None:
    """Test that htmlindent can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import htmlindent

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert htmlindent.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from htmlindent import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names() -> None:
    import htmlindent

    for name in htmlindent.__all__:
        assert hasattr(htmlindent, name), name
