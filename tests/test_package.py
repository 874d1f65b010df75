"""Basic tests for envlayer package."""

import envlayer


def test_import_envlayer():
    """Test that envlayer can be imported."""
    assert hasattr(envlayer, "__version__")
    assert envlayer.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    parts = envlayer.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api_exported():
    """Test that everything in __all__ is importable from the package."""
    for name in envlayer.__all__:
        assert hasattr(envlayer, name), name


def test_import_does_not_create_engine():
    """Test the process engine is only built on first use."""
    from envlayer import facade

    envlayer.reset_engine()
    assert facade._engine is None
