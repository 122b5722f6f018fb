"""Package-level tests."""


def test_imports() -> None:
    """Test that the main package can be imported."""
    import clockface

    assert clockface.__version__ == "0.1.0"
