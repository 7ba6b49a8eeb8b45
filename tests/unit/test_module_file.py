"""Tests for module file resolution."""

import pytest

from elm_test_labels.module_file import ResolverConfig, module_file_path


@pytest.mark.parametrize(
    ("module_name", "expected"),
    [
        ("Foo.Bar.Baz", "tests/Foo/Bar/Baz.elm"),
        ("Main", "tests/Main.elm"),
        ("My.Module", "tests/My/Module.elm"),
    ],
)
def test_module_file_path(module_name: str, expected: str) -> None:
    """Replaces namespace dots with slashes under the tests folder."""
    assert module_file_path(module_name) == expected


def test_module_file_path_with_custom_config() -> None:
    """Uses the configured tests root and extension."""
    config = ResolverConfig(tests_root="src/test", extension=".elm.txt")

    assert module_file_path("A.B", config) == "src/test/A/B.elm.txt"


def test_resolver_config_is_frozen() -> None:
    """Configuration cannot be changed after creation."""
    config = ResolverConfig()

    with pytest.raises(ValueError, match="frozen"):
        config.tests_root = "other"  # type: ignore[misc]
