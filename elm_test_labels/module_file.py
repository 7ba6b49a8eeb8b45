"""Resolve the conventional source file of an Elm test module."""

from elm_test_labels.models.base import Model

NAMESPACE_SEPARATOR = "."


class ResolverConfig(Model):
    """Where test modules live, relative to the project root."""

    tests_root: str = "tests"
    extension: str = ".elm"


DEFAULT_RESOLVER_CONFIG = ResolverConfig()


def module_file_path(
    module_name: str, config: ResolverConfig = DEFAULT_RESOLVER_CONFIG
) -> str:
    """Map a dotted module name to its source file path.

    ``Foo.Bar.Baz`` resolves to ``tests/Foo/Bar/Baz.elm``. The file is not
    required to exist.
    """
    relative = module_name.replace(NAMESPACE_SEPARATOR, "/")
    return f"{config.tests_root}/{relative}{config.extension}"
