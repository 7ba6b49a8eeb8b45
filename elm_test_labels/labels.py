"""Build hierarchical paths from test labels and relate paths to each other."""

from collections.abc import Sequence

from elm_test_labels.codec import encode_segment
from elm_test_labels.models.path import EMPTY_PATH, LabelPath


def to_path(labels: Sequence[str]) -> LabelPath:
    """Encode a label sequence (module, describe blocks, test) into a path.

    An empty sequence yields the empty path.
    """
    if not labels:
        return EMPTY_PATH
    return LabelPath(tuple(encode_segment(label) for label in labels))


def to_labels(path: LabelPath) -> Sequence[str]:
    """Decode a path built by :func:`to_path` back into its labels."""
    return path.labels()


def module_name_of(path: LabelPath) -> str:
    """Return the first segment of the path without decoding it."""
    return path.module_name


def common_parent(path1: LabelPath, path2: LabelPath) -> LabelPath:
    """Return the longest path that is a prefix of both paths.

    Paths with no segment in common share the empty path.
    """
    if path1.name_count > path2.name_count:
        return common_parent(path2, path1)
    if path2.starts_with(path1):
        return path1
    parent = path1.parent
    if parent is None:
        return EMPTY_PATH
    return common_parent(parent, path2)


def diff_paths(source: LabelPath, target: LabelPath) -> LabelPath:
    """Express ``target`` relative to the parent of ``source``.

    A root-level ``source`` has no parent, so ``target`` is returned as is.
    """
    parent = source.parent
    if parent is None:
        return target
    return parent.relativize(target)
