"""Test factories for generating labels and label paths."""

import string

from polyfactory import Use
from polyfactory.factories import DataclassFactory

from elm_test_labels.codec import encode_segment
from elm_test_labels.models.path import LabelPath

LABEL_ALPHABET = (
    string.ascii_letters + string.digits + " /\\%+.?#&=:;~-_'\"()[]äöüßé→✓漢字😀"
)


def build_label(min_length: int = 0, max_length: int = 24) -> str:
    """Build a random label mixing reserved and non-ASCII characters."""
    rng = DataclassFactory.__random__
    length = rng.randint(min_length, max_length)
    return "".join(rng.choice(LABEL_ALPHABET) for _ in range(length))


def build_labels(max_depth: int = 5) -> list[str]:
    """Build a random, non-empty label sequence."""
    rng = DataclassFactory.__random__
    return [build_label() for _ in range(rng.randint(1, max_depth))]


class LabelPathFactory(DataclassFactory[LabelPath]):
    """Factory for LabelPath built from random encoded labels."""

    __model__ = LabelPath

    segments = Use(lambda: tuple(encode_segment(label) for label in build_labels()))
