"""Location URLs addressing a single test result inside a module."""

import logging
from collections.abc import Sequence

from elm_test_labels.codec import decode_segment, encode_segment
from elm_test_labels.models.location import TestLocation
from elm_test_labels.module_file import (
    DEFAULT_RESOLVER_CONFIG,
    ResolverConfig,
    module_file_path,
)

log = logging.getLogger(__name__)

ELM_TEST_PROTOCOL = "elmTest"
LOCATION_SEPARATOR = "://"


class LocationUrlError(ValueError):
    """Raised when a URL does not use the elmTest location scheme."""


def to_location_url(model_name: str, label: str) -> str:
    """Build the location URL of ``label`` inside module ``model_name``.

    A label equal to the module name addresses the whole module and gets no
    path suffix.
    """
    if label == model_name:
        return f"{ELM_TEST_PROTOCOL}{LOCATION_SEPARATOR}{model_name}"
    return (
        f"{ELM_TEST_PROTOCOL}{LOCATION_SEPARATOR}{model_name}/{encode_segment(label)}"
    )


def location_url_for(labels: Sequence[str]) -> str:
    """Build the location URL of the node at the end of a label sequence."""
    if not labels:
        raise ValueError("Cannot build a location for an empty label sequence")
    return to_location_url(labels[0], labels[-1])


def _split_location_path(path: str) -> list[str]:
    return path.split("/")


def from_location_url_path(
    path: str, config: ResolverConfig = DEFAULT_RESOLVER_CONFIG
) -> tuple[str, str]:
    """Resolve the path part of a location URL to ``(module_file, label)``.

    The first segment is the module name and the last segment is always the
    encoded label, whatever the depth.

    Raises:
        LabelCodecError: If the last segment is not a valid encoded label.

    """
    parts = _split_location_path(path)
    module_file = module_file_path(parts[0], config)
    label = decode_segment(parts[-1])
    log.debug("Resolved location %r to %s (label=%r)", path, module_file, label)
    return module_file, label


def parse_location_url(
    url: str, config: ResolverConfig = DEFAULT_RESOLVER_CONFIG
) -> TestLocation:
    """Parse a full ``elmTest://`` URL into a :class:`TestLocation`.

    Raises:
        LocationUrlError: If the URL uses another scheme.
        LabelCodecError: If the label segment is not validly encoded.

    """
    scheme, separator, path = url.partition(LOCATION_SEPARATOR)
    if not separator or scheme != ELM_TEST_PROTOCOL:
        raise LocationUrlError(
            f"Not an {ELM_TEST_PROTOCOL} location URL: {url!r}"
        )

    module_file, label = from_location_url_path(path, config)
    parts = _split_location_path(path)
    return TestLocation(
        module_name=parts[0],
        module_file=module_file,
        label=label,
        is_module=len(parts) == 1,
    )
