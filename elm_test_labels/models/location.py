"""Models for parsed test result locations."""

from pydantic import Field

from elm_test_labels.models.base import Model


class TestLocation(Model):
    """A test result addressed by an ``elmTest://`` location URL."""

    __test__ = False

    module_name: str = Field(..., description="Dotted Elm module name")
    module_file: str = Field(..., description="Conventional source file of the module")
    label: str = Field(..., description="Decoded label of the addressed result")
    is_module: bool = Field(
        default=False,
        description="True when the URL addresses the whole module",
    )
