"""Base model for all Droidship Pydantic models.

This module provides a base model class that enforces consistent validation
behavior across all Droidship models.
"""

from pydantic import BaseModel, ConfigDict


class DroidshipBaseModel(BaseModel):
    """Base model class for all Droidship Pydantic models.

    Models are immutable once created: resolution inputs are computed once per
    invocation and handed from one component to the next. String values are
    kept verbatim because they end up in file system paths.
    """

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
        frozen=True,
    )
