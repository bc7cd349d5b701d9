from pydantic import BaseModel, ConfigDict


class ModelBase(BaseModel):
    """
    Base class for all lazylog models.

    Enforces strict validation, forbids unknown fields,
    and enables assignment-time validation.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        frozen=False,
    )


class FrozenModel(ModelBase):
    """Immutable variant used for configuration and finished messages."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
    )
