from pydantic import BaseModel, ConfigDict
from typing import TypeVar

ModelT = TypeVar("ModelT", bound="BaseTeeModel")


class BaseTeeModel(BaseModel):
    """Shared configuration for tee time models.

    Commands never edit a caller's model in place; they work on
    ``working_copy()`` and hand the copy back.
    """
    model_config = ConfigDict(validate_assignment=True)

    def working_copy(self: ModelT) -> ModelT:
        """Deep copy that can be mutated freely without touching the original."""
        return self.model_copy(deep=True)
