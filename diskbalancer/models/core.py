"""Core pydantic models."""

from pydantic import BaseModel


class JsonModel(BaseModel):
    """Base model for every entity written in the disk balancer artifacts."""

    def to_json(self) -> str:
        """Serialize the entity in a human readable JSON string."""
        return self.model_dump_json(indent=2)
