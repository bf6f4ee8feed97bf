"""
Pydantic Models for Chain Composition

Validated description of a decorator chain, used by the client driver
and the CLI.
"""

from typing import Any, List
from pydantic import BaseModel, Field, field_validator

from decorator_demo.domain.components import DECORATORS


class ChainSpec(BaseModel):
    """Ordered decorator names, innermost first."""
    decorators: List[str] = Field(
        default_factory=list,
        description="Decorator names applied in order, innermost first"
    )

    @field_validator("decorators", mode="before")
    @classmethod
    def split_names(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.split(",")
        return v

    @field_validator("decorators")
    @classmethod
    def validate_names(cls, v: List[str]) -> List[str]:
        # Blank entries are dropped ("A,,B" or [" ", "A"])
        names = [name.strip().upper() for name in v if name.strip()]
        unknown = [name for name in names if name not in DECORATORS]
        if unknown:
            raise ValueError(
                f"Unknown decorator(s): {', '.join(unknown)}. "
                f"Available: {', '.join(DECORATORS)}"
            )
        return names
