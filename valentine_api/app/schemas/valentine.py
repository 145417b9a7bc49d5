"""
Pydantic model for a valentine message.

``from`` is a reserved word in Python, so the attribute is named
``from_`` and carries ``from`` as its alias.  FastAPI serializes
response models by alias, which keeps the wire key as ``from``.
"""

from pydantic import BaseModel, Field


class ValentineMessage(BaseModel):
    """Body of ``GET /api/valentine``."""

    message: str = Field(..., examples=["You had me at hello."])
    from_: str = Field(..., alias="from", examples=["Your Valentine"])

    model_config = {
        "populate_by_name": True,
    }
