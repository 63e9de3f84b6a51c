"""Pydantic models describing the import configuration structure."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

CallbackMappings = Dict[str, List[str]]


class ImportConfiguration(BaseModel):
    """Root configuration model of a product import run."""

    model_config = ConfigDict(extra="forbid")

    # PHP date() notation ('n/d/y, g:i A', 'Y-m-d') or strftime notation ('%Y-%m-%d')
    source_date_format: str = Field(default="n/d/y, g:i A", min_length=1)
    # layers of attribute code => callback ids, applied in order, each replacing whole lists
    callbacks: List[CallbackMappings] = Field(default_factory=list)
    multiple_value_delimiter: str = Field(default="|", min_length=1)
    # False reproduces the lenient cast: leading numeric prefix or 0
    strict_numeric_cast: bool = True

    @field_validator("callbacks", mode="after")
    @classmethod
    def normalise_callbacks(cls, value: List[CallbackMappings]) -> List[CallbackMappings]:
        layers: List[CallbackMappings] = []
        for layer in value:
            layers.append(
                {
                    attribute_code.strip(): [callback_id.strip() for callback_id in callback_ids if callback_id.strip()]
                    for attribute_code, callback_ids in layer.items()
                    if attribute_code.strip()
                }
            )
        return layers

    def get_callbacks(self) -> List[CallbackMappings]:
        return [dict(layer) for layer in self.callbacks]

    def get_source_date_format(self) -> str:
        return self.source_date_format
