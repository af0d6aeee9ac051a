"""
Device model.

A Device is built from the request body, written to the table and echoed
back to the caller. Field names match the JSON keys and the table
attributes exactly (case-sensitive).
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator, model_validator


class Device(BaseModel):
    """The single persisted entity, keyed by ID."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    ID: StrictStr = ""
    DeviceModel: StrictStr = ""
    Name: StrictStr = ""
    Note: StrictStr = ""
    Serial: StrictStr = ""

    @model_validator(mode="before")
    @classmethod
    def _null_body_as_empty(cls, data: Any) -> Any:
        # A bare JSON null decodes to an empty device
        return {} if data is None else data

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # JSON null leaves the field empty; it is reported as missing later
        return "" if value is None else value

    def to_item(self) -> Dict[str, str]:
        """Return the plain record written to the table."""
        return self.model_dump()

    def to_json(self) -> str:
        """Return compact JSON, e.g. {"ID":"d1","DeviceModel":"X1",...}."""
        return self.model_dump_json()
