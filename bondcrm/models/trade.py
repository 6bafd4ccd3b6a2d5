"""Models for trade candidates extracted from chat transcripts."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TradeCandidate(BaseModel):
    """One trade proposed by the extraction model.

    Field names follow the camelCase wire format the model is asked to emit.
    Unknown keys are kept verbatim so they survive validation untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    client_name: str | None = Field(None, alias="clientName", description="Uppercased counterparty name")
    bond_name: Any = Field(None, alias="bondName", description="Bond description if mentioned")
    isin: Any = Field(None, description="ISIN if mentioned")
    ticker: Any = Field(None, description="Issuer ticker if mentioned")
    size: Any = Field(None, description="Size in millions")
    currency: Any = Field(None, description="Trade currency")
    direction: str | None = Field(None, description="BUY, SELL or TWO-WAY")
    price: Any = Field(None, description="Price if mentioned")
    notes: str | None = Field(None, description="Market color and annotations")
    confidence: str | None = Field(None, description="high, medium or low")

    @field_validator("client_name", "direction", "notes", "confidence", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> str | None:
        """Model output is loosely typed; keep any scalar as text."""
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def to_wire(self) -> dict:
        """Dump back to the camelCase shape, keeping only keys that were present."""
        return self.model_dump(by_alias=True, exclude_unset=True)
