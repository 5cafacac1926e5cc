from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdvertisementReading(BaseModel):
    """
    Flat, serializable view of one decoded advertisement.

    Fields the payload does not provide (either because the data format has no
    room for them or because the sender marked them invalid) are ``None`` and
    are left out of ``as_dict()`` / ``to_json()``.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    raw: str
    data_format: int = Field(alias="format")
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    pressure: Optional[int] = None
    acceleration_x: Optional[float] = Field(None, alias="accel-x")
    acceleration_y: Optional[float] = Field(None, alias="accel-y")
    acceleration_z: Optional[float] = Field(None, alias="accel-z")
    battery_voltage: Optional[float] = Field(None, alias="voltage")
    tx_power: Optional[float] = Field(None, alias="tx-power")
    measurement_sequence: Optional[int] = Field(None, alias="meas-seq")
    movement_counter: Optional[int] = Field(None, alias="movement-count")
    mac: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
