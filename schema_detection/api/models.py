from __future__ import annotations
from typing import Annotated, Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class DetectorConfigModel(BaseModel):
    enabled: bool = True
    priority: int = 100
    options: Dict[str, Any] = Field(default_factory=dict)


class DetectRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    detector: Optional[str] = None
    rows: List[Dict[str, Any]] = Field(default_factory=list)
    headers: Optional[List[str]] = None
    field_stats: Optional[Dict[str, Dict[str, Any]]] = Field(default=None, alias="fieldStats")
    config: Optional[DetectorConfigModel] = None
    sample_rows: Optional[Annotated[int, Field(ge=1)]] = Field(default=None, alias="sampleRows")


class DetectorInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    label: str
    description: Optional[str] = None
    is_default: bool = Field(default=False, alias="isDefault")


class DetectorList(BaseModel):
    items: List[DetectorInfo]


class HealthStatus(BaseModel):
    status: Literal["ok"] = "ok"
    time: str
    version: str
