"""
Alertmanager webhook data models.

These mirror the payload Alertmanager POSTs to webhook receivers
(``template.Data`` on the Alertmanager side). Only ``status``,
``groupLabels``, ``commonLabels`` and the alerts' labels/annotations drive
incident creation; the remaining fields are accepted so a full payload
decodes cleanly.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

KV = Dict[str, str]


def _empty_if_none(value: Any) -> Any:
    # Alertmanager may send "labels": null for alerts without labels
    return {} if value is None else value


def _empty_object_if_none(data: Any) -> Any:
    # A JSON null decodes like an empty object
    return {} if data is None else data


class Alert(BaseModel):
    """
    A single firing or resolved alert.
    
    Has no identity beyond its position in the batch.
    """
    
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
    
    status: Optional[str] = Field(None, description="Alert status (firing/resolved)")
    labels: KV = Field(default_factory=dict, description="Identifying labels of the alert")
    annotations: KV = Field(default_factory=dict, description="Informational annotations (summary, description...)")
    starts_at: Optional[str] = Field(None, alias="startsAt")
    ends_at: Optional[str] = Field(None, alias="endsAt")
    generator_url: Optional[str] = Field(None, alias="generatorURL")
    fingerprint: Optional[str] = None
    
    @model_validator(mode='before')
    @classmethod
    def null_as_empty(cls, data: Any) -> Any:
        return _empty_object_if_none(data)
    
    @field_validator('labels', 'annotations', mode='before')
    @classmethod
    def default_empty_mapping(cls, v: Any) -> Any:
        return _empty_if_none(v)


class AlertBatch(BaseModel):
    """
    Webhook payload grouping one or more alerts.
    
    Created once per request and never modified afterwards.
    """
    
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
    
    status: str = Field(default="", description="Overall group status (firing/resolved)")
    group_labels: KV = Field(default_factory=dict, alias="groupLabels")
    common_labels: KV = Field(default_factory=dict, alias="commonLabels")
    alerts: List[Alert] = Field(default_factory=list)
    
    receiver: Optional[str] = None
    common_annotations: KV = Field(default_factory=dict, alias="commonAnnotations")
    external_url: Optional[str] = Field(None, alias="externalURL")
    version: Optional[str] = None
    group_key: Optional[str] = Field(None, alias="groupKey")
    truncated_alerts: int = Field(0, alias="truncatedAlerts")
    
    @model_validator(mode='before')
    @classmethod
    def null_as_empty(cls, data: Any) -> Any:
        return _empty_object_if_none(data)
    
    @field_validator('group_labels', 'common_labels', 'common_annotations', mode='before')
    @classmethod
    def default_empty_mapping(cls, v: Any) -> Any:
        return _empty_if_none(v)
    
    @field_validator('alerts', mode='before')
    @classmethod
    def default_empty_alerts(cls, v: Any) -> Any:
        return [] if v is None else v
    
    @field_validator('status', mode='before')
    @classmethod
    def default_empty_status(cls, v: Any) -> Any:
        return "" if v is None else v
    
    @field_validator('truncated_alerts', mode='before')
    @classmethod
    def default_zero_truncated(cls, v: Any) -> Any:
        return 0 if v is None else v
