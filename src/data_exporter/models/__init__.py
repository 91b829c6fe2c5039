"""Pipeline data models."""

from data_exporter.models.exchange import Exchange, PipelineState

__all__ = ["Exchange", "PipelineState"]
