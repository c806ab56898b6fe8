"""
Service layer for aptly-tool.

This package provides high-level services that orchestrate aptly operations.
"""

from .publish_service import PublishPipeline, PublishStage

__all__ = ["PublishPipeline", "PublishStage"]
