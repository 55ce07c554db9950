"""
Publishing sinks for generated projects.
"""

from .github import PublishError, publish_project

__all__ = ["PublishError", "publish_project"]
