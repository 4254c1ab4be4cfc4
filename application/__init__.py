"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the key-to-directory materialization workflow.
"""

from application.materialize import MaterializeReport, materialize
from application.summary import log_materialize_summary

__all__ = [
    # Main workflow
    "materialize",
    "MaterializeReport",
    # Reporting
    "log_materialize_summary",
]
