"""API-layer dependency functions.

Re-exports all dependency factories from ``leadengine.dependencies`` so
that endpoint modules only need to import from ``leadengine.api.deps``.
"""

from leadengine.dependencies import (
    get_settings,
    get_scoring_engine,
    get_sla_monitor,
    get_duplicate_detector,
    get_assignment_manager,
    get_ingestion_service,
    get_lead_automation_service,
    get_dashboard_service,
    resolve_now,
)

__all__ = [
    "get_settings",
    "get_scoring_engine",
    "get_sla_monitor",
    "get_duplicate_detector",
    "get_assignment_manager",
    "get_ingestion_service",
    "get_lead_automation_service",
    "get_dashboard_service",
    "resolve_now",
]
