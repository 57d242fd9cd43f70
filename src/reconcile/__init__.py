"""Dependency reconciliation engine and its public operations."""

from .engine import (
    ReconciliationEngine,
    install,
    plan_install,
    plan_uninstall,
    uninstall,
)
from .models import (
    DependencyRequest,
    InstallOptions,
    ReconciliationPlan,
    coerce_options,
    normalize_request,
)

__all__ = [
    "DependencyRequest",
    "InstallOptions",
    "ReconciliationEngine",
    "ReconciliationPlan",
    "coerce_options",
    "install",
    "normalize_request",
    "plan_install",
    "plan_uninstall",
    "uninstall",
]
