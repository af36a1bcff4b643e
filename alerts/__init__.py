"""Alert translation and trigger synchronization."""
from alerts.conditions import ConditionBuilder, ConditionPlan, convert_operator
from alerts.registry import MetricsRegistry
from alerts.synchronizer import AlertManager, ResolvedTriggerId, SyncResult, build_trigger_id, resolve_trigger_id
from alerts.errors import (
    AlertSyncError, ConfigurationError, MetricLookupError, InvalidOptionError,
    UnknownEvalMethodError, UnsupportedOperatorError, UnknownOperationError,
)
