"""Enums for evaluation methods, operations, operators and trigger fields."""
from enum import Enum


class EvalMethod(str, Enum):
    ACCUMULATED_GC_DURATION = "mw_accumulated_gc_duration"
    HEAP_USED = "mw_heap_used"
    NON_HEAP_USED = "mw_non_heap_used"
    ACTIVE_WEB_SESSIONS = "mw_aggregated_active_web_sessions"
    EXPIRED_WEB_SESSIONS = "mw_aggregated_expired_web_sessions"
    REJECTED_WEB_SESSIONS = "mw_aggregated_rejected_web_sessions"
    DS_AVAILABLE_COUNT = "mw_ds_available_count"
    DS_IN_USE_COUNT = "mw_ds_in_use_count"
    DS_TIMED_OUT = "mw_ds_timed_out"
    DS_AVERAGE_GET_TIME = "mw_ds_average_get_time"
    DS_AVERAGE_CREATION_TIME = "mw_ds_average_creation_time"
    DS_MAX_WAIT_TIME = "mw_ds_max_wait_time"


class Operation(str, Enum):
    NEW = "new"
    UPDATE = "update"
    DELETE = "delete"


class Operator(str, Enum):
    LT = "LT"
    LTE = "LTE"
    GT = "GT"
    GTE = "GTE"


class TriggerMode(str, Enum):
    FIRING = "FIRING"


class ConditionType(str, Enum):
    RATE = "RATE"
    THRESHOLD = "THRESHOLD"
    COMPARE = "COMPARE"


class FiringMatch(str, Enum):
    ALL = "ALL"
    ANY = "ANY"


class TriggerType(str, Enum):
    GROUP = "GROUP"


class IdFormat(str, Enum):
    CURRENT = "current"
    LEGACY = "legacy"
