"""Data models."""
from models.enums import (
    EvalMethod, Operation, Operator, TriggerMode, ConditionType, FiringMatch, TriggerType, IdFormat,
)
from models.alerts import AlertDefinition, AlertConditions
from models.triggers import (
    TriggerDescriptor, Condition, RateCondition, ThresholdCondition, CompareCondition, GroupConditionsInfo,
)
