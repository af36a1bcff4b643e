"""Synchronize alert definitions with group triggers on the alerting backend."""
import logging
from dataclasses import dataclass, field
from numbers import Number
from typing import Optional

from alerts.conditions import ConditionBuilder
from alerts.errors import UnknownOperationError
from alerts.registry import MetricsRegistry
from models.alerts import AlertDefinition
from models.enums import IdFormat, Operation, TriggerMode, TriggerType
from models.triggers import EVENT_TYPE_TAG, GroupConditionsInfo, TriggerDescriptor

logger = logging.getLogger("mwalerts.alerts.sync")

LEGACY_ID_PREFIX = "MiQ-"


@dataclass
class ResolvedTriggerId:
    trigger_id: str
    id_format: IdFormat = IdFormat.CURRENT

    @property
    def is_legacy(self):
        return self.id_format == IdFormat.LEGACY


@dataclass
class SyncResult:
    operation: Operation
    trigger_id: str
    id_format: IdFormat = IdFormat.CURRENT
    trigger: Optional[TriggerDescriptor] = None
    conditions: GroupConditionsInfo = field(default_factory=GroupConditionsInfo)


def extract_alert_id(alert):
    """Accept a record mapping, a bare numeric id, or an object with an `id`."""
    if isinstance(alert, dict):
        return alert.get("id", alert.get(":id"))
    if isinstance(alert, Number) and not isinstance(alert, bool):
        return alert
    return alert.id


def build_trigger_id(ems, alert):
    """Current-format trigger id, namespaced by the owning manager."""
    return ems.miq_id_prefix(f"alert-{extract_alert_id(alert)}")


def legacy_trigger_id(alert):
    return f"{LEGACY_ID_PREFIX}{extract_alert_id(alert)}"


def resolve_trigger_id(ems, alert, alerts_client=None):
    """Find the id the backend knows this alert's trigger by.

    Triggers created before manager-scoped ids were introduced are named
    ``MiQ-<alert id>``. When the current id is unknown to the backend the
    legacy id is returned without checking that it exists either.
    """
    if alerts_client is None:
        alerts_client = ems.alerts_client
    trigger_id = build_trigger_id(ems, alert)

    if alerts_client.list_triggers([trigger_id]):
        return ResolvedTriggerId(trigger_id, IdFormat.CURRENT)

    legacy_id = legacy_trigger_id(alert)
    logger.warning(f"Trigger {trigger_id} not found, falling back to legacy id {legacy_id}")
    return ResolvedTriggerId(legacy_id, IdFormat.LEGACY)


def _as_definition(alert):
    if isinstance(alert, dict):
        return AlertDefinition.from_dict(alert)
    return alert


def parse_operation(operation):
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(str(operation).lstrip(":").lower())
    except ValueError:
        raise UnknownOperationError(operation) from None


class AlertManager:
    """Creates, updates and deletes the group trigger behind an alert definition."""

    def __init__(self, ems, registry=None):
        self.ems = ems
        self.alerts_client = ems.alerts_client
        self.registry = registry if registry is not None else MetricsRegistry.load()
        self.condition_builder = ConditionBuilder(self.registry)

    def process_alert(self, operation, alert):
        operation = parse_operation(operation)
        alert = _as_definition(alert)

        resolved = self._trigger_id_for(operation, alert)
        result = SyncResult(operation=operation, trigger_id=resolved.trigger_id, id_format=resolved.id_format)

        if operation == Operation.DELETE:
            self.alerts_client.delete_group_trigger(resolved.trigger_id)
            logger.info(f"Deleted group trigger {resolved.trigger_id} for alert {extract_alert_id(alert)}")
            return result

        result.trigger = self._group_trigger(resolved.trigger_id, alert)
        result.conditions = self.build_group_conditions(alert)

        if operation == Operation.NEW:
            self.alerts_client.create_group_trigger(result.trigger)
        else:
            self.alerts_client.update_group_trigger(result.trigger)
        self.alerts_client.set_group_conditions(result.trigger_id, TriggerMode.FIRING, result.conditions)
        logger.info(f"{operation.value}: group trigger {result.trigger_id} "
                    f"with {len(result.conditions)} firing condition(s)")
        return result

    def build_group_trigger(self, operation, alert):
        operation = parse_operation(operation)
        alert = _as_definition(alert)
        return self._group_trigger(self._trigger_id_for(operation, alert).trigger_id, alert)

    def build_group_conditions(self, alert):
        alert = _as_definition(alert)
        return self.condition_builder.build(alert.eval_method, alert.options).conditions

    def build_trigger_id(self, alert):
        return build_trigger_id(self.ems, alert)

    def resolve_trigger_id(self, alert):
        return resolve_trigger_id(self.ems, alert, alerts_client=self.alerts_client)

    def _trigger_id_for(self, operation, alert):
        if operation == Operation.NEW:
            return ResolvedTriggerId(self.build_trigger_id(alert), IdFormat.CURRENT)
        return self.resolve_trigger_id(alert)

    def _group_trigger(self, trigger_id, alert):
        return TriggerDescriptor(
            id=trigger_id,
            name=alert.description,
            description=alert.description,
            enabled=alert.enabled,
            type=TriggerType.GROUP,
            event_type="EVENT",
            firing_match=ConditionBuilder.firing_match_for(alert.eval_method),
            context=ConditionBuilder.context_for(alert.eval_method),
            tags={
                "miq.event_type": EVENT_TYPE_TAG,
                "miq.resource_type": alert.based_on,
            },
        )
