"""Dataclasses for the backend's trigger and condition representation."""
from dataclasses import dataclass, field
from typing import Optional

from models.enums import ConditionType, FiringMatch, Operator, TriggerMode, TriggerType

EVENT_TYPE_TAG = "hawkular_alert"


@dataclass
class TriggerDescriptor:
    id: str = ""
    name: str = ""
    description: str = ""
    enabled: bool = True
    type: TriggerType = TriggerType.GROUP
    event_type: str = "EVENT"
    firing_match: FiringMatch = FiringMatch.ALL
    context: dict = field(default_factory=dict)
    tags: dict = field(default_factory=dict)

    def to_dict(self):
        """Render with the backend's JSON field names."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "enabled": self.enabled,
            "type": self.type.value,
            "eventType": self.event_type,
            "firingMatch": self.firing_match.value,
            "context": dict(self.context),
            "tags": dict(self.tags),
        }


@dataclass
class Condition:
    data_id: str = ""
    operator: Optional[Operator] = None
    trigger_mode: TriggerMode = TriggerMode.FIRING

    type = None

    def to_dict(self):
        return {
            "triggerMode": self.trigger_mode.value,
            "type": self.type.value,
            "dataId": self.data_id,
            "operator": self.operator.value if self.operator else None,
        }


@dataclass
class RateCondition(Condition):
    threshold: int = 0

    type = ConditionType.RATE

    def to_dict(self):
        d = super().to_dict()
        d["threshold"] = self.threshold
        return d


@dataclass
class ThresholdCondition(Condition):
    threshold: int = 0

    type = ConditionType.THRESHOLD

    def to_dict(self):
        d = super().to_dict()
        d["threshold"] = self.threshold
        return d


@dataclass
class CompareCondition(Condition):
    data2_id: str = ""
    data2_multiplier: float = 1.0

    type = ConditionType.COMPARE

    def to_dict(self):
        d = super().to_dict()
        d["data2Id"] = self.data2_id
        d["data2Multiplier"] = self.data2_multiplier
        return d


@dataclass
class GroupConditionsInfo:
    """Body of a set-group-conditions call."""
    conditions: list = field(default_factory=list)
    data_id_member_map: dict = field(default_factory=dict)

    def __len__(self):
        return len(self.conditions)

    def __iter__(self):
        return iter(self.conditions)

    def to_dict(self):
        return {
            "conditions": [c.to_dict() for c in self.conditions],
            "dataIdMemberMap": dict(self.data_id_member_map),
        }
