"""Dataclasses for alert definitions handed over by the alert store."""
from dataclasses import dataclass, field


FALSE_STRINGS = {"false", "0", "no", "off", ""}


def _get(raw, key, default=None):
    """Read a key from a record that may use plain or symbol-style (':key') keys."""
    if key in raw:
        return raw[key]
    return raw.get(f":{key}", default)


def _to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class AlertConditions:
    eval_method: str = ""
    options: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw):
        raw = raw or {}
        options = {str(k).lstrip(":"): v for k, v in (_get(raw, "options") or {}).items()}
        return cls(eval_method=_get(raw, "eval_method", "") or "", options=options)


@dataclass(frozen=True)
class AlertDefinition:
    id: object = None
    description: str = ""
    enabled: bool = True
    based_on: str = ""
    conditions: AlertConditions = field(default_factory=AlertConditions)

    @classmethod
    def from_dict(cls, raw):
        """Build a definition from a store record such as a parsed YAML file."""
        return cls(
            id=_get(raw, "id"),
            description=_get(raw, "description", "") or "",
            enabled=_to_bool(_get(raw, "enabled", True)),
            based_on=_get(raw, "based_on", "") or "",
            conditions=AlertConditions.from_dict(_get(raw, "conditions")),
        )

    @property
    def eval_method(self):
        return self.conditions.eval_method

    @property
    def options(self):
        return self.conditions.options
