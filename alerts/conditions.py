"""Translate an alert's evaluation method and options into backend conditions."""
import logging
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal

from alerts.errors import InvalidOptionError, UnknownEvalMethodError, UnsupportedOperatorError
from models.enums import EvalMethod, FiringMatch, Operator
from models.triggers import CompareCondition, GroupConditionsInfo, RateCondition, ThresholdCondition

logger = logging.getLogger("mwalerts.alerts.conditions")

DECIMAL_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+)$")

OPERATOR_MAP = {
    "<": Operator.LT,
    "<=": Operator.LTE,
    "=": Operator.LTE,
    ">": Operator.GT,
    ">=": Operator.GTE,
}

# Prefixes consumed by the metrics profile on member trigger creation
GAUGE_CONTEXT = {"dataId.hm.type": "gauge", "dataId.hm.prefix": "hm_g_"}
COUNTER_CONTEXT = {"dataId.hm.type": "counter", "dataId.hm.prefix": "hm_c_"}

# Compared metric -> metric it is compared against
JVM_COMPANIONS = {
    EvalMethod.HEAP_USED: "mw_heap_max",
    EvalMethod.NON_HEAP_USED: "mw_non_heap_committed",
}

GC_METHODS = frozenset({EvalMethod.ACCUMULATED_GC_DURATION})
JVM_METHODS = frozenset(JVM_COMPANIONS)
THRESHOLD_METHODS = frozenset({
    EvalMethod.ACTIVE_WEB_SESSIONS,
    EvalMethod.EXPIRED_WEB_SESSIONS,
    EvalMethod.REJECTED_WEB_SESSIONS,
    EvalMethod.DS_AVAILABLE_COUNT,
    EvalMethod.DS_IN_USE_COUNT,
    EvalMethod.DS_TIMED_OUT,
    EvalMethod.DS_AVERAGE_GET_TIME,
    EvalMethod.DS_AVERAGE_CREATION_TIME,
    EvalMethod.DS_MAX_WAIT_TIME,
})


@dataclass
class ConditionPlan:
    firing_match: FiringMatch = FiringMatch.ALL
    context: dict = field(default_factory=dict)
    conditions: GroupConditionsInfo = field(default_factory=GroupConditionsInfo)


def convert_operator(op):
    """Map an operator symbol ('<', '>=', ...) to the backend operator."""
    try:
        return OPERATOR_MAP[op]
    except (KeyError, TypeError):
        raise UnsupportedOperatorError(op) from None


def parse_eval_method(eval_method):
    if isinstance(eval_method, EvalMethod):
        return eval_method
    try:
        return EvalMethod(eval_method)
    except ValueError:
        raise UnknownEvalMethodError(eval_method) from None


def _to_int(options, key, eval_method):
    """Parse an integer option; decimal strings and floats truncate toward zero."""
    value = options.get(key)
    if isinstance(value, bool):
        raise InvalidOptionError(key, value, eval_method)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        if DECIMAL_RE.match(text):
            return int(Decimal(text))
    raise InvalidOptionError(key, value, eval_method)


def _to_fraction(options, key, eval_method):
    value = options.get(key)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidOptionError(key, value, eval_method) from None
    if isinstance(value, bool) or not math.isfinite(number):
        raise InvalidOptionError(key, value, eval_method)
    return number / 100


class ConditionBuilder:
    """Builds firing conditions from an explicit metrics registry."""

    def __init__(self, registry):
        self.registry = registry

    def build(self, eval_method, options):
        method = parse_eval_method(eval_method)
        options = options or {}
        plan = ConditionPlan(
            firing_match=self.firing_match_for(method),
            context=self.context_for(method),
        )
        if method in GC_METHODS:
            plan.conditions = self._gc_conditions(method, options)
        elif method in JVM_METHODS:
            plan.conditions = self._jvm_conditions(method, options)
        elif method in THRESHOLD_METHODS:
            plan.conditions = self._threshold_conditions(method, options)
        else:
            raise UnknownEvalMethodError(method.value)
        logger.debug(f"{method.value}: {len(plan.conditions)} condition(s), firing match {plan.firing_match.value}")
        return plan

    @staticmethod
    def firing_match_for(eval_method):
        method = parse_eval_method(eval_method)
        return FiringMatch.ANY if method in JVM_METHODS else FiringMatch.ALL

    @staticmethod
    def context_for(eval_method):
        method = parse_eval_method(eval_method)
        return dict(COUNTER_CONTEXT if method in GC_METHODS else GAUGE_CONTEXT)

    def _gc_conditions(self, method, options):
        condition = RateCondition(
            data_id=self.registry.data_id(method),
            operator=convert_operator(options.get("mw_operator")),
            threshold=_to_int(options, "value_mw_garbage_collector", method.value),
        )
        return GroupConditionsInfo([condition])

    def _jvm_conditions(self, method, options):
        data_id = self.registry.data_id(method)
        data2_id = self.registry.data_id(JVM_COMPANIONS[method])
        return GroupConditionsInfo([
            CompareCondition(
                data_id=data_id,
                data2_id=data2_id,
                operator=Operator.GT,
                data2_multiplier=_to_fraction(options, "value_mw_greater_than", method.value),
            ),
            CompareCondition(
                data_id=data_id,
                data2_id=data2_id,
                operator=Operator.LT,
                data2_multiplier=_to_fraction(options, "value_mw_less_than", method.value),
            ),
        ])

    def _threshold_conditions(self, method, options):
        condition = ThresholdCondition(
            data_id=self.registry.data_id(method),
            operator=convert_operator(options.get("mw_operator")),
            threshold=_to_int(options, "value_mw_threshold", method.value),
        )
        return GroupConditionsInfo([condition])
