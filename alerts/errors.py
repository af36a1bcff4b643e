"""Errors raised while translating and synchronizing alerts."""


class AlertSyncError(Exception):
    """Base class for alert translation and synchronization errors."""


class ConfigurationError(AlertSyncError):
    """The alert definition or the metrics configuration is unusable."""


class MetricLookupError(ConfigurationError):
    def __init__(self, name):
        super().__init__(f"No backend metric configured for '{name}'")
        self.name = name


class InvalidOptionError(ConfigurationError):
    def __init__(self, key, value, eval_method=None):
        super().__init__(f"Invalid value for option '{key}': {value!r}"
                         + (f" ({eval_method})" if eval_method else ""))
        self.key = key
        self.value = value
        self.eval_method = eval_method


class UnknownEvalMethodError(AlertSyncError):
    def __init__(self, eval_method):
        super().__init__(f"Unsupported evaluation method: {eval_method!r}")
        self.eval_method = eval_method


class UnsupportedOperatorError(AlertSyncError):
    def __init__(self, operator):
        super().__init__(f"Unsupported comparison operator: {operator!r}")
        self.operator = operator


class UnknownOperationError(AlertSyncError):
    def __init__(self, operation):
        super().__init__(f"Unknown alert operation: {operation!r}")
        self.operation = operation
