# notifier/errors.py


class InvalidConfigurationError(ValueError):
    """An observer was built with a missing or blank setting (e.g. its name)."""


class PreconditionViolationError(RuntimeError):
    """A call was made out of order, e.g. detach() before attach()."""
