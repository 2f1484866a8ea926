"""Presence checks for the measurements the ICA engine cannot do without."""

from ica.validation.errors import MissingRequiredInput
from ica.validation.protocols import IcaSource

REQUIRED_FIELDS = ("od", "sst", "dqo", "ce", "ph")


def validate_required_inputs(source: IcaSource) -> list[str]:
    """Return the names of required measurements that are absent.

    Args:
        source: Any object exposing the raw measurement fields

    Returns:
        List of missing field names (empty if all are present)
    """
    return [name for name in REQUIRED_FIELDS if getattr(source, name, None) is None]


def require_inputs(source: IcaSource) -> None:
    """Raise if any required measurement is absent.

    Raises:
        MissingRequiredInput: Naming every absent field, not just the first
    """
    missing = validate_required_inputs(source)
    if missing:
        raise MissingRequiredInput(missing)
