"""
Policy loading for passcheck.

Policies come from external configuration as a key/value mapping, usually a
YAML document:

    preset: 3            # optional; missing keys are taken from the preset
    min_length: 10
    deny_substrings:
      - acme

Without a ``preset`` key, every policy field except ``custom_regex`` must be
present. Missing, unknown or mistyped keys raise PolicyMapError instead of
silently falling back to defaults.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from passcheck.errors import PolicyMapError
from passcheck.presets import get_preset
from passcheck.schema import Policy


PRESET_KEY = "preset"

OPTIONAL_FIELDS = frozenset({"custom_regex"})


def required_fields() -> frozenset[str]:
    """Policy fields that must appear in a mapping without a preset."""
    return frozenset(Policy.model_fields) - OPTIONAL_FIELDS


def policy_from_mapping(data: Any) -> Policy:
    """
    Build a Policy from a key/value mapping.

    Args:
        data: Mapping of policy field names to values, optionally with a
            ``preset`` level supplying defaults

    Returns:
        Validated Policy

    Raises:
        PolicyMapError: If data is not a mapping, or keys are missing,
            unknown or mistyped
        PolicyConfigurationError: If the values break a policy invariant
    """
    if not isinstance(data, Mapping):
        raise PolicyMapError(
            message=f"Policy must be a mapping, got {type(data).__name__}",
        )

    values = dict(data)
    preset_level = values.pop(PRESET_KEY, None)

    unknown = sorted(str(key) for key in values if key not in Policy.model_fields)
    if unknown:
        raise PolicyMapError(unknown_fields=unknown)

    if preset_level is not None:
        if isinstance(preset_level, bool) or not isinstance(preset_level, int):
            raise PolicyMapError(invalid_fields=[PRESET_KEY])
        values = {**policy_to_mapping(get_preset(preset_level)), **values}

    missing = sorted(required_fields() - values.keys())
    if missing:
        raise PolicyMapError(missing_fields=missing)

    try:
        return Policy.model_validate(values)
    except ValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise PolicyMapError(
            invalid_fields=invalid,
            context={"errors": [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()]},
        ) from e


def policy_to_mapping(policy: Policy) -> dict[str, Any]:
    """Dump a Policy into the mapping shape accepted by policy_from_mapping."""
    return policy.model_dump(mode="json")


def load_policy(path: Path | str) -> Policy:
    """
    Load a policy from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated Policy object

    Raises:
        FileNotFoundError: If the file doesn't exist
        PolicyMapError: If the YAML doesn't describe a valid policy map
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)

    return policy_from_mapping(data)


def load_policy_from_string(content: str) -> Policy:
    """Load a policy from a YAML string."""
    data = yaml.safe_load(content)
    return policy_from_mapping(data)


def dump_policy(policy: Policy) -> str:
    """Render a Policy as a YAML document."""
    return yaml.safe_dump(policy_to_mapping(policy), sort_keys=False)
