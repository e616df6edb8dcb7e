"""Build :class:`FootprintInput` records from configuration mappings.

Household entries in ``config.yaml`` only need the fields that differ from the
questionnaire defaults; each section is merged onto :func:`default_input`.
Field names may use the form layer's camelCase spelling (``milesPerWeek``).
"""

from __future__ import annotations

import re
from dataclasses import fields
from typing import Mapping

from .models import (
    ConsumptionInput,
    DietInput,
    EnergyInput,
    FootprintInput,
    TransportInput,
    default_input,
)

SECTIONS: dict[str, type] = {
    "transport": TransportInput,
    "energy": EnergyInput,
    "diet": DietInput,
    "consumption": ConsumptionInput,
}

TEXT_FIELDS = {"car_type", "heating_type", "type"}
COUNT_FIELDS = {"flights_per_year", "electronics_per_year"}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def normalize_key(name: str) -> str:
    """``milesPerWeek`` -> ``miles_per_week``."""
    return _CAMEL_BOUNDARY.sub(r"_\1", str(name).strip()).lower()


def input_from_mapping(
    values: Mapping[str, Mapping[str, object]] | None,
    base: FootprintInput | None = None,
) -> FootprintInput:
    """Merge a (possibly partial) nested mapping onto ``base``."""
    data = base if base is not None else default_input()
    if not values:
        return data
    if not isinstance(values, Mapping):
        raise ValueError("Household inputs must be a mapping of sections.")

    for raw_section, section_values in values.items():
        section = normalize_key(raw_section)
        record_type = SECTIONS.get(section)
        if record_type is None:
            raise ValueError(
                f"Unknown input section '{raw_section}'. Expected one of {sorted(SECTIONS)}."
            )
        if section_values is None:
            continue
        if not isinstance(section_values, Mapping):
            raise ValueError(f"Input section '{raw_section}' must be a mapping.")
        allowed = {f.name for f in fields(record_type)}
        changes: dict[str, object] = {}
        for raw_key, value in section_values.items():
            key = normalize_key(raw_key)
            if key not in allowed:
                raise ValueError(
                    f"Unknown field '{raw_key}' in section '{section}'. "
                    f"Expected one of {sorted(allowed)}."
                )
            changes[key] = _coerce(section, key, value)
        data = getattr(data, f"with_{section}")(**changes)
    return data


def load_households(
    households_cfg: Mapping[str, Mapping[str, Mapping[str, object]]] | None,
) -> dict[str, FootprintInput]:
    """Return ``name -> FootprintInput`` for each configured household.

    An empty or missing section yields a single ``default`` household.
    """
    if not households_cfg:
        return {"default": default_input()}
    if not isinstance(households_cfg, Mapping):
        raise ValueError("'footprint.households' must map household names to inputs.")
    return {
        str(name): input_from_mapping(values or {})
        for name, values in households_cfg.items()
    }


def _coerce(section: str, key: str, value: object) -> object:
    if key in TEXT_FIELDS:
        return str(value).strip()
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{section}.{key} must be numeric, got {value!r}") from exc
    if key in COUNT_FIELDS:
        if not number.is_integer():
            raise ValueError(f"{section}.{key} must be a whole number, got {value!r}")
        return int(number)
    return number
