"""
Preset registry: loads the named seam-allowance presets and standard bolt
widths from YAML at startup, validates them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
All tables are loaded and validated once at import time.  Nothing writes to
the registry after startup.

Tables
------
allowances.yaml     -- id → SeamAllowances (waist, side, hem in cm)
fabric_widths.yaml  -- id → bolt width in cm
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from skirtplan.errors import InvalidAllowance
from skirtplan.schemas.measurements import SeamAllowances

_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class AllowancePreset:
    id: str
    description: str
    allowances: SeamAllowances
    notes: str = ""


@dataclass(frozen=True)
class FabricWidthPreset:
    id: str
    description: str
    width: float
    notes: str = ""


class PresetRegistry:
    """
    Read-only registry of allowance presets and bolt widths.

    Public dict attributes are wrapped in MappingProxyType after loading and
    are immutable for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.allowances: MappingProxyType[str, AllowancePreset]
        self.fabric_widths: MappingProxyType[str, FabricWidthPreset]

        errors: list[str] = []
        self._load_allowances(errors)
        self._load_fabric_widths(errors)
        if errors:
            raise ValueError(
                "Preset registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Preset data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse preset data file {path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            raise ValueError(f"Preset data file {path} must contain an 'entries' list")
        return cast(dict[str, Any], data)

    def _load_allowances(self, errors: list[str]) -> None:
        data = self._load_yaml("allowances.yaml")
        result: dict[str, AllowancePreset] = {}
        for position, entry in enumerate(data["entries"]):
            preset_id = _entry_id(entry, "allowances", position, errors)
            if preset_id is None:
                continue
            if preset_id in result:
                errors.append(f"allowances entry {preset_id!r}: duplicate id")
                continue
            description = _entry_description(entry, f"allowances entry {preset_id!r}", errors)
            try:
                values = {edge: float(entry.get(edge, 0.0)) for edge in ("waist", "side", "hem")}
            except (TypeError, ValueError):
                errors.append(f"allowances entry {preset_id!r}: allowances must be numbers")
                continue
            try:
                allowances = SeamAllowances(**values)
            except InvalidAllowance as exc:
                errors.append(f"allowances entry {preset_id!r}: {exc.detail} ({exc.field})")
                continue
            if description is None:
                continue
            result[preset_id] = AllowancePreset(
                id=preset_id,
                description=description,
                allowances=allowances,
                notes=str(entry.get("notes") or "").strip(),
            )
        self.allowances = MappingProxyType(result)

    def _load_fabric_widths(self, errors: list[str]) -> None:
        data = self._load_yaml("fabric_widths.yaml")
        result: dict[str, FabricWidthPreset] = {}
        for position, entry in enumerate(data["entries"]):
            preset_id = _entry_id(entry, "fabric_widths", position, errors)
            if preset_id is None:
                continue
            if preset_id in result:
                errors.append(f"fabric_widths entry {preset_id!r}: duplicate id")
                continue
            label = f"fabric_widths entry {preset_id!r}"
            description = _entry_description(entry, label, errors)
            raw_width = entry.get("width")
            if raw_width is None:
                errors.append(f"{label}: missing 'width'")
                continue
            try:
                width = float(raw_width)
            except (TypeError, ValueError):
                errors.append(f"{label}: width must be a number, got {raw_width!r}")
                continue
            if not math.isfinite(width) or width <= 0:
                errors.append(f"{label}: width must be positive, got {width}")
                continue
            if description is None:
                continue
            result[preset_id] = FabricWidthPreset(
                id=preset_id,
                description=description,
                width=width,
                notes=str(entry.get("notes") or "").strip(),
            )
        self.fabric_widths = MappingProxyType(result)

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_allowances(self, preset_id: str) -> SeamAllowances:
        """Return the SeamAllowances for a named preset.

        Raises KeyError if the preset is not defined.
        """
        try:
            return self.allowances[preset_id].allowances
        except KeyError:
            raise KeyError(f"No allowance preset {preset_id!r}") from None

    def get_fabric_width(self, preset_id: str) -> float:
        """Return the bolt width in cm for a named preset.

        Raises KeyError if the preset is not defined.
        """
        try:
            return self.fabric_widths[preset_id].width
        except KeyError:
            raise KeyError(f"No fabric width preset {preset_id!r}") from None


# ── Entry helpers ──────────────────────────────────────────────────────────────


def _entry_id(entry: Any, table: str, position: int, errors: list[str]) -> str | None:
    if not isinstance(entry, dict) or entry.get("id") is None:
        errors.append(f"{table} entry #{position}: missing 'id'")
        return None
    return str(entry["id"])


def _entry_description(entry: dict[str, Any], label: str, errors: list[str]) -> str | None:
    description = entry.get("description")
    if not isinstance(description, str) or not description.strip():
        errors.append(f"{label}: missing 'description'")
        return None
    return description.strip()


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Built eagerly at import time; read-only afterwards, so it is safe to share.

_registry: PresetRegistry = PresetRegistry()


def get_registry() -> PresetRegistry:
    """Return the module-level registry singleton."""
    return _registry
