from .registry import AllowancePreset, FabricWidthPreset, PresetRegistry, get_registry

__all__ = [
    # Registry entry types (frozen, loaded from YAML)
    "AllowancePreset",
    "FabricWidthPreset",
    # Registry
    "PresetRegistry",
    "get_registry",
]
