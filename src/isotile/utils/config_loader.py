import yaml
from typing import Type, TypeVar, Any, Dict
from typing import get_type_hints
from dataclasses import asdict, is_dataclass, fields
from pathlib import Path
from termcolor import colored, cprint
from ..core.config import SimConfig
from ..entities.avatar import APPEARANCE_PRESETS
from ..utils.colors import COLOR_PALETTE, is_valid_color

T = TypeVar("T")

GRID_PRESETS = ("default", "flat", "custom")


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries.
    Values in override take precedence over base.
    """
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged


def _config_error(section: str, problem: str, required: str, provided: Any) -> str:
    return (
        f"{colored(f'{section} CONFIG ERROR', 'white', 'on_red', attrs=['bold'])}\n"
        f"{colored('Problem:', 'red', attrs=['bold'])} {problem}\n"
        f"{colored('Required:', 'cyan')} {required}\n"
        f"{colored('Provided:', 'yellow')} {provided}"
    )


def _check_color(section: str, key: str, color: Any) -> None:
    assert is_valid_color(color), _config_error(
        section,
        f"Invalid color for {key}",
        f"#RRGGBB string, RGB triple or one of {sorted(COLOR_PALETTE.keys())}",
        color,
    )


def _check_vector(section: str, key: str, value: Any) -> None:
    assert isinstance(value, (list, tuple)) and len(value) == 2, _config_error(
        section,
        f"Invalid {key}",
        "A pair [x, y] of numbers",
        value,
    )


def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """
    Convert dictionary to dataclass recursively.
    """
    if not is_dataclass(cls):
        return data

    if cls.__name__ == "PhysicsConfig":
        for key in ("gravity", "step_size"):
            if key in data:
                assert data[key] >= 0, _config_error(
                    "PHYSICS", f"Invalid {key} value", "Value must be >= 0", data[key]
                )

    if cls.__name__ == "GridConfig":
        preset = data.get("preset", "default")
        assert preset in GRID_PRESETS, _config_error(
            "GRID", "Unknown grid preset", f"One of {list(GRID_PRESETS)}", preset
        )
        for key in ("width", "height"):
            if key in data:
                assert isinstance(data[key], int) and data[key] > 0, _config_error(
                    "GRID", f"Invalid grid {key}", "Positive int", data[key]
                )
        if preset == "custom":
            assert data.get("heights") is not None, _config_error(
                "GRID", "Custom grid without heights", "heights: flat list or list of rows", None
            )

    if cls.__name__ == "ActorConfig":
        preset = data.get("appearance", "default")
        assert preset in APPEARANCE_PRESETS, _config_error(
            "ACTOR", "Unknown appearance preset", f"One of {list(APPEARANCE_PRESETS.keys())}", preset
        )
        if data.get("color") is not None:
            _check_color("ACTOR", "color", data["color"])
        if "start_position" in data:
            _check_vector("ACTOR", "start_position", data["start_position"])

    if cls.__name__ == "ViewConfig":
        for key in ("root", "x_axis", "y_axis", "figure_offset"):
            if key in data:
                _check_vector("VIEW", key, data[key])
        if "view_size" in data:
            assert isinstance(data["view_size"], int) and data["view_size"] >= 0, _config_error(
                "VIEW", "Invalid view_size", "Non-negative int", data["view_size"]
            )

    if cls.__name__ == "SimConfig":
        for key in ("tile_top_color", "tile_wall_color"):
            if key in data:
                _check_color("SIM", key, data[key])
        if "shadow_radius" in data:
            assert data["shadow_radius"] >= 0, _config_error(
                "SIM", "Invalid shadow_radius", "Value must be >= 0", data["shadow_radius"]
            )

    # Use get_type_hints to resolve string forward references
    try:
        type_hints = get_type_hints(cls)
    except Exception:
        # Fallback if resolving fails (e.g. strict forward refs not in scope)
        type_hints = {f.name: f.type for f in fields(cls)}

    kwargs = {}

    for key, value in data.items():
        if key not in type_hints:
            cprint(f"Warning: ignoring unknown {cls.__name__} key '{key}'", "yellow")
            continue

        field_type = type_hints[key]

        # Handle optional types (naive implementation, assumes Union[Type, None])
        if hasattr(field_type, "__origin__"):
            # Unwrap Optional/Union
            args = field_type.__args__
            # Find the non-None type
            real_type = next((a for a in args if a is not type(None)), None)
            if real_type and is_dataclass(real_type) and isinstance(value, dict):
                kwargs[key] = from_dict(real_type, value)
                continue

        if is_dataclass(field_type) and isinstance(value, dict):
            kwargs[key] = from_dict(field_type, value)
        else:
            kwargs[key] = value

    return cls(**kwargs)


def load_config_from_yaml(config_path: str, base_config: SimConfig = None) -> SimConfig:
    """
    Load configuration from YAML file, optionally merging with a base config.

    Args:
        config_path: Path to YAML config file
        base_config: Optional base SimConfig to override (if None, uses defaults)

    Returns:
        SimConfig: Loaded configuration

    Keys missing from the file keep the value of base_config, including
    inside nested sections (a partial top_view keeps the top-view defaults).
    """
    if base_config is None:
        base_config = SimConfig()

    path = Path(config_path)
    assert path.exists(), (
        f"{colored('FILE ERROR', 'white', 'on_red', attrs=['bold'])}\n"
        f"{colored('Problem:', 'red', attrs=['bold'])} Configuration file not found\n"
        f"{colored('Path:', 'cyan')} {config_path}\n"
        f"{colored('Solution:', 'green', attrs=['bold'])} Check if the file exists and path is correct"
    )

    with open(path, "r") as f:
        yaml_config = yaml.safe_load(f) or {}

    assert isinstance(yaml_config, dict), (
        f"{colored('FILE ERROR', 'white', 'on_red', attrs=['bold'])}\n"
        f"{colored('Problem:', 'red', attrs=['bold'])} Top level of the configuration must be a mapping\n"
        f"{colored('Path:', 'cyan')} {config_path}"
    )

    # Sparse file over a full default tree, then rebuild the dataclasses.
    merged = merge_configs(asdict(base_config), yaml_config)
    return from_dict(SimConfig, merged)
