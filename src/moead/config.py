"""MOEA/D configuration."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from numbers import Integral, Real
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .exceptions import ConfigurationError, NeighbourhoodSizeError

BoundLike = Union[float, Sequence[float]]

_INT_FIELDS = ("population_size", "neighbourhood_size", "max_generations")
_FLOAT_FIELDS = ("crossover_prob", "mutation_prob", "mutation_strength", "global_mating_prob")


def _as_bound(value: Any, name: str) -> Tuple[float, ...]:
    if isinstance(value, Real) and not isinstance(value, bool):
        return (float(value),)
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(f"{name} must be a number or a sequence of numbers (got {value!r}).")
    try:
        bound = tuple(_as_float(v, name) for v in value)
    except TypeError as exc:
        raise ConfigurationError(f"{name} must be a number or a sequence of numbers.") from exc
    if not bound:
        raise ConfigurationError(f"{name} must not be empty.")
    return bound


def _as_int(value: Any, name: str) -> int:
    # bool is an Integral; a flag in an integer slot is a typo.
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer (got {value!r}).")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real) and float(value).is_integer():
        return int(value)
    raise ConfigurationError(f"{name} must be an integer (got {value!r}).")


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"{name} must be a number (got {value!r}).")
    return float(value)


@dataclass(frozen=True)
class MOEADConfigData:
    population_size: int = 100
    crossover_prob: float = 0.6
    mutation_prob: float = 0.3
    mutation_strength: float = 1e-3
    neighbourhood_size: int = 50
    lower_bound: Tuple[float, ...] = (1.0,)
    upper_bound: Tuple[float, ...] = (1.0,)
    max_generations: int = 500
    global_mating_prob: float = 0.0
    seed: Optional[int] = None
    weight_vectors_path: Optional[str] = None

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            object.__setattr__(self, name, _as_int(getattr(self, name), name))
        for name in _FLOAT_FIELDS:
            object.__setattr__(self, name, _as_float(getattr(self, name), name))
        object.__setattr__(self, "lower_bound", _as_bound(self.lower_bound, "lower_bound"))
        object.__setattr__(self, "upper_bound", _as_bound(self.upper_bound, "upper_bound"))
        if self.seed is not None:
            object.__setattr__(self, "seed", _as_int(self.seed, "seed"))
        if self.weight_vectors_path is not None:
            if not isinstance(self.weight_vectors_path, (str, os.PathLike)):
                raise ConfigurationError(
                    f"weight_vectors_path must be a path (got {self.weight_vectors_path!r})."
                )
            object.__setattr__(self, "weight_vectors_path", os.fspath(self.weight_vectors_path))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["lower_bound"] = list(self.lower_bound)
        data["upper_bound"] = list(self.upper_bound)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    def validate(self) -> None:
        """Check parameter ranges that do not depend on the problem."""
        if self.population_size < 2:
            raise ConfigurationError(
                f"population_size must be >= 2 (got {self.population_size}).",
                suggestion="Mating needs two distinct parents",
            )
        if not 1 <= self.neighbourhood_size <= self.population_size:
            raise NeighbourhoodSizeError(self.neighbourhood_size, self.population_size)
        for name in ("crossover_prob", "mutation_prob", "global_mating_prob"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1] (got {value}).")
        if self.mutation_strength < 0.0:
            raise ConfigurationError(f"mutation_strength must be non-negative (got {self.mutation_strength}).")
        if self.max_generations < 1:
            raise ConfigurationError(f"max_generations must be >= 1 (got {self.max_generations}).")


_FIELD_NAMES = tuple(f.name for f in fields(MOEADConfigData))


class MOEADConfig:
    """
    Declarative configuration holder for MOEA/D settings.

    Values are type-checked when ``fixed()`` builds the frozen config;
    ranges are checked by ``MOEADConfigData.validate``.

    Examples:
        # Fluent builder
        cfg = MOEADConfig().population_size(50).neighbourhood_size(10).fixed()

        # Quick default configuration
        cfg = MOEADConfig.default()

        # From dictionary, on top of problem bounds
        base = MOEADConfigData(lower_bound=-4.0, upper_bound=4.0)
        cfg = MOEADConfig.from_dict({"population_size": 50}, base=base)
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls) -> MOEADConfigData:
        """Create the default configuration."""
        return cls().fixed()

    @classmethod
    def from_dict(cls, config: Dict[str, Any], base: Optional[MOEADConfigData] = None) -> MOEADConfigData:
        """
        Create configuration from a dictionary.

        Keys missing from ``config`` keep their value from ``base`` (or the
        defaults when no base is given).
        """
        unknown = sorted(set(config) - set(_FIELD_NAMES))
        if unknown:
            raise ConfigurationError(
                f"Unknown MOEA/D configuration keys: {', '.join(map(str, unknown))}.",
                suggestion=f"Valid keys: {', '.join(_FIELD_NAMES)}",
            )
        if base is not None:
            return replace(base, **config)
        builder = cls()
        builder._cfg.update(config)
        return builder.fixed()

    def population_size(self, value: int) -> "MOEADConfig":
        self._cfg["population_size"] = value
        return self

    def crossover_prob(self, value: float) -> "MOEADConfig":
        self._cfg["crossover_prob"] = value
        return self

    def mutation_prob(self, value: float) -> "MOEADConfig":
        self._cfg["mutation_prob"] = value
        return self

    def mutation_strength(self, value: float) -> "MOEADConfig":
        self._cfg["mutation_strength"] = value
        return self

    def neighbourhood_size(self, value: int) -> "MOEADConfig":
        self._cfg["neighbourhood_size"] = value
        return self

    def bounds(self, lower: BoundLike, upper: BoundLike) -> "MOEADConfig":
        self._cfg["lower_bound"] = lower
        self._cfg["upper_bound"] = upper
        return self

    def max_generations(self, value: int) -> "MOEADConfig":
        self._cfg["max_generations"] = value
        return self

    def global_mating_prob(self, value: float) -> "MOEADConfig":
        self._cfg["global_mating_prob"] = value
        return self

    def seed(self, value: Optional[int]) -> "MOEADConfig":
        self._cfg["seed"] = value
        return self

    def weight_vectors(self, path: Optional[str]) -> "MOEADConfig":
        self._cfg["weight_vectors_path"] = path
        return self

    def fixed(self) -> MOEADConfigData:
        return MOEADConfigData(**self._cfg)


def load_config(path: str | Path, base: Optional[MOEADConfigData] = None) -> MOEADConfigData:
    """
    Load a YAML or JSON file holding MOEA/D settings.

    A top-level ``moead`` section is used when present. Settings the file
    leaves out are taken from ``base``.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        import yaml

        with spec_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    else:
        with spec_path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{spec_path}' must contain a mapping.")
    section = data.get("moead", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section 'moead' in '{spec_path}' must be a mapping.")
    return MOEADConfig.from_dict(section, base=base)


__all__ = ["MOEADConfig", "MOEADConfigData", "load_config"]
