from __future__ import annotations
from typing import Any, Callable, Dict, Mapping, Tuple
import json
import logging
from pathlib import Path

from kiiroo.core.algorithm import Algorithm, check_algorithm
from kiiroo.core.event import Events, Text

logger = logging.getLogger(__name__)

AlgorithmFactory = Callable[..., Algorithm]

def load_config(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        text = f.read()
    suffix = p.suffix.lower()
    if suffix in (".yaml", ".yml"):
        try:
            import yaml  # type: ignore
        except Exception as e:
            raise ImportError("PyYAML is required to load YAML config files. Install with `pip install pyyaml`.") from e
        data = yaml.safe_load(text) or {}
    else:
        # default to JSON
        data = json.loads(text or "{}")
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")
    return data

def _algorithm_spec(spec: Any) -> Tuple[str, Dict[str, Any]]:
    if isinstance(spec, str):
        return spec, {}
    if isinstance(spec, Mapping):
        name = spec.get("name")
        params = spec.get("params") or {}
        if not isinstance(name, str):
            raise ValueError("algorithm.name must be a string")
        if not isinstance(params, Mapping):
            raise ValueError("algorithm.params must be a mapping")
        return name, {str(k): v for k, v in params.items()}
    raise ValueError("Config is missing an 'algorithm' entry")

def build_algorithm(cfg: Dict[str, Any], registry: Mapping[str, AlgorithmFactory]) -> Algorithm:
    """
    Build the algorithm named by ``cfg["algorithm"]``.

    ``registry`` maps names to factories supplied by the caller; the entry may
    be a bare name or ``{"name": ..., "params": {...}}`` where params are
    passed to the factory as keyword arguments. Names match case-insensitively.
    """
    name, params = _algorithm_spec(cfg.get("algorithm"))
    factories = {str(k).lower(): v for k, v in registry.items()}
    factory = factories.get(name.lower())
    if factory is None:
        known = ", ".join(sorted(factories)) or "<none>"
        raise ValueError(f"Unknown algorithm {name!r}; known algorithms: {known}")
    algorithm = factory(**params)
    check_algorithm(algorithm)
    logger.info("selected algorithm %s (requires_sorted=%s)", name, algorithm.requires_sorted)
    return algorithm

def sort_events_on_load(cfg: Dict[str, Any]) -> bool:
    return bool(cfg.get("sort_on_load", False))

def decode_with_config(text: Text, cfg: Dict[str, Any]) -> Events:
    events = Events.from_text(text)
    if sort_events_on_load(cfg):
        events = events.sort()
    return events
