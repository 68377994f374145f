from .config_loader import load_config, build_algorithm, sort_events_on_load, decode_with_config

__all__ = ["load_config", "build_algorithm", "sort_events_on_load", "decode_with_config"]
