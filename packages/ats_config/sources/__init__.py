from .active import ActiveConfig, LoadedConfig
from .catalog import (
    SAMPLE_CONFIG_FILES,
    ConfigSource,
    ConfigSourceError,
    SourceKind,
    fetch_config,
    load_config,
    load_config_blocking,
    read_config_file,
    resolve_sample,
    sample_url,
)

__all__ = [
    "SAMPLE_CONFIG_FILES",
    "ActiveConfig",
    "ConfigSource",
    "ConfigSourceError",
    "LoadedConfig",
    "SourceKind",
    "fetch_config",
    "load_config",
    "load_config_blocking",
    "read_config_file",
    "resolve_sample",
    "sample_url",
]
