from __future__ import annotations
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.resolve()

DEFAULT_INTERFACE = "eth0"
DEFAULT_INTERVAL = 2.0
DEFAULT_STOP_BYTES = 10_000_000
DEFAULT_MAX_FLOWS = 10

@dataclass
class CFG:
    interface: str = DEFAULT_INTERFACE
    local_ip: Optional[str] = None       # None -> resolve from the interface inventory
    interval: float = DEFAULT_INTERVAL   # seconds between dashboard refreshes
    stop_bytes: int = DEFAULT_STOP_BYTES # stop once rx+tx exceeds this; 0 = never
    max_flows: int = DEFAULT_MAX_FLOWS
    web_port: Optional[int] = None
    console: bool = True

    def validate(self) -> "CFG":
        if self.interval <= 0:
            raise ConfigError(f"interval must be positive, got {self.interval}")
        if self.stop_bytes < 0:
            raise ConfigError(f"stop_bytes must be >= 0, got {self.stop_bytes}")
        if self.max_flows < 0:
            raise ConfigError(f"max_flows must be >= 0, got {self.max_flows}")
        if self.web_port is not None and not (0 < self.web_port < 65536):
            raise ConfigError(f"invalid web port {self.web_port}")
        return self

def config_path(path: str) -> Path:
    """Relative paths: CWD first, then the package folder."""
    p = Path(path).expanduser()
    if p.is_absolute() or (Path.cwd() / p).exists():
        return p.resolve()
    return (BASE_DIR / p).resolve()

def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    p = config_path(path)
    if not p.exists():
        raise ConfigError(f"config file not found: {path}")
    txt = p.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(txt) if p.suffix in (".yaml", ".yml") else json.loads(txt)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot parse {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a mapping at top level")
    known = {f.name for f in fields(CFG)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"{p}: unknown keys {sorted(unknown)}")
    logger.info("loaded config from %s", p)
    return data

def init_cfg_from_args(args) -> CFG:
    """File values first, then any flag the user actually passed."""
    cfg = CFG(**load_config_file(getattr(args, "config", None)))
    if getattr(args, "interface", None):
        cfg.interface = args.interface
    if getattr(args, "local_ip", None):
        cfg.local_ip = args.local_ip
    if getattr(args, "interval", None) is not None:
        cfg.interval = float(args.interval)
    if getattr(args, "stop_bytes", None) is not None:
        cfg.stop_bytes = int(args.stop_bytes)
    if getattr(args, "max_flows", None) is not None:
        cfg.max_flows = int(args.max_flows)
    if getattr(args, "port", None) is not None:
        cfg.web_port = int(args.port)
    if getattr(args, "no_console", False):
        cfg.console = False
    try:
        return cfg.validate()
    except TypeError as e:
        raise ConfigError(f"bad value type in config: {e}") from e
