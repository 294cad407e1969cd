"""Reader/writer options, loadable from YAML or JSON files."""

import dataclasses
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .rttm import DEFAULT_ENCODING, PathLike, Rttm, check_encoding, load_rttm, write_rttm

LOG = logging.getLogger(__name__)


@dataclass
class RttmOptions:
    encoding: str = DEFAULT_ENCODING
    # skip lines that cannot be decoded; parse failures still raise
    continue_on_error: bool = False

    def __post_init__(self):
        if not isinstance(self.encoding, str):
            raise ValueError(f"Option 'encoding' must be a string, got {type(self.encoding).__name__}")
        if not isinstance(self.continue_on_error, bool):
            raise ValueError(
                f"Option 'continue_on_error' must be a boolean, got {type(self.continue_on_error).__name__}"
            )
        check_encoding(self.encoding)

    def read(self, path: PathLike) -> Rttm:
        return load_rttm(path, self)

    def write(self, rttm: Rttm, path: PathLike) -> None:
        write_rttm(rttm, path, self)


def _load_mapping(config_path: Path) -> Dict[str, Any]:
    suffix = config_path.suffix.lower()
    if suffix in (".yml", ".yaml"):
        with config_path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    raise ValueError(f"Unsupported config file format: {suffix}")


def options_from_dict(data: Optional[Dict[str, Any]]) -> RttmOptions:
    if not data:
        return RttmOptions()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of options, got {type(data).__name__}")
    known = {f.name for f in dataclasses.fields(RttmOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown RTTM option(s): {', '.join(unknown)}")
    return RttmOptions(**data)


def load_config_file(path: PathLike) -> RttmOptions:
    """
    Load reader/writer options from a YAML or JSON file.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: unsupported file suffix, unknown option or invalid option value.
    """
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    options = options_from_dict(_load_mapping(config_path))
    LOG.info("RTTM options loaded from '%s': %s", config_path, options)
    return options
