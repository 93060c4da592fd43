# create_host/core/settings.py

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml


@dataclass
class SerialSettings:
    """
    Serial parameters for an OI port. The Create 2 talks 8N1 with no flow
    control; only the baud rate differs between models/modes.
    """
    port: str
    baudrate: int = 115200     # 115200 | 19200
    bytesize: int = 8
    parity: str = "N"
    stopbits: int = 1
    xonxoff: bool = False
    rtscts: bool = False
    timeout: Optional[float] = None        # None = block until bytes arrive
    write_timeout: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SerialSettings":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown serial setting(s): {', '.join(sorted(unknown))}")
        if "port" not in data:
            raise ValueError("missing serial setting: port")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SerialSettings":
        data = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(data.get("serial"), dict):
            raise ValueError(f"{path}: missing 'serial:' section")
        return cls.from_dict(data["serial"])

    @classmethod
    def load(cls, profile: str = "default") -> "SerialSettings":
        base = Path(__file__).resolve().parent.parent
        cfg_path = base / "config" / f"create_profile_{profile}.yaml"
        return cls.from_yaml(cfg_path)


@dataclass
class LogSettings:
    """Where the transport's open/write log lines go."""
    log_file: str = "create_host.log"
    log_dir: str = "logs"
    level: str = "INFO"
    console: bool = False
    max_bytes: int = 5_000_000
    backup_count: int = 5

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "LogSettings":
        data = yaml.safe_load(Path(path).read_text()) or {}
        section = data.get("logging") or {}
        known = {f.name for f in fields(cls)}
        unknown = set(section) - known
        if unknown:
            raise ValueError(f"unknown logging setting(s): {', '.join(sorted(unknown))}")
        return cls(**section)

    @classmethod
    def load(cls, profile: str = "default") -> "LogSettings":
        base = Path(__file__).resolve().parent.parent
        return cls.from_yaml(base / "config" / f"create_profile_{profile}.yaml")
