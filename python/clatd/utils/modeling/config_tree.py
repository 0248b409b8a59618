from __future__ import annotations

from pathlib import Path
from typing import Optional

from .errors import ConfigFileError
from .parsing import DataFormat


class ConfigTree:
    """Parsed configuration items, looked up by key."""

    def __init__(self, source: dict[str, str] | None = None, tree_path: str = "/", base_path: Path = Path()):
        self._source = dict(source) if source else {}
        self._tree_path = tree_path
        self._base_path = base_path

    @classmethod
    def from_file(cls, file: str | Path) -> ConfigTree:
        path = Path(file)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(f"Could not read config file {path}: {e.strerror}", str(path)) from e
        except UnicodeDecodeError as e:
            raise ConfigFileError(f"Could not decode config file {path}: {e.reason}", str(path)) from e
        return cls(DataFormat.from_path(path).parse_to_dict(text), base_path=path)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._source.get(key, default)

    def path(self, key: str) -> str:
        return f"{self._tree_path}{key}"

    def is_empty(self) -> bool:
        return not self._source

    @property
    def base_path(self) -> Path:
        return self._base_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"
