import json
import re
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode

from .errors import DataParsingError

_conf_comment_re = re.compile(r"#.*$")


# custom hook for 'json.loads()' to detect duplicate keys in data
# source: https://stackoverflow.com/q/14902299/12858520
def _json_raise_duplicates(pairs: List[Tuple[Any, Any]]) -> Optional[Any]:
    dict_out: Dict[Any, Any] = {}
    for key, val in pairs:
        if key in dict_out:
            raise DataParsingError(f"duplicate key detected: {key}")
        dict_out[key] = val
    return dict_out


class _RaiseDuplicatesLoader(yaml.SafeLoader):
    """
    Custom YAML Loader for 'yaml.load()'.
    - detects duplicate keys in the data
    """

    # custom constructor to detect duplicate keys in data
    # source: https://gist.github.com/pypt/94d747fe5180851196eb
    def construct_mapping(self, node: Union[MappingNode, Any], deep: bool = False) -> Dict[Any, Any]:
        if not isinstance(node, MappingNode):
            raise ConstructorError(None, None, f"expected a mapping node, but found {node.id}", node.start_mark)
        mapping: Dict[Any, Any] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)  # type: ignore
            # we need to check, that the key object can be used in a hash table
            try:
                _ = hash(key)  # type: ignore
            except TypeError as exc:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found unacceptable key ({exc})",
                    key_node.start_mark,
                ) from exc

            # check for duplicate keys
            if key in mapping:
                raise DataParsingError(f"duplicate key detected: {key_node.start_mark}")
            value = self.construct_object(value_node, deep=deep)  # type: ignore
            mapping[key] = value
        return mapping


def _parse_conf(text: str) -> Dict[str, str]:
    """
    Parse the native 'clatd.conf' format.

    One 'key value' pair per line, '#' starts a comment.
    The value is the rest of the line and may be empty.
    """

    data: Dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = _conf_comment_re.sub("", line).strip()
        if not line:
            continue
        parts = line.split(None, 1)
        key = parts[0]
        if key in data:
            raise DataParsingError(f"duplicate key detected: '{key}' on line {lineno}")
        data[key] = parts[1].strip() if len(parts) == 2 else ""
    return data


def _to_text(key: str, value: Any) -> str:
    # the item reader parses text, so scalars are normalized back to it
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise DataParsingError(f"expected a scalar value for '{key}', got '{type(value).__name__}'")


def _flatten(data: Any) -> Dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataParsingError(f"expected a mapping of configuration items, got '{type(data).__name__}'")
    return {str(key): _to_text(str(key), value) for key, value in data.items()}


class DataFormat(Enum):
    CONF = auto()
    YAML = auto()
    JSON = auto()

    @staticmethod
    def from_path(path: Path) -> "DataFormat":
        suffix = path.suffix.lower()
        if suffix in (".yaml", ".yml"):
            return DataFormat.YAML
        if suffix == ".json":
            return DataFormat.JSON
        return DataFormat.CONF

    def parse_to_dict(self, text: str) -> Dict[str, str]:
        if self is DataFormat.CONF:
            return _parse_conf(text)
        if self is DataFormat.YAML:
            # _RaiseDuplicatesLoader extends yaml.SafeLoader, so this should be safe
            try:
                return _flatten(yaml.load(text, Loader=_RaiseDuplicatesLoader))  # type: ignore
            except yaml.YAMLError as e:
                raise DataParsingError(f"failed to parse YAML: {e}") from e
        if self is DataFormat.JSON:
            try:
                return _flatten(json.loads(text, object_pairs_hook=_json_raise_duplicates))
            except json.JSONDecodeError as e:
                raise DataParsingError(f"failed to parse JSON: {e}") from e
        raise NotImplementedError(f"Parsing of format '{self}' is not implemented")
