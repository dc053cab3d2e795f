"""Wire-format key casing."""

from typing import Any


def _lower_first(key: str) -> str:
    return key[:1].lower() + key[1:]


def keys_to_camel_case(value: Any) -> Any:
    """
    Lower-case the first character of every object key, recursively.

    The server speaks PascalCase ("ImageBase64"); the client works with
    camelCase ("imageBase64"). Dicts get new keys, lists are mapped element
    by element, anything else is returned unchanged. Applying it twice is
    the same as applying it once.
    """
    if isinstance(value, dict):
        return {
            (_lower_first(k) if isinstance(k, str) else k): keys_to_camel_case(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [keys_to_camel_case(v) for v in value]
    return value


__all__ = ["keys_to_camel_case"]
