"""
Value conventions of the host metadata store.

Values are kept in a wire form: composites are stored as JSON text, and
write paths expect strings and composites to arrive backslash-escaped.
"""

import json
from typing import Any


_SERIALIZED_PREFIXES = ("{", "[", '"')


def is_serialized(value: Any) -> bool:
    """
    Check whether a value is in serialized wire form.
    
    Args:
        value: Value to check
        
    Returns:
        True if the value is JSON text for an object, array or string
    """
    if not isinstance(value, str):
        return False
    
    text = value.strip()
    if not text or not text.startswith(_SERIALIZED_PREFIXES):
        return False
    
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def maybe_serialize(value: Any) -> Any:
    """
    Serialize a value if it needs it.
    
    Strings that already look serialized are serialized again so that
    they read back unchanged.
    
    Args:
        value: Value to serialize
        
    Returns:
        JSON text for composites, the value itself otherwise
    """
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value)
    if is_serialized(value):
        return json.dumps(value)
    return value


def maybe_unserialize(value: Any) -> Any:
    """Decode a value if it is in serialized wire form."""
    if is_serialized(value):
        return json.loads(value)
    return value


def to_db_value(value: Any) -> str:
    """
    Convert a (serialized) value to its stored text form.
    
    Args:
        value: Value returned by maybe_serialize
        
    Returns:
        Text as kept in the meta_value column
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def _add_slashes(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace('"', '\\"')
        .replace("\0", "\\0")
    )


def _strip_slashes(text: str) -> str:
    chars = []
    escaped = False
    for char in text:
        if escaped:
            chars.append("\0" if char == "0" else char)
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            chars.append(char)
    return "".join(chars)


def slash(value: Any) -> Any:
    """
    Backslash-escape strings, recursing into lists, tuples and dict values.
    
    Other values are returned unchanged.
    
    Args:
        value: Value to escape
        
    Returns:
        Escaped value
    """
    if isinstance(value, str):
        return _add_slashes(value)
    if isinstance(value, (list, tuple)):
        return [slash(item) for item in value]
    if isinstance(value, dict):
        return {key: slash(item) for key, item in value.items()}
    return value


def unslash(value: Any) -> Any:
    """Reverse slash()."""
    if isinstance(value, str):
        return _strip_slashes(value)
    if isinstance(value, (list, tuple)):
        return [unslash(item) for item in value]
    if isinstance(value, dict):
        return {key: unslash(item) for key, item in value.items()}
    return value
