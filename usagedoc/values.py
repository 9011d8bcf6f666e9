"""
Value coercion for option defaults and bound arguments.

Values are plain Python objects and their type is their tag: int, float, bool
or str. The empty string stands for "no value" in option defaults.
"""
import re

_INTEGER = re.compile(r"^[0-9]+$")
_FLOAT = re.compile(r"^[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?$")
_BOOLEAN = re.compile(r"^(true|false)$", re.IGNORECASE)
# greedy up to the last closing bracket on the line
_DEFAULT = re.compile(r"\[default: (.*)\]", re.IGNORECASE)


def parse_value(text, /):
    """
    classify raw text into an int, float, bool or str (first pattern wins).

        >>> parse_value("42"), parse_value("3.14"), parse_value("TRUE"), parse_value("ralph")
        (42, 3.14, True, 'ralph')
    """
    if not isinstance(text, str):
        raise TypeError("parse_value() argument must be a string")
    if _INTEGER.search(text):
        return int(text)
    if _FLOAT.search(text):
        return float(text)
    if _BOOLEAN.search(text):
        return text.lower() == "true"
    return text


def parse_default(text, /):
    """
    extract X from a "[default: X]" annotation, or "" when there is none.
    X stays a string.
    """
    if not isinstance(text, str):
        raise TypeError("parse_default() argument must be a string")
    if match := _DEFAULT.search(text):
        return match[1]
    return ""


__all__ = (
    "parse_value",
    "parse_default",
)
