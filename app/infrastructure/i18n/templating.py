"""Strict {{ }} template rendering for translation variants.

Placeholders name a variable with a leading dot, plus dotted segments
for nested values:

    "Hello, {{.name}}!"        -> variables["name"]
    "Hi {{ .user.name }}"      -> variables["user"]["name"]

Rendering is strict: a placeholder whose variable is missing is an error,
never an empty string.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple, Union

from infrastructure.i18n.exceptions import TemplateError

LEFT_DELIMITER = "{{"
RIGHT_DELIMITER = "}}"

_FIELD_PATH = re.compile(r"^\s*\.([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*$")


@dataclass(frozen=True)
class Placeholder:
    """A parsed {{ }} action referring to a variable path."""

    path: Tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.path)


Segment = Union[str, Placeholder]


def has_placeholders(text: str) -> bool:
    """Check whether text contains an opening delimiter."""
    return LEFT_DELIMITER in text


def parse(text: str) -> List[Segment]:
    """Split a template into literal text and placeholders.

    Args:
        text: Template text.

    Returns:
        Segments in order; literal segments may be empty strings.

    Raises:
        TemplateError: If an action is unclosed or is not a variable path.
    """
    segments: List[Segment] = []
    position = 0
    while True:
        start = text.find(LEFT_DELIMITER, position)
        if start == -1:
            segments.append(text[position:])
            return segments

        end = text.find(RIGHT_DELIMITER, start + len(LEFT_DELIMITER))
        if end == -1:
            raise TemplateError(f"unclosed action at offset {start}")

        body = text[start + len(LEFT_DELIMITER) : end]
        match = _FIELD_PATH.match(body)
        if match is None:
            raise TemplateError(f"invalid action {body.strip()!r} at offset {start}")

        segments.append(text[position:start])
        segments.append(Placeholder(path=tuple(match.group(1).split("."))))
        position = end + len(RIGHT_DELIMITER)


def lookup(variables: Mapping[str, Any], placeholder: Placeholder) -> Any:
    """Resolve a placeholder path against the supplied variables.

    Mappings are walked by key, other objects by public attribute.

    Raises:
        TemplateError: If any segment of the path is missing or reading it
            fails.
    """
    value: Any = variables
    for depth, name in enumerate(placeholder.path):
        field = ".".join(placeholder.path[: depth + 1])
        if isinstance(value, Mapping):
            try:
                found = name in value
                if found:
                    value = value[name]
            except Exception as e:
                raise TemplateError(f"error reading key {field!r}: {e}") from e
            if not found:
                raise TemplateError(f"no entry for key {field!r}")
        elif name.startswith("_"):
            raise TemplateError(
                f"can't evaluate field {name!r} in {type(value).__name__}"
            )
        else:
            try:
                value = getattr(value, name)
            except AttributeError as e:
                raise TemplateError(
                    f"can't evaluate field {name!r} in {type(value).__name__}"
                ) from e
            except Exception as e:
                raise TemplateError(f"error calling {field!r}: {e}") from e
    return value


def render(text: str, variables: Mapping[str, Any]) -> str:
    """Render a template with strict variable lookup.

    Args:
        text: Template text using {{ }} delimiters.
        variables: Variable name -> value.

    Returns:
        Rendered text; values are formatted with str().

    Raises:
        TemplateError: On parse errors, missing variables, or values that
            cannot be formatted.
    """
    rendered = []
    for segment in parse(text):
        if isinstance(segment, Placeholder):
            value = lookup(variables, segment)
            try:
                rendered.append(str(value))
            except Exception as e:
                raise TemplateError(f"cannot format {segment}: {e}") from e
        else:
            rendered.append(segment)
    return "".join(rendered)
