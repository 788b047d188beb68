"""
Minimal interpolation-only templating.

A template is compiled against a regular expression whose single capturing
group names the binding to substitute, e.g. ``{{\\s*(text)\\s*}}``. Text that
does not match the pattern is copied through literally, so placeholders for
other names stay inert.
"""

import re
from typing import Any, Mapping, Sequence

from context_engine.core.error_handling import TemplateCompileError, TemplateRenderError

TEXT_INTERPOLATE_PATTERN = r"{{\s*(text)\s*}}"

DEFAULT_BINDING_NAMES = ("text",)


class RegexTemplate:
    """A template compiled into literal chunks and binding names"""

    def __init__(self, source: str, pieces: list[tuple[bool, str]]):
        self.source = source
        self._pieces = pieces

    @property
    def placeholders(self) -> list[str]:
        return [value for is_binding, value in self._pieces if is_binding]

    def __call__(self, bindings: Mapping[str, Any]) -> str:
        parts = []
        for is_binding, value in self._pieces:
            if not is_binding:
                parts.append(value)
                continue
            try:
                parts.append(str(bindings[value]))
            except KeyError:
                raise TemplateRenderError(f"No value bound for placeholder '{value}'")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"RegexTemplate({self.source!r})"


def _check_unclosed_placeholders(template: str, names: Sequence[str]) -> None:
    # A stray "{{" is literal text; only an opened placeholder for a known
    # binding that never reaches "}}" is malformed.
    for name in names:
        unclosed = re.search(r"{{\s*" + re.escape(name) + r"\b(?![^{]*}})", template)
        if unclosed:
            raise TemplateCompileError(
                f"Unclosed placeholder for '{name}' at position {unclosed.start()}"
            )


def compile_template(
    template: str,
    pattern: str = TEXT_INTERPOLATE_PATTERN,
    names: Sequence[str] = DEFAULT_BINDING_NAMES,
) -> RegexTemplate:
    """
    Compile ``template`` so that every match of ``pattern`` is replaced by the
    binding named in the match's first group.

    Raises TemplateCompileError for an invalid pattern, a pattern without
    exactly one capturing group, or a placeholder for one of ``names`` that
    is opened with ``{{`` but never closed. Any other ``{{`` is literal text.
    """
    if not isinstance(template, str):
        raise TemplateCompileError(
            f"Template must be a string, got {type(template).__name__}"
        )

    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise TemplateCompileError(f"Invalid interpolation pattern {pattern!r}: {e}") from e

    if regex.groups != 1:
        raise TemplateCompileError(
            f"Interpolation pattern must have exactly one group, found {regex.groups}"
        )

    _check_unclosed_placeholders(template, names)

    pieces: list[tuple[bool, str]] = []
    cursor = 0
    for match in regex.finditer(template):
        if match.start() > cursor:
            pieces.append((False, template[cursor : match.start()]))
        pieces.append((True, match.group(1)))
        cursor = match.end()
    if cursor < len(template):
        pieces.append((False, template[cursor:]))

    return RegexTemplate(template, pieces)
