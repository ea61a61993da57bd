"""
Line-oriented @KEY@ template rendering.

Scalar values are substituted in place. A list value turns the line that
references it into one line per element.
"""

import re
from typing import Dict, List, Mapping, Sequence, Union

from go2rpm.exceptions import TemplateError


Value = Union[str, Sequence[str]]


class SpecRenderer:
    """
    Renders templates with @KEY@ placeholders.

    Mapping values are either a single string or a list of strings:
    - @PKG@ with "github.com/foo/bar" -> substituted in place
    - @DOCFILES@ with ["README.md", "LICENSE"] -> the line is emitted twice,
      once per file; an empty list drops the line
    """

    PLACEHOLDER_PATTERN = re.compile(r'@([A-Za-z_][A-Za-z0-9_]*)@')

    def placeholders(self, template: str) -> List[str]:
        """Placeholder names in order of first appearance."""
        seen: List[str] = []
        for match in self.PLACEHOLDER_PATTERN.finditer(template):
            name = match.group(1)
            if name not in seen:
                seen.append(name)
        return seen

    def missing_keys(self, template: str, mapping: Mapping[str, Value]) -> List[str]:
        """Placeholders used by the template that have no value in mapping."""
        return [name for name in self.placeholders(template) if mapping.get(name) is None]

    def render(self, template: str, mapping: Mapping[str, Value]) -> str:
        """
        Render a template line by line.

        Args:
            template: Template text
            mapping: Placeholder name to string or list of strings

        Returns:
            Rendered text

        Raises:
            TemplateError: If a line references more than one list-valued key
        """
        return ''.join(
            ''.join(self.render_line(line, mapping))
            for line in split_lines(template)
        )

    def render_strict(self, template: str, mapping: Mapping[str, Value]) -> str:
        """Render, refusing templates with placeholders that have no value."""
        missing = self.missing_keys(template, mapping)
        if missing:
            raise TemplateError(
                f"No value for template placeholders: {', '.join(missing)}",
                keys=missing,
            )
        return self.render(template, mapping)

    def render_line(self, line: str, mapping: Mapping[str, Value]) -> List[str]:
        """Render a single line into zero or more output lines."""
        names = {m.group(1) for m in self.PLACEHOLDER_PATTERN.finditer(line)}
        list_keys = sorted(
            name for name in names
            if name in mapping and _is_list(mapping[name])
        )

        if len(list_keys) > 1:
            raise TemplateError(
                f"Line references more than one list placeholder ({', '.join(list_keys)}): "
                f"{line.rstrip()}",
                keys=list_keys,
            )

        if not list_keys:
            return [self._substitute(line, mapping, {})]

        key = list_keys[0]
        return [self._substitute(line, mapping, {key: item}) for item in mapping[key]]

    def _substitute(
        self,
        line: str,
        mapping: Mapping[str, Value],
        overrides: Dict[str, str],
    ) -> str:
        # Single pass: substituted text is never scanned again
        def replace(match):
            name = match.group(1)
            if name in overrides:
                return str(overrides[name])
            value = mapping.get(name)
            if value is None or _is_list(value):
                return match.group(0)
            return str(value)

        return self.PLACEHOLDER_PATTERN.sub(replace, line)


def split_lines(text: str) -> List[str]:
    """Split on \n only, keeping terminators; other control characters stay in their line."""
    return [line for line in re.split(r'(?<=\n)', text) if line]


def _is_list(value) -> bool:
    return isinstance(value, (list, tuple))


def render_template(template: str, mapping: Mapping[str, Value]) -> str:
    """Render a template with a default SpecRenderer."""
    return SpecRenderer().render(template, mapping)
