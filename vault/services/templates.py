# vault/services/templates.py
import re
from typing import Dict, List, Mapping


class TemplateEngine:
    """
    Find and fill `{{ name }}` placeholders in note content.

    Names are ASCII word characters and dots; whitespace inside the braces
    is ignored. Unknown placeholders are left exactly as written.
    """

    _PLACEHOLDER = re.compile(r"\{\{(\s*[\w.]+\s*)\}\}", re.ASCII)

    def find_variables(self, content: str) -> List[str]:
        # dict keeps first-occurrence order while dropping duplicates
        seen: Dict[str, None] = {}
        for m in self._PLACEHOLDER.finditer(content):
            seen.setdefault(m.group(1).strip(), None)
        return list(seen)

    def substitute(self, content: str, variables: Mapping[str, str] | None) -> str:
        if not variables:
            return content

        def _replace(m: re.Match) -> str:
            name = m.group(1).strip()
            if name in variables:
                return str(variables[name])
            return m.group(0)

        # Function replacement: values are inserted literally
        return self._PLACEHOLDER.sub(_replace, content)
