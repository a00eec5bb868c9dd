import re

from pydantic import BaseModel

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: str) -> str:
        """Fill `{{ name }}` placeholders in a single pass.

        Substituted values are never re-scanned, so braces inside chat text
        are left alone. Every declared input must be supplied, nothing else.
        """
        missing = set(self.inputs) - set(values)
        unknown = set(values) - set(self.inputs)
        if missing or unknown:
            raise KeyError(
                f"Prompt '{self.name}' v{self.version} expects inputs "
                f"{sorted(self.inputs)}, got {sorted(values)}"
            )

        def substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in values:
                raise KeyError(
                    f"Prompt '{self.name}' v{self.version} uses undeclared "
                    f"input '{key}'"
                )
            return values[key]

        return PLACEHOLDER.sub(substitute, self.template)
