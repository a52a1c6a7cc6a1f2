"""Custom exceptions for route template compilation."""

from ..common.exceptions import TemplateError


class MalformedTemplateError(TemplateError):
    """Exception raised for templates with unbalanced or reserved tokens."""

    def __init__(self, template: str, position: int, reason: str) -> None:
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(
            f"Malformed route template '{template}' at position {position}: {reason}"
        )
