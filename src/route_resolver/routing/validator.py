"""Template validation for route compilation."""

from .exceptions import MalformedTemplateError
from .patterns import SENTINEL
from .placeholders import PLACEHOLDER


class TemplateValidator:
    """Rejects templates whose tokens cannot be compiled unambiguously"""

    @staticmethod
    def validate_template(template: str) -> str:
        """Validate placeholder tokens of a raw template.

        Args:
            template: Raw route template

        Returns:
            The template unchanged

        Raises:
            MalformedTemplateError: If a ``${`` is never closed or is empty
        """
        # Blank out well-formed placeholders, keeping positions intact
        remainder = PLACEHOLDER.sub(lambda m: " " * len(m.group(0)), template)
        position = remainder.find("${")
        if position != -1:
            raise MalformedTemplateError(
                template, position, "unclosed or empty placeholder"
            )
        return template

    @staticmethod
    def validate_resolved_path(path: str) -> str:
        """Validate path variables and reserved characters of a resolved path.

        Args:
            path: Route path with placeholders substituted

        Returns:
            The path unchanged

        Raises:
            MalformedTemplateError: If braces are unbalanced, nested or
                empty, or the path contains the reserved ``"`` character
        """
        opened_at: int | None = None

        for position, char in enumerate(path):
            if char == SENTINEL:
                raise MalformedTemplateError(
                    path, position, 'the \'"\' character is not allowed'
                )
            if char == "{":
                if opened_at is not None:
                    raise MalformedTemplateError(
                        path, position, "nested path variable"
                    )
                opened_at = position
            elif char == "}":
                if opened_at is None:
                    raise MalformedTemplateError(
                        path, position, "'}' without matching '{'"
                    )
                if position == opened_at + 1:
                    raise MalformedTemplateError(
                        path, opened_at, "empty path variable"
                    )
                opened_at = None

        if opened_at is not None:
            raise MalformedTemplateError(path, opened_at, "unclosed path variable")

        return path
