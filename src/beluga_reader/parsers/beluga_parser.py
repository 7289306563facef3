"""beluga.json parser implementation."""

from pydantic import ValidationError

from beluga_reader.exceptions import DecodeError
from beluga_reader.models.document import Document


class BelugaParser:
    """Parser for beluga.json feed bodies.

    Validates the JSON body straight into the frozen Document model.
    Unknown fields are ignored; a missing required field, a wrong type or
    an unparseable date is a decode failure.
    """

    def parse(self, raw_content: bytes | str, source: str) -> Document:
        """Decode a beluga.json body.

        Args:
            raw_content: Raw JSON body.
            source: Source label for error messages.

        Returns:
            Parsed Document.

        Raises:
            DecodeError: When the body is not JSON or does not match the
                document shape.
        """
        try:
            return Document.model_validate_json(raw_content)
        except ValidationError as e:
            raise DecodeError(source, self._describe(e)) from e

    def _describe(self, error: ValidationError) -> str:
        """Summarise a validation error as one line.

        Example: posts.0.id: Field required; posts.1.date_published: ...
        """
        parts = []
        for item in error.errors(include_url=False):
            location = ".".join(str(p) for p in item["loc"]) or "body"
            parts.append(f"{location}: {item['msg']}")
        return "; ".join(parts)
