import re

from fpvsetup.domain.validators import ValidationError, validate_number


class InputParser:
    """
    Parses text typed into numeric input fields.
    An empty field means "not entered yet" and parses to None.
    """

    def __init__(self) -> None:
        self.aspect_separators = re.compile(r"\s*[:/x×]\s*", re.IGNORECASE)
        # "1,000" reads as a thousands separator, not as 1.0
        self.grouped_thousands = re.compile(r",\d{3}(?!\d)")

    def parse_float(self, text: str, name: str = "value") -> float | None:
        """Converts a string which is either empty or a number into a float."""
        text = text.strip()
        if not text:
            return None

        # Accept a single decimal comma, e.g. "0,75"
        normalized = text
        if "," in text:
            if text.count(",") > 1 or "." in text or self.grouped_thousands.search(text):
                raise ValidationError(
                    f"{name} must use at most one decimal comma and no "
                    f"thousands separators, got '{text}'"
                )
            normalized = text.replace(",", ".")

        try:
            value = float(normalized)
        except ValueError:
            raise ValidationError(f"{name} must be a number, got '{text}'") from None

        validate_number(value, name)
        return value

    def parse_aspect(self, text: str, name: str = "aspect") -> float | None:
        """
        Parses an aspect ratio given as "16:9", "16/9", "16x9" or a plain number.
        Returns width divided by height.
        """
        text = text.strip()
        if not text:
            return None

        parts = self.aspect_separators.split(text)
        if len(parts) == 1:
            return self.parse_float(parts[0], name)
        if len(parts) != 2 or not all(parts):
            raise ValidationError(f"Invalid {name} '{text}'. Expected N:D, e.g. 16:9")

        numerator = self.parse_float(parts[0], f"{name} numerator")
        denominator = self.parse_float(parts[1], f"{name} denominator")
        if denominator == 0:
            raise ValidationError(f"{name} denominator must not be zero")
        return numerator / denominator


_default_parser = InputParser()


def float_from_restricted_string(text: str) -> float | None:
    """Module-level shortcut for InputParser().parse_float."""
    return _default_parser.parse_float(text)


def parse_aspect(text: str) -> float | None:
    """Module-level shortcut for InputParser().parse_aspect."""
    return _default_parser.parse_aspect(text)
