"""Classifier: bind a string to separator settings and query its shape.

ConvertString evaluates the pattern catalog at most once per instance and
answers shape questions (numeric? integer? float?) from the cached match.
Typed conversion is delegated to the parser using the cached shape.

Example:
    >>> num = ConvertString("1,000.2", Culture.ENGLISH)
    >>> num.is_numeric(), num.is_float(), num.is_integer()
    (True, True, False)
    >>> num.current_pattern().tag
    <ShapeTag.THOUSAND_DECIMAL: 'thousand_decimal'>
    >>> num.to_number(float)
    (1000.2, ())

    >>> ConvertString("NotANumber").is_numeric()
    False

Python 3.13+.
"""

from numstring.core.settings import NumberCultureSettings, SettingsSource, resolve_settings
from numstring.diagnostics import (
    ConversionError,
    ErrorTemplate,
    NoMatchError,
    NotNumericError,
)
from numstring.enums import ShapeTag

from .parser import parse
from .patterns import ParsingPattern, classify
from .targets import NumberValue, TargetSpec, resolve_target

__all__ = ["ConvertString"]

_UNSET = object()


class ConvertString:
    """A candidate numeric string together with its separator settings.

    Instances are owned by their caller and never shared; the only state
    change after construction is memoizing the first classification.

    Args:
        value: String to classify. Non-string values are never numeric.
        culture: Culture, culture code, explicit NumberCultureSettings, or
            None for the default culture (English)

    Raises:
        CultureNotFoundError: If a culture code names no built-in culture
    """

    __slots__ = ("_pattern", "_settings", "_value")

    def __init__(self, value: str, culture: SettingsSource = None) -> None:
        self._value = value
        self._settings = resolve_settings(culture)
        self._pattern: ParsingPattern | None | object = _UNSET

    def __repr__(self) -> str:
        return f"ConvertString({self._value!r}, {self._settings!r})"

    @property
    def value(self) -> str:
        """The string being classified."""
        return self._value

    @property
    def settings(self) -> NumberCultureSettings:
        """Separator conventions used for classification."""
        return self._settings

    def _match(self) -> ParsingPattern | None:
        if self._pattern is _UNSET:
            self._pattern = (
                classify(self._value, self._settings) if isinstance(self._value, str) else None
            )
        return self._pattern  # type: ignore[return-value]

    @property
    def shape(self) -> ShapeTag | None:
        """Matched shape tag, or None if the string is not numeric."""
        pattern = self._match()
        return None if pattern is None else pattern.tag

    def is_numeric(self) -> bool:
        """True if some catalog rule matched."""
        return self._match() is not None

    def is_integer(self) -> bool:
        """True if the string has an integer shape."""
        shape = self.shape
        return shape is not None and shape.is_integer

    def is_float(self) -> bool:
        """True if the string has a decimal shape."""
        shape = self.shape
        return shape is not None and shape.is_float

    def current_pattern(self) -> ParsingPattern:
        """Return the catalog rule that matched.

        Raises:
            NoMatchError: If the string is not numeric
        """
        pattern = self._match()
        if pattern is None:
            raise NoMatchError(
                ErrorTemplate.no_pattern_match(str(self._value)),
                input_value=str(self._value),
            )
        return pattern

    def to_number(
        self, target: TargetSpec = float
    ) -> tuple[NumberValue | None, tuple[ConversionError, ...]]:
        """Convert the string to ``target`` using the cached shape.

        Args:
            target: NumericType, or one of int, float, Decimal

        Returns:
            Tuple of (result, errors):
            - result: Parsed value, or None if conversion failed
            - errors: NotNumericError if classification failed,
              UnableToConvertStringToNumber if the target cannot hold the
              value, empty tuple on success

        Raises:
            TypeError: If target is not a supported numeric type
        """
        numeric_type = resolve_target(target)
        pattern = self._match()
        if pattern is None:
            text = str(self._value)
            diagnostic = ErrorTemplate.not_numeric(
                text, self._settings.thousand_separator, self._settings.decimal_separator
            )
            error = NotNumericError(diagnostic, input_value=text, target=numeric_type.name)
            return (None, (error,))
        return parse(self._value, pattern.tag, self._settings, numeric_type)
