"""
Number Format — Форматирование и разбор чисел

Сервис, через который геометрические типы превращают числа в текст и обратно.
Формат-строки следуют стандартным числовым форматам (F, N, E, G, P, D, R):
буква + необязательная точность. Всё остальное передаётся в format() как
Python format spec.

Культура по умолчанию — инвариантная (INVARIANT): '.' как десятичный
разделитель, без разделителей групп в round-trip форме.

ГАРАНТИИ:
1. Формат по умолчанию (None, "", "G", "R") даёт кратчайшее представление,
   из которого parse_number восстанавливает то же самое float
2. parse_number принимает только десятичную запись (без nan/inf, без
   разделителей групп и подчёркиваний)
"""

import re
from dataclasses import dataclass
from typing import Final

from geometry_primitives.core.errors import GeometryFormatError


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NumberFormatConfig:
    """Конфигурация форматирования чисел (аналог провайдера культуры).

    Параметры символов и точности по умолчанию для стандартных форматов.
    """

    # Символы
    decimal_separator: str = "."
    group_separator: str = ","
    negative_sign: str = "-"
    percent_symbol: str = "%"
    percent_separator: str = " "

    # Точность по умолчанию, если в формат-строке не указана
    default_fixed_digits: int = 2
    default_exponent_digits: int = 6

    # Минимальное количество цифр экспоненты в формате E
    exponent_min_digits: int = 3


# Инвариантная культура
INVARIANT: Final[NumberFormatConfig] = NumberFormatConfig()


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Стандартный формат: одна буква + необязательная точность
_STANDARD_FORMAT: Final[re.Pattern[str]] = re.compile(r"^([A-Za-z])(\d*)$")

# Шаблонный формат из 0, # и разделителей ("0.00", "#,##0"): format() понимает его иначе
_PICTURE_FORMAT: Final[re.Pattern[str]] = re.compile(r"^[0#,]*\.[0#]+$|^[0#,]*#[0#,]*$")

# Десятичная запись числа (после замены разделителя на '.')
_DECIMAL_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$"
)

_EXPONENT: Final[re.Pattern[str]] = re.compile(r"([eE])([+-])(\d+)$")


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(
    value: float | int,
    fmt: str | None = None,
    config: NumberFormatConfig = INVARIANT,
) -> str:
    """
    Форматирование числа.

    Args:
        value: Число (float или int)
        fmt: Формат-строка (None/"" → кратчайшее round-trip представление)
        config: Конфигурация культуры (default: INVARIANT)

    Returns:
        Текстовое представление числа

    Raises:
        GeometryFormatError: Если формат-строка не поддерживается для value

    Переносимы только буквенные форматы (F, N, E, G, P, D, R) с точностью.
    Шаблонные форматы вида "0.00" или "#,##0" отклоняются; прочие строки
    передаются в format() как Python format spec.

    Examples:
        >>> format_number(90.0)
        '90'
        >>> format_number(6.283185307179586, "F2")
        '6.28'
        >>> format_number(1234.5, "N1")
        '1,234.5'
        >>> format_number(0.25, "P0")
        '25 %'
    """
    if not fmt:
        return _shortest(value, config)

    match = _STANDARD_FORMAT.match(fmt)
    if match is None:
        if _PICTURE_FORMAT.search(fmt):
            raise GeometryFormatError(fmt, "picture formats are not supported")
        return _python_format(value, fmt, config)

    letter, digits = match.group(1), match.group(2)
    precision = int(digits) if digits else None
    kind = letter.upper()

    # R игнорирует точность; G без точности (или G0) также даёт кратчайшую форму
    if kind == "R" or (kind == "G" and not precision):
        return _shortest(value, config)

    if kind == "G":
        # precision > 0: значащие цифры
        return _localize(f"{value:.{precision}{letter}}", config)

    if kind == "F":
        digits_count = _or_default(precision, config.default_fixed_digits)
        return _localize(f"{value:.{digits_count}f}", config)

    if kind == "N":
        digits_count = _or_default(precision, config.default_fixed_digits)
        return _localize(f"{value:,.{digits_count}f}", config)

    if kind == "E":
        digits_count = _or_default(precision, config.default_exponent_digits)
        text = _pad_exponent(f"{value:.{digits_count}{letter}}", config.exponent_min_digits)
        return _localize(text, config)

    if kind == "P":
        digits_count = _or_default(precision, config.default_fixed_digits)
        number = _localize(f"{value * 100:.{digits_count}f}", config)
        return number + config.percent_separator + config.percent_symbol

    if kind == "D":
        if not isinstance(value, int):
            raise GeometryFormatError(fmt, "format D requires an integer value")
        text = f"{abs(value):0{precision or 1}d}"
        return (config.negative_sign + text) if value < 0 else text

    return _python_format(value, fmt, config)


def _or_default(precision: int | None, default: int) -> int:
    return default if precision is None else precision


def _shortest(value: float | int, config: NumberFormatConfig) -> str:
    """Кратчайшее представление, восстанавливаемое без потерь."""
    if isinstance(value, int):
        return _localize(str(value), config)

    text = repr(float(value))
    if "e" in text:
        text = text.replace("e", "E")
    elif text.endswith(".0"):
        text = text[:-2]
    return _localize(text, config)


def _pad_exponent(text: str, min_digits: int) -> str:
    match = _EXPONENT.search(text)
    if match is None:
        return text
    letter, sign, digits = match.groups()
    return text[: match.start()] + letter + sign + digits.zfill(min_digits)


def _localize(text: str, config: NumberFormatConfig) -> str:
    """Замена инвариантных символов символами культуры (одновременно)."""
    if config == INVARIANT:
        return text
    table = str.maketrans(
        {
            ".": config.decimal_separator,
            ",": config.group_separator,
            "-": config.negative_sign,
        }
    )
    return text.translate(table)


def _python_format(value: float | int, fmt: str, config: NumberFormatConfig) -> str:
    try:
        return _localize(format(value, fmt), config)
    except ValueError as e:
        raise GeometryFormatError(fmt, f"unsupported numeric format: {e}") from e


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_number(text: str, config: NumberFormatConfig = INVARIANT) -> float:
    """
    Разбор десятичной записи числа.

    Args:
        text: Текст числа (пробелы по краям допускаются)
        config: Конфигурация культуры (default: INVARIANT)

    Returns:
        Разобранное float (может быть ±Inf при переполнении экспоненты;
        конечность проверяет потребитель)

    Raises:
        GeometryFormatError: Если текст не является десятичным числом

    Examples:
        >>> parse_number("-12.5")
        -12.5
        >>> parse_number("1E-05")
        1e-05
    """
    normalized = text
    if config.negative_sign != "-":
        normalized = normalized.replace(config.negative_sign, "-")
    if config.decimal_separator != ".":
        normalized = normalized.replace(config.decimal_separator, ".")

    if _DECIMAL_LITERAL.match(normalized) is None:
        raise GeometryFormatError(text, "not a decimal number")

    return float(normalized)
