"""
Convert monetary amounts to Thai words ("Bahttext").

THIS IS WHAT GETS PRINTED ON INVOICES AND RECEIPTS.

The amount-in-words line is the legally meaningful rendering of a total, so
the converter is plain code with fixed tables and no third-party magic.

Examples:
    1234.56  → "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์"
    21       → "ยี่สิบเอ็ดบาทถ้วน"
    0.25     → "ยี่สิบห้าสตางค์"
    -100     → "ลบหนึ่งร้อยบาทถ้วน"
    1000001  → "หนึ่งล้านเอ็ดบาทถ้วน"
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from .exceptions import AmountOutOfRangeError, InvalidAmountError, NonFiniteAmountError

# ─── Word Lookup Tables ──────────────────────────────────────────────

DIGIT_WORDS: tuple[str, ...] = (
    "",  # Zero is never spoken inside a multi-digit number
    "หนึ่ง",
    "สอง",
    "สาม",
    "สี่",
    "ห้า",
    "หก",
    "เจ็ด",
    "แปด",
    "เก้า",
)

PLACE_WORDS: tuple[str, ...] = (
    "",  # units
    "สิบ",
    "ร้อย",
    "พัน",
    "หมื่น",
    "แสน",
    "ล้าน",
)

MILLION_WORD = PLACE_WORDS[6]
TEN_WORD = PLACE_WORDS[1]
TWENTY_PREFIX = "ยี่"
TERMINAL_ONE_WORD = "เอ็ด"

BAHT_WORD = "บาท"
SATANG_WORD = "สตางค์"
EXACT_WORD = "ถ้วน"
NEGATIVE_WORD = "ลบ"
ZERO_TEXT = "ศูนย์บาทถ้วน"

MAX_AMOUNT_DIGITS = 1000  # Whole-Baht digits; 10**1000 and up are rejected

_MILLION = 1_000_000
_CENTS = Decimal("0.01")
_GROUPED_AMOUNT = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")


# ─── Amount Coercion ─────────────────────────────────────────────────


def _to_satang(amount: int | float | Decimal | str) -> int:
    """Coerce an amount to a signed whole number of satang, rounded half-up.

    Floats go through ``str()`` first so the shortest repr is used:
    ``1.005`` becomes ``Decimal("1.005")``, not ``1.00499999...``.
    Strings may group thousands with commas ("1,234.56"), but only in
    groups of three.

    Raises:
        InvalidAmountError: bools, None, or anything that isn't a number.
        NonFiniteAmountError: NaN or ±Infinity.
        AmountOutOfRangeError: more than MAX_AMOUNT_DIGITS whole-Baht digits.
    """
    if isinstance(amount, bool) or amount is None:
        raise InvalidAmountError(f"Amount must be a number, got {amount!r}")

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, (float, str)):
        text = str(amount).strip()
        if "," in text:
            if not _GROUPED_AMOUNT.match(text):
                raise InvalidAmountError(f"Misplaced thousands separator in {amount!r}")
            text = text.replace(",", "")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(f"Amount is not a number: {amount!r}") from None
    else:
        raise InvalidAmountError(
            f"Unsupported amount type {type(amount).__name__}",
            details={"value": repr(amount)},
        )

    if not value.is_finite():
        raise NonFiniteAmountError(f"Amount must be finite, got {amount!r}")

    if not value or value.adjusted() < -3:  # below 0.001 rounds to zero satang
        return 0
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise AmountOutOfRangeError(
            f"Amount has more than {MAX_AMOUNT_DIGITS} digits before the decimal point",
            details={"max_digits": MAX_AMOUNT_DIGITS, "digits": value.adjusted() + 1},
        )

    # Wide enough that quantize never runs out of digits for the largest amount
    context = Context(prec=MAX_AMOUNT_DIGITS + 4, rounding=ROUND_HALF_UP)
    return int(value.quantize(_CENTS, context=context).scaleb(2, context))


# ─── Integer Converter ───────────────────────────────────────────────


def _group_to_words(group: int, has_prefix: bool) -> str:
    """Read one six-digit group (0..999,999).

    ``has_prefix`` is True when a higher million group has already been
    read, so a trailing 1 is still a terminal one even if the group is "1".
    """
    digits = str(group)
    length = len(digits)
    words: list[str] = []

    for offset, char in enumerate(digits):
        digit = int(char)
        position = length - offset  # 1 = units, 2 = tens, ...

        if digit == 0:
            continue
        if position == 2 and digit == 1:
            words.append(TEN_WORD)
        elif position == 2 and digit == 2:
            words.append(TWENTY_PREFIX + TEN_WORD)
        elif position == 1 and digit == 1 and (length > 1 or has_prefix):
            words.append(TERMINAL_ONE_WORD)
        else:
            words.append(DIGIT_WORDS[digit] + PLACE_WORDS[position - 1])

    return "".join(words)


def convert_integer_to_thai_words(number: int) -> str:
    """Convert a non-negative integer to Thai numeral words (no currency).

    Returns an empty string for 0; callers only ask for positive parts.

    Algorithm:
        Split the number into six-digit groups, most significant first.
        Each group is read digit by digit, and every group except the last
        is followed by "ล้าน". This is the iterative form of
        ``words(n // 1e6) + "ล้าน" + words(n % 1e6)``, so 10^12 reads
        "หนึ่งล้านล้าน".

    Raises:
        ValueError: If ``number`` is negative or not an integer.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"Expected a non-negative integer, got {number!r}")
    if number < 0:
        raise ValueError(f"Expected a non-negative integer, got {number}")
    if number == 0:
        return ""

    groups: list[int] = []
    while number:
        number, group = divmod(number, _MILLION)
        groups.append(group)

    words: list[str] = []
    for index in range(len(groups) - 1, -1, -1):
        group = groups[index]
        if group:
            words.append(_group_to_words(group, has_prefix=bool(words)))
        if index > 0:
            words.append(MILLION_WORD)

    return "".join(words)


# ─── Monetary Converter ──────────────────────────────────────────────


def convert_amount_to_thai_text(amount: int | float | Decimal | str) -> str:
    """Convert a monetary amount to its Thai Baht/Satang wording.

    Args:
        amount: e.g. 1234.56, Decimal("25145"), "-100"

    Returns:
        "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์"

    Raises:
        InvalidAmountError: If ``amount`` is not a number.
        NonFiniteAmountError: If ``amount`` is NaN or infinite.

    The amount is rounded half-up to two places before anything else, so
    1.999 reads as two Baht exactly and 1.005 as one Baht one Satang.
    """
    total_satang = _to_satang(amount)

    if total_satang == 0:
        return ZERO_TEXT

    if total_satang < 0:
        return NEGATIVE_WORD + _satang_to_text(-total_satang)

    return _satang_to_text(total_satang)


def _satang_to_text(total_satang: int) -> str:
    """Render a positive satang count as "...บาท...สตางค์" or "...บาทถ้วน"."""
    baht, satang = divmod(total_satang, 100)

    text = ""
    if baht > 0:
        text = convert_integer_to_thai_words(baht) + BAHT_WORD

    if satang > 0:
        text += convert_integer_to_thai_words(satang) + SATANG_WORD
    else:
        text += EXACT_WORD

    return text


def format_amount_in_parentheses(amount: int | float | Decimal | str) -> str:
    """Wrap the Bahttext in parentheses, as printed under document totals."""
    return f"({convert_amount_to_thai_text(amount)})"


# Spreadsheet-style names for the same functions
bahttext = convert_amount_to_thai_text
BATHTEXT = convert_amount_to_thai_text
baht_text_with_symbol = format_amount_in_parentheses
