"""
Store Context Rules

Ordered rules that recover store metadata (name, address, phone) from the
lines rendered above a price line. Each visited line is offered to the rules
in order and the first rule that matches handles it, so a line contributes
to at most one field.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from ..common.constants import (
    BOX_TOKEN,
    LOOKBACK_WINDOW,
    MAX_STORE_NAME_LENGTH,
    SECTION_HEADER_PREFIX,
)

DIGIT_RUN = re.compile(r'\d{4,}')

# Two-letter state code closing the line: "Centro - RJ", "Niterói/RJ", "Centro / RJ"
STATE_SUFFIX = re.compile(r'(?:/\s*|\s)[A-Z]{2}$')


class ScanAction(Enum):
    CONTINUE = "continue"
    STOP = "stop"


@dataclass
class StoreContext:
    """Store fields collected while scanning backward from a price line."""
    name: str = ""
    address: str = ""
    phone: str = ""

    def resolved_name(self) -> str:
        """Store name, falling back to the address text before the first '-'."""
        if self.name:
            return self.name
        return self.address.split('-')[0].strip()


@dataclass(frozen=True)
class StoreRule:
    name: str
    matches: Callable[[str, StoreContext], bool]
    apply: Callable[[str, StoreContext], ScanAction]


def is_section_header(line: str, context: StoreContext) -> bool:
    return line.startswith(SECTION_HEADER_PREFIX)


def is_box_token(line: str, context: StoreContext) -> bool:
    return line == BOX_TOKEN


def is_phone_line(line: str, context: StoreContext) -> bool:
    return (
        not context.phone
        and '(' in line
        and ')' in line
        and DIGIT_RUN.search(line) is not None
    )


def is_address_line(line: str, context: StoreContext) -> bool:
    return (
        not context.address
        and ' - ' in line
        and STATE_SUFFIX.search(line) is not None
    )


def is_store_name_line(line: str, context: StoreContext) -> bool:
    # Names are only trusted once the address below them is confirmed
    return bool(context.address) and not context.name and len(line) < MAX_STORE_NAME_LENGTH


def _stop(line: str, context: StoreContext) -> ScanAction:
    return ScanAction.STOP


def _skip(line: str, context: StoreContext) -> ScanAction:
    return ScanAction.CONTINUE


def _setter(field_name: str) -> Callable[[str, StoreContext], ScanAction]:
    def apply(line: str, context: StoreContext) -> ScanAction:
        setattr(context, field_name, line)
        return ScanAction.CONTINUE
    return apply


STORE_RULES: List[StoreRule] = [
    StoreRule("section_header", is_section_header, _stop),
    StoreRule("box_token", is_box_token, _skip),
    StoreRule("phone", is_phone_line, _setter("phone")),
    StoreRule("address", is_address_line, _setter("address")),
    StoreRule("store_name", is_store_name_line, _setter("name")),
]


def collect_store_context(
    lines: List[str],
    price_index: int,
    lookback: int = LOOKBACK_WINDOW,
    rules: Optional[List[StoreRule]] = None,
) -> Optional[StoreContext]:
    """
    Scan backward from a price line and collect store metadata.

    Visits lines price_index-1 down to max(0, price_index-lookback).

    Args:
        lines: Trimmed, non-empty page lines
        price_index: Index of the price line in lines
        lookback: Maximum number of lines to inspect above the price line
        rules: Rules to apply (default: STORE_RULES)

    Returns:
        StoreContext, or None when no address was found
    """
    rules = STORE_RULES if rules is None else rules
    context = StoreContext()
    start = max(0, price_index - lookback)

    for index in range(price_index - 1, start - 1, -1):
        line = lines[index]
        action = ScanAction.CONTINUE
        for rule in rules:
            if rule.matches(line, context):
                action = rule.apply(line, context)
                break
        if action is ScanAction.STOP:
            break

    if not context.address:
        return None

    return context
