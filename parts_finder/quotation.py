from __future__ import annotations

from dataclasses import dataclass
import re

from .catalog_parser import PartRecord


CURRENCY_SYMBOL = "₹"
NUMBER_PATTERN = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


@dataclass
class QuotationLine:
    part: PartRecord
    quantity: int = 1

    @property
    def item_no(self) -> str:
        return self.part.item_no


@dataclass(frozen=True)
class QuotationTotals:
    subtotal: float
    discount_amount: float
    total: float


class QuotationLedger:
    """Parts picked for a quote, each added once, plus one discount for the whole quote."""

    def __init__(self) -> None:
        self._lines: dict[str, QuotationLine] = {}
        self.discount_pct = 0.0

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(list(self._lines.values()))

    def lines(self) -> list[QuotationLine]:
        return list(self._lines.values())

    def contains(self, item_no: str) -> bool:
        return item_no in self._lines

    def get(self, item_no: str) -> QuotationLine | None:
        return self._lines.get(item_no)

    def add(self, part: PartRecord) -> None:
        if part.item_no in self._lines:
            return
        self._lines[part.item_no] = QuotationLine(part=part, quantity=1)

    def remove(self, item_no: str) -> None:
        self._lines.pop(item_no, None)

    def set_quantity(self, item_no: str, quantity: int) -> None:
        line = self._lines.get(item_no)
        if line is None:
            return
        quantity = max(0, int(quantity))
        if quantity == 0:
            self.remove(item_no)
            return
        line.quantity = quantity

    def clear(self) -> None:
        self._lines.clear()
        self.discount_pct = 0.0

    def set_discount(self, pct: float) -> None:
        self.discount_pct = min(100.0, max(0.0, float(pct)))

    def line_total(self, line: QuotationLine) -> float:
        return parse_currency(line.part.mrp) * line.quantity

    def totals(self) -> QuotationTotals:
        subtotal = sum(self.line_total(line) for line in self._lines.values())
        discount_amount = subtotal * self.discount_pct / 100.0
        return QuotationTotals(
            subtotal=subtotal,
            discount_amount=discount_amount,
            total=subtotal - discount_amount,
        )


def parse_currency(value: object) -> float:
    # Reads the leading number the way a browser parseFloat would: "1.2.3" -> 1.2
    cleaned = re.sub(r"[^0-9.\-]", "", str(value if value is not None else ""))
    match = NUMBER_PATTERN.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(0))


def format_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    return f"{sign}{CURRENCY_SYMBOL}{whole}.{fraction}"
