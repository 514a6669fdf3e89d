import json
from typing import Sequence

from clover_reader.schemas import MonthlyEntry, SummaryDocument

RULE_WIDTH = 38


def totals(entries: Sequence[MonthlyEntry]) -> tuple[int, int]:
    settled = sum(e.summary.settled_transactions_total for e in entries)
    authorized = sum(e.summary.authorized_transactions_total for e in entries)
    return settled, authorized


def render_table(entries: Sequence[MonthlyEntry], months: int) -> str:
    total_settled, total_authorized = totals(entries)

    lines = [
        f"=== Clover Transaction Summary (last {months} months) ===",
        "",
        f"{'#':<4} {'Month':<8} {'Settled':>10} {'Authorized':>12}",
        "-" * RULE_WIDTH,
    ]
    for e in entries:
        lines.append(
            f"{e.index:<4} {e.month:<8} "
            f"{e.summary.settled_transactions_total:>10} "
            f"{e.summary.authorized_transactions_total:>12}"
        )
    lines += [
        "-" * RULE_WIDTH,
        f"{'TOTAL':<13} {total_settled:>10} {total_authorized:>12}",
        "",
        f"Grand Total Transactions: {total_settled + total_authorized}",
    ]
    return "\n".join(lines)


def render_json(entries: Sequence[MonthlyEntry]) -> str:
    payload = SummaryDocument.wrap(list(entries)).to_payload()
    return json.dumps(payload, ensure_ascii=False, indent=2)
