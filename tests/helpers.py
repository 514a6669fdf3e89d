from clover_reader.schemas import MonthlyEntry, Summary


def entry(month: str, settled: int = 0, authorized: int = 0, index: int = 1) -> MonthlyEntry:
    return MonthlyEntry(
        index=index,
        month=month,
        summary=Summary(
            settled_transactions_total=settled,
            authorized_transactions_total=authorized,
        ),
    )


def labels(entries: list[MonthlyEntry]) -> list[str]:
    return [e.month for e in entries]


def settled(entries: list[MonthlyEntry]) -> list[int]:
    return [e.summary.settled_transactions_total for e in entries]


FEB_25_TO_FEB_26 = [
    "Feb 25", "Mar 25", "Apr 25", "May 25", "Jun 25", "Jul 25", "Aug 25",
    "Sep 25", "Oct 25", "Nov 25", "Dec 25", "Jan 26", "Feb 26",
]


def twelve_month_window(base: int = 100) -> list[MonthlyEntry]:
    """Feb 25 .. Feb 26 with settled = base + position."""
    return [
        entry(label, settled=base + i, authorized=i, index=i)
        for i, label in enumerate(FEB_25_TO_FEB_26, start=1)
    ]
