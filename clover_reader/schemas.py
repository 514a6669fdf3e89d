from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Summary(BaseModel):
    """
    Monthly transaction totals.

    Aliases follow the upstream payload as delivered, including the truncated
    ``authorizedTransactionsTota`` key.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    settled_transactions_total: int = Field(default=0, ge=0, alias="settledTransactionsTotal")
    authorized_transactions_total: int = Field(
        default=0, ge=0, alias="authorizedTransactionsTota"
    )


class MonthlyEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # 1-based position inside a window; reassigned on every normalization
    index: int = Field(..., ge=1)
    # "MMM yy", e.g. "Jan 26"
    month: str
    summary: Summary = Field(default_factory=Summary)


class SummaryData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    clover_summary: List[MonthlyEntry] = Field(default_factory=list, alias="cloverSummary")


class SummaryDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: SummaryData = Field(default_factory=SummaryData)

    @classmethod
    def wrap(cls, entries: List[MonthlyEntry]) -> "SummaryDocument":
        return cls(data=SummaryData(clover_summary=list(entries)))

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class HealthCheckResponse(BaseModel):
    status: str = "ok"
    service: str = "clover-reader"
    env: str
