"""Ledger application service — schema <-> domain orchestration. Stateless."""

from src.sl_ledger.application.schemas import (
    AdjustmentIn,
    BalanceRequest,
    BalanceResponse,
    CreditIn,
    CreditTransferRequest,
    CreditTransferResponse,
    GroupSummaryRequest,
    GroupSummaryResponse,
    PaymentCorrectionRequest,
    PaymentImpactRequest,
    PaymentImpactResponse,
    PaymentStatsRequest,
    PaymentStatsResponse,
    SettlementSuggestionResponse,
    TrendPointOut,
    to_domain_transactions,
)
from src.sl_ledger.domain.balance import compute_balance, compute_group_summary, group_by_status
from src.sl_ledger.domain.models import Balance
from src.sl_ledger.domain.payment import (
    apply_payment,
    correct_payment,
    suggest_settlement_amounts,
    transfer_credit,
)
from src.sl_ledger.domain.stats import compute_payment_stats
from src.sl_ledger.domain.trend import compute_trend


def _balance_of(body: BalanceRequest) -> Balance:
    return compute_balance(to_domain_transactions(body.transactions), body.participant_id)


class LedgerApplicationService:
    def get_balance(self, body: BalanceRequest) -> BalanceResponse:
        return BalanceResponse.from_domain(_balance_of(body))

    def get_group_summary(self, body: GroupSummaryRequest) -> GroupSummaryResponse:
        balances = [_balance_of(p) for p in body.participants]
        return GroupSummaryResponse.from_domain(
            compute_group_summary(balances), group_by_status(balances)
        )

    def get_payment_impact(self, body: PaymentImpactRequest) -> PaymentImpactResponse:
        return PaymentImpactResponse.from_domain(apply_payment(_balance_of(body), body.payment))

    def get_suggestions(self, body: BalanceRequest) -> SettlementSuggestionResponse:
        return SettlementSuggestionResponse.from_domain(
            suggest_settlement_amounts(_balance_of(body))
        )

    def get_trend(self, body: BalanceRequest) -> list[TrendPointOut]:
        points = compute_trend(to_domain_transactions(body.transactions))
        return [TrendPointOut.from_domain(p) for p in points]

    def get_payment_stats(self, body: PaymentStatsRequest) -> PaymentStatsResponse:
        stats = compute_payment_stats(
            to_domain_transactions(body.transactions), body.from_date, body.to_date
        )
        return PaymentStatsResponse.from_domain(stats)

    def correct_payment(self, body: PaymentCorrectionRequest) -> AdjustmentIn:
        adjustment = correct_payment(
            body.original.to_domain(), body.corrected_amount, body.correction_date, body.reason
        )
        return AdjustmentIn.from_domain(adjustment)

    def transfer_credit(self, body: CreditTransferRequest) -> CreditTransferResponse:
        outgoing, incoming = transfer_credit(
            _balance_of(body.source), body.amount, body.transfer_date, body.target_id
        )
        return CreditTransferResponse(
            source_adjustment=AdjustmentIn.from_domain(outgoing),
            target_credit=CreditIn.from_domain(incoming),
        )
