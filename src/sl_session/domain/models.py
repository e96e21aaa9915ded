"""Session cost domain models — frozen dataclasses, no framework dependency."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.sl_common.enums import CourtType
from src.sl_common.money import ZERO, Money


@dataclass(frozen=True)
class UsageComponent:
    """Metered cost line: rate x quantity (court hours, shuttlecocks used)."""

    label: str
    rate: Money
    quantity: Decimal | int

    @property
    def cost(self) -> Money:
        return self.rate.multiply(self.quantity)


@dataclass(frozen=True)
class FlatCost:
    """Fixed cost line taken as-is (other costs, preset court fee)."""

    label: str
    amount: Money

    @property
    def cost(self) -> Money:
        return self.amount


@dataclass(frozen=True)
class ComponentCost:
    label: str
    amount: Money
    rate: Money | None = None  # None for flat lines
    quantity: Decimal | int | None = None


@dataclass(frozen=True)
class RateCard:
    """Rates in force when a session was completed. Frozen into the result."""

    court_type: CourtType
    court_rate_per_hour: Money
    shuttlecock_rate_each: Money
    effective_from: datetime
    is_peak: bool = False


@dataclass(frozen=True)
class SessionUsage:
    hours_played: Decimal
    shuttlecocks_used: int
    other_costs: Money = ZERO


@dataclass(frozen=True)
class SessionCostResult:
    components: tuple[ComponentCost, ...]
    total_cost: Money
    participant_count: int
    cost_per_participant: Money  # exact, never pre-rounded
    rate_card: RateCard | None = None

    def component(self, label: str) -> ComponentCost | None:
        for line in self.components:
            if line.label == label:
                return line
        return None

    def display_share(self, places: int = 2) -> Money:
        """Share rounded for display only; the ledger keeps cost_per_participant."""
        return self.cost_per_participant.round_to(places)

    def rounding_residual(self, places: int = 2) -> Money:
        """total_cost minus what participant_count rounded shares would add up to."""
        return self.total_cost.subtract(self.display_share(places).multiply(self.participant_count))
