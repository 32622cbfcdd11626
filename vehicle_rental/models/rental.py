from dataclasses import dataclass


@dataclass(frozen=True)
class Receipt:
    """Itemised record printed after a successful rental."""
    vehicle: str
    days: int
    rate: float
    base: float
    extra_label: str
    extra: float
    total: float
    issued_at: str  # UTC ISO timestamp, display only

    @property
    def has_extra(self) -> bool:
        return self.extra > 0
