from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class ExchangeRates:
    USD: float
    ZAR: float

    @staticmethod
    def fallback() -> "ExchangeRates":
        return ExchangeRates(USD=1, ZAR=19.00)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
