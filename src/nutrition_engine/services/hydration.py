"""Water intake status."""

from dataclasses import dataclass

from nutrition_engine.domain.hydration import (
    HYDRATION_BANDS,
    HydrationLevel,
    HydrationStatus,
)


@dataclass
class HydrationService:
    """Maps a day's glass count to a hydration level."""

    target_glasses: int = 8

    def status(self, glasses: int) -> HydrationStatus:
        """Return the hydration level and fill percentage for ``glasses``."""
        count = max(glasses, 0)
        level = HydrationLevel.HYDRATED
        for upper, band_level in HYDRATION_BANDS:
            if count <= upper:
                level = band_level
                break
        fill_pct = min(count / max(self.target_glasses, 1) * 100, 100.0)
        return HydrationStatus(
            glasses=count,
            target_glasses=self.target_glasses,
            level=level,
            fill_pct=fill_pct,
        )
