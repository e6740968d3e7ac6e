# ABOUTME: Windsurf gear recommendations from rider weight and wind speed
# ABOUTME: Sail area, board width and fin size, clamped to typical equipment ranges

from dataclasses import dataclass

from windtracker.conversions import clamp, round_half_up

REFERENCE_WEIGHT_KG = 75.0
SAIL_STEP_M2 = 0.2

# Weights shown in the gear table
TABLE_WEIGHTS_KG = (55, 65, 75, 85, 95, 105)


@dataclass(frozen=True)
class GearRecommendation:
    """Recommended setup for one rider at one wind speed"""
    sail_m2: float
    board_width_cm: int
    fin_cm: int

    def describe(self) -> str:
        return f"{self.sail_m2:.1f} m² sail, {self.board_width_cm} cm board, {self.fin_cm} cm fin"


def _round_to_step(value: float, step: float) -> float:
    return round_half_up(value / step) * step


def recommend_gear(weight_kg: float, wind_ms: float) -> GearRecommendation:
    """
    Recommend sail, board and fin sizes.

    Heavier riders and stronger wind both push toward smaller gear. Any
    finite input is accepted; extremes saturate at the range bounds.

    Args:
        weight_kg: Rider weight in kilograms
        wind_ms: Wind speed in m/s

    Returns:
        GearRecommendation with sail rounded to 0.2 m², widths to whole cm
    """
    extra_weight = weight_kg - REFERENCE_WEIGHT_KG

    sail = clamp(12 - 0.45 * wind_ms - 0.012 * extra_weight, 4.0, 9.8)
    board_width = clamp(112 - 3.2 * wind_ms - 0.12 * extra_weight, 58, 100)
    fin = clamp(54 - 2.2 * wind_ms, 28, 52)

    return GearRecommendation(
        sail_m2=round(_round_to_step(sail, SAIL_STEP_M2), 1),
        board_width_cm=round_half_up(board_width),
        fin_cm=round_half_up(fin),
    )


def gear_table(
    wind_ms: float,
    weights: tuple[float, ...] = TABLE_WEIGHTS_KG,
) -> list[tuple[float, GearRecommendation]]:
    """Recommendations for a range of rider weights at one wind speed."""
    return [(weight, recommend_gear(weight, wind_ms)) for weight in weights]
