from app.models.station import RevenueData, StationData

# Solbesparing är hårdkodad tills det finns en riktig solcellsintegration
SAVINGS_SOLAR = 10.50


def calc_total_profit(station: StationData) -> float:
    """Intäkt − energikostnad + AI-besparing. grid_load påverkar inte vinsten."""
    return station.revenue_today - station.energy_cost_today + station.cost_savings_ai


def calc_revenue(station: StationData) -> RevenueData:
    return RevenueData(
        **station.model_dump(),
        total_profit=f"{calc_total_profit(station):.2f}",
        savings_solar=f"{SAVINGS_SOLAR:.2f}",
    )
