"""Simple entrypoint to run a sample outfit suggestion locally."""

from datetime import date

from models.clothing_item import ClothingItem
from models.outfit import WeatherContext
from tools.weather_provider import StaticWeatherProvider
from wardrobe_app.config import PlannerConfig
from wardrobe_app.logging_config import configure_logging
from wardrobe_app.planner import WardrobePlanner


def main() -> None:
    config = PlannerConfig.from_env()
    configure_logging(config.log_level)
    planner = WardrobePlanner(
        config=config,
        weather_provider=StaticWeatherProvider(WeatherContext(temperature=22, condition="clear sky")),
    )
    inventory = [
        ClothingItem(item_id="1", category="T-Shirts", color="Black"),
        ClothingItem(item_id="2", category="Jeans", color="Blue"),
        ClothingItem(item_id="3", category="Sneakers", color="White"),
    ]
    selection = planner.suggest_outfit(inventory, date.today())
    print(f"{selection.item_ids} harmony={selection.harmony_score}%")


if __name__ == "__main__":
    main()
