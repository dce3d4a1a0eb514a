from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    engine_api_key: str | None = None
    log_level: str = "INFO"

    # Fallback goals when the caller sends none
    default_goal_calories: float = 2000.0
    default_goal_protein: float = 150.0
    default_goal_carbs: float = 200.0
    default_goal_fat: float = 70.0

    # Trend classification: relative change (%) between series halves
    trend_threshold_pct: float = 5.0

    # Windows (days)
    streak_window_days: int = 7
    habit_window_days: int = 30
    momentum_window_days: int = 14

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
