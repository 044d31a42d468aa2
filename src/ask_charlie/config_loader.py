"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import AskCharlieConfig
from .config_validator import get_optional_env, get_int_env, get_float_env, validate_path


def load_config_from_env(dotenv: bool = True) -> AskCharlieConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = AskCharlieApp(config)
        app.initialize()

    :param dotenv: Load a .env file first (local development)
    :return: Validated AskCharlieConfig instance
    :raises: ConfigurationError if values are malformed or paths are missing
    """
    if dotenv:
        load_dotenv()

    config = AskCharlieConfig(
        qna_csv_path=get_optional_env("ASK_CHARLIE_QNA_CSV"),
        holidays_csv_path=get_optional_env("ASK_CHARLIE_HOLIDAYS_CSV"),
        leave_csv_path=get_optional_env("ASK_CHARLIE_LEAVE_CSV"),
        min_query_length=get_int_env("ASK_CHARLIE_MIN_QUERY_LENGTH", 8),
        fuzzy_threshold=get_float_env("ASK_CHARLIE_FUZZY_THRESHOLD", 70.0),
        fuzzy_scorer=get_optional_env("ASK_CHARLIE_FUZZY_SCORER", default="partial_ratio"),
        holiday_date_format=get_optional_env("ASK_CHARLIE_DATE_FORMAT", default="%Y-%m-%d"),
        log_level=get_optional_env("LOG_LEVEL", default="INFO").upper(),
    )

    # Configured sources must exist; unset ones fall back to defaults
    for path, name in (
        (config.qna_csv_path, "ASK_CHARLIE_QNA_CSV"),
        (config.holidays_csv_path, "ASK_CHARLIE_HOLIDAYS_CSV"),
        (config.leave_csv_path, "ASK_CHARLIE_LEAVE_CSV"),
    ):
        if path:
            validate_path(path, name, must_exist=True)

    return config
