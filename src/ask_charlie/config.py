from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError


@dataclass
class AskCharlieConfig:
    # Record sources
    qna_csv_path: Optional[str] = None
    holidays_csv_path: Optional[str] = None
    leave_csv_path: Optional[str] = None

    # Routing
    min_query_length: int = 8

    # Fuzzy matching (scores are on a 0-100 scale)
    fuzzy_threshold: float = 70.0
    fuzzy_scorer: str = "partial_ratio"

    # Presentation
    holiday_date_format: str = "%Y-%m-%d"

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.min_query_length < 0:
            raise ConfigurationError(
                f"min_query_length must be non-negative, got {self.min_query_length}"
            )
        if not 0 <= self.fuzzy_threshold <= 100:
            raise ConfigurationError(
                f"fuzzy_threshold must be between 0 and 100, got {self.fuzzy_threshold}"
            )
