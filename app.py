#!/usr/bin/env python3
"""
Flask REST API entry point for Ask Charlie.

Uses environment variables (or a local .env file) for configuration.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from ask_charlie.app import AskCharlieApp
from ask_charlie.config_loader import load_config_from_env
from ask_charlie.web import create_app

# Load environment variables
load_dotenv()

# Setup logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


def _initialize_from_env() -> Optional[AskCharlieApp]:
    """Initialize the app from environment variables."""
    try:
        charlie_app = AskCharlieApp(load_config_from_env(dotenv=False))
        charlie_app.initialize()
        logger.info("Ask Charlie initialized successfully from environment variables")
        return charlie_app
    except Exception as e:
        logger.error(f"Failed to initialize Ask Charlie: {str(e)}", exc_info=True)
        return None


app = create_app(_initialize_from_env())


if __name__ == "__main__":
    port = int(os.getenv("PORT", 3978))
    app.run(host="0.0.0.0", port=port, debug=False)
