"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory
load_dotenv()


class Config:
    """Base configuration class with all settings."""

    # Persistence Settings
    DATA_PATH = os.getenv('WORDLE_CLI_DATA')

    # Logging Settings
    LOG_ENABLED = os.getenv('WORDLE_CLI_LOG', 'False').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

