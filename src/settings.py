"""Static settings for tertestrial.

The rule table lives in a JSON file in the project directory. Paths can be
overridden through the environment or a .env file for setups where the
editor plugin writes to a different pipe.
"""

import os

from dotenv import load_dotenv

from adapters.config_file import CONFIG_NAME
from adapters.fifo import PIPE_NAME

load_dotenv()

# Everything lives in the directory tertestrial is started from.
PROJECT_ROOT = os.getcwd()

# The rule table (actions) and optional logging section.
CONFIG_PATH = os.path.join(PROJECT_ROOT, os.getenv("TERTESTRIAL_CONFIG", CONFIG_NAME))

# The FIFO editor plugins write triggers into.
PIPE_PATH = os.path.join(PROJECT_ROOT, os.getenv("TERTESTRIAL_PIPE", PIPE_NAME))

# Overrides the configured log level and forces logging on when set.
LOG_LEVEL = os.getenv("TERTESTRIAL_LOG_LEVEL")
