"""
Calculator configuration settings
"""
import os

APP_NAME = "Calculator"

# Display / formatting
SIGNIFICANT_DIGITS = 10
INTEGER_TOLERANCE = 1e-9

# Sentinel display strings
ERROR_TEXT = "Error"
DIV_BY_ZERO_TEXT = "Error: Div by 0"

# History
HISTORY_CAPACITY = 10

# Logging
LOG_LEVEL = os.environ.get("CALC_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
