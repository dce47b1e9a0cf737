"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_WORK_START = time(9, 0)
ANALYTICS_DAYS = 7
IN_PROGRESS_LABEL = "In Progress"
