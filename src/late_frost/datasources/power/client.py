"""NASA POWER API client constants.

API docs: https://power.larc.nasa.gov/docs/services/api/temporal/daily/
"""

POWER_DAILY_POINT_API = "https://power.larc.nasa.gov/api/temporal/daily/point"

# Agroclimatology community: temperatures in Celsius at 2 m
COMMUNITY = "AG"

# Default variables mapped to (tmax, tmin)
DEFAULT_PARS = ("T2M_MAX", "T2M_MIN")

# Value POWER reports for days it has no data for
FILL_VALUE = -999.0

DATE_FORMAT = "%Y%m%d"
