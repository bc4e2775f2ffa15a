import logging

#Display
#every vector and quaternion renders its fields with this many decimals
DISPLAY_DECIMALS = 2

#Logging
#module loggers hang off this name, e.g. "hamilton.quaternion"
LOGGER_NAME = "hamilton"
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

#Comparison
#equality on the value types is exact, these are the defaults for the approximate helpers
DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-9

#Numpy interop
DEFAULT_DTYPE = float
