"""standardized exit codes for nestify"""
import os

# 0 -- successful termination
OK = os.EX_OK

# 65 -- The event stream was incorrect in some way.
INVALID_EVENTS = os.EX_DATAERR

# 70 -- At least one test failed.
TESTS_FAILED = os.EX_SOFTWARE

# 78 -- Something was found in an unconfigured or misconfigured state.
CONFIG_ERROR = os.EX_CONFIG
