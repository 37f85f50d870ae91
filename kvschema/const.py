"""
Application constants and format metadata.
"""

# Application info
APP_NAME = "kvschema"
APP_VERSION = "0.1.0"

# Line syntax
COMMENT_PREFIXES = ("#", ";")
DELIMITER = "="
IGNORE_ERROR_PREFIX = "-"

# Signed 64-bit range accepted by the integer type
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

# Process exit codes for the command line wrapper
EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2
