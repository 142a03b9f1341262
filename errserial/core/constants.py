"""
core/constants.py - Fixed markers and names
"""

# Written in place of a back-reference to an ancestor on the current path
CIRCULAR_SENTINEL = "[Circular]"

# Top-level callables serialize to this placeholder
FUNCTION_PLACEHOLDER = "[Function: {name}]"
ANONYMOUS_FUNCTION_NAME = "anonymous"
LAMBDA_NAME = "<lambda>"

# Category name of the synthetic error wrapping non-error input
NON_ERROR_NAME = "NonError"

# Category name of a freshly restored error before input overrides it
DEFAULT_ERROR_NAME = "Error"
