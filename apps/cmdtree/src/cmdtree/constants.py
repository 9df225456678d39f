"""Application-level constants for cmdtree."""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "cmdtree"

# ============================================================================
# Console defaults
# ============================================================================

DEFAULT_SENDER_NAME = "console"
DEFAULT_CHAT_PREFIX = "/"
REPL_PROMPT = "> "

# Set to any value to print tracebacks for unexpected console errors.
DEBUG_ENV_VAR = "CMDTREE_DEBUG"

# Permission required by the console's mutating demo commands.
ADMIN_PERMISSION = f"{APP_NAME}.admin"
