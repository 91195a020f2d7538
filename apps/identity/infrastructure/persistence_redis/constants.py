"""Redis key prefixes."""

STATE_KEY_PREFIX = "oauth_state:"
BLACKLIST_KEY_PREFIX = "blacklist:"
