"""Redis key constants."""

STATE_KEY_PREFIX = "oauth_state:"
