"""
settings.py — Flask configuration defaults
============================================
Loaded with app.config.from_object(); every key can be overridden from
the environment with a SORTVIZ_ prefix, e.g.

    SORTVIZ_MAX_ARRAY_SIZE=150 SORTVIZ_STRICT_ALGORITHMS=true python main.py
"""

import secrets


class DefaultConfig:
    SECRET_KEY          = secrets.token_hex(32)

    DEFAULT_ALGORITHM   = "quick"
    DEFAULT_ARRAY_SIZE  = 30
    MAX_ARRAY_SIZE      = 200       # generation cost grows with n² for the quadratic sorts
    MIN_VALUE           = 1
    MAX_VALUE           = 100
    DEFAULT_SPEED       = 50

    # live workspaces kept in memory; the least recently used one is dropped first
    MAX_WORKSPACES      = 100

    # reject unknown algorithm keys instead of recording a no-op run
    STRICT_ALGORITHMS   = False
