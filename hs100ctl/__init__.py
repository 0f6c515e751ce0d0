"""Control TP-Link HS100/HS110 smart plugs over their local TCP protocol."""

__version__ = "0.5.0"
