"""EventMarketers content service: frame composition and admin-to-mobile content sync."""

__version__ = "1.0.0"
