"""locdiff — compare localization JSON files key by key."""

__version__ = "0.1.0"
