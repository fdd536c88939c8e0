"""Weather station helpers: unit conversions, derived values and current weather reports."""

__version__ = "0.1.0"