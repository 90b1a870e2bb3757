"""
Exception hierarchy for the outer surfaces (config loading, transcript files).

The analytics computation itself never raises; insufficient input is reported
as a ``None`` result instead.
"""


class AnalyticsError(Exception):
    """Base class for all speech analytics errors."""


class ConfigError(AnalyticsError):
    """Invalid or unreadable configuration."""


class TranscriptError(AnalyticsError):
    """Transcript input could not be read or parsed."""
