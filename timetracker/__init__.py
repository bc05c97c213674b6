"""TimeTracker — per-task time tracking over job presets."""

__version__ = "0.1.0"
