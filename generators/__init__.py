"""Synthetic transaction exports for exercising the monitoring rules."""
