"""Reports, chart data and circle-packing pictures of simulation results, and icon geometry."""

__version__ = "0.1.0"

__all__ = ["bubbles", "cli", "icons", "packing", "plots", "results"]