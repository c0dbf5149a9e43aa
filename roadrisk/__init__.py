"""
RoadRisk - classifies geographic zones by road-accident risk.
"""

__version__ = "1.0.0"
