"""
RoadRisk HTTP API.
"""
