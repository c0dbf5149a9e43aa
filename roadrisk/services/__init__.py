"""
RoadRisk domain services.
"""
