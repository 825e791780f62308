"""
Mock flight search service for the travel planner demo
"""

__version__ = "1.0.0"
