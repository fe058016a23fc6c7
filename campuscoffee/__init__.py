"""
CampusCoffee - import points of sale from OpenStreetMap
"""

__version__ = "1.0.0"
