"""Choropleth world map of COVID-19 statistics."""

__version__ = "0.1.0"
