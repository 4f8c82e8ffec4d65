"""
wttr-cli - current weather for a city, straight from wttr.in.
"""

__version__ = "0.1.0"
