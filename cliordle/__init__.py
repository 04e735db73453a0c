"""
Cliordle Application Package

A terminal implementation of the five-letter word-guessing game with
persistent player statistics, split into config, models, services,
storage, controllers and utils packages.
"""

__version__ = "1.0.0"
