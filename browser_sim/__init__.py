"""
Browser Sim - a tabbed desktop browser simulator.

Resolves typed queries into URLs, keeps an ordered set of tabs with a
single active tab, and persists a newest-first visit history.
"""

__version__ = "0.1.0"
__author__ = "Browser Sim Contributors"
