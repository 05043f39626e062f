"""
Mostro Score Web - development server for the static web assets
"""
__version__ = "1.0.0"
