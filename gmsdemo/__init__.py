"""
GMS Demo

Compares Grid-based Motion Statistics match filtering configurations
over ORB feature matches between two images.
"""

from .core import GmsDemo

__all__ = ['GmsDemo']
__version__ = '1.0.0'
