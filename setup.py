"""
Setup script for numvec

This setup.py is primarily for compatibility. The main configuration is in pyproject.toml.
"""

from setuptools import setup


# Configuration is primarily in pyproject.toml
setup()
