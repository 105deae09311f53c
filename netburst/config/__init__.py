"""
Configuration management for NetBurst.

This module provides the option schema, the command-line parser that turns
flags into a validated Configuration, and the loader that layers
environment variables underneath the flags.
"""

from .schema import define_schema, env_var_for
from .parser import ConfigParser
from .loader import ConfigLoader

__all__ = ["define_schema", "env_var_for", "ConfigParser", "ConfigLoader"]
