"""
CLI argument parser module.

This module uses the schema-driven ConfigParser so the command-line
surface is generated from the option schema.
"""

from ..config.parser import ConfigParser


def create_config_parser() -> ConfigParser:
    """
    Create the configuration parser used by the command-line entry point.

    Returns:
        ConfigParser built from the default option schema
    """
    return ConfigParser()
