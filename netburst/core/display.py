"""
Configuration display module.

This module renders a populated Configuration as a human-readable summary
for the diagnostic log. It only formats; it never validates.
"""

import logging
from typing import List, Optional

from ..models import Configuration
from ..utils.sizes import expand_string_array


def format_configuration(config: Configuration) -> List[str]:
    """
    Render the configuration as labelled summary lines.

    Args:
        config: Configuration to render

    Returns:
        One line per setting, in a fixed order
    """
    return [
        f" testName      : {config.test_kind.value}",
        f" hostNames     : {expand_string_array(config.host_names)}",
        f" Topology      : {config.topology.value}",
        f" Instances     : {config.instances}",
        f" Message size  : {config.message_size}",
        f" Region size   : {config.region_size}",
        f" Inflight      : {config.in_flight}",
        f" Poll          : {config.poll}",
        f" Port          : {config.port_master},{config.port_slave}",
    ]


def show_configuration(config: Configuration, logger: Optional[logging.Logger] = None) -> None:
    """
    Log the configuration summary at INFO level.

    Args:
        config: Configuration to render
        logger: Logger instance to use (defaults to this module's logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 40)
    logger.info("BENCHMARK CONFIGURATION")
    logger.info("=" * 40)
    for line in format_configuration(config):
        logger.info(line)
