#!/usr/bin/env python3
"""
Application Constants

This module contains the exit codes, configuration defaults and size
multipliers used throughout the NetBurst configuration core.
"""

# Exit codes for different outcomes
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 2  # Any flag that fails to parse or validate
EXIT_UNEXPECTED_ERROR = 10

# Choices accepted by -n and -T, in index order
TEST_NAMES = ("read", "write")
TOPOLOGIES = ("allToAll", "pairs")

# Configuration defaults
DEFAULT_INSTANCES = 1
DEFAULT_MESSAGE_SIZE = 4096  # bytes
DEFAULT_REGION_SIZE = 4096  # bytes
DEFAULT_IN_FLIGHT = 8
DEFAULT_PORT_MASTER = 20208
DEFAULT_PORT_SLAVE = 20209
MAX_PORT = 65535

# Size suffixes are case-sensitive: lowercase is base 1000, uppercase base 1024
SIZE_MULTIPLIERS = {
    "k": 10**3,
    "m": 10**6,
    "g": 10**9,
    "K": 2**10,
    "M": 2**20,
    "G": 2**30,
}

# Largest value a size string may decode to (signed 64-bit)
MAX_SIZE_BYTES = 2**63 - 1

# Environment variables are NETBURST_<LONG FLAG NAME IN UPPER CASE>
ENV_PREFIX = "NETBURST_"
ENV_FILE = ".env.local"

PROGRAM_NAME = "netburst"
