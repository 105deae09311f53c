"""
Command-line option schema.

This module declares every flag the configuration parser accepts. The
schema is the single source of truth for both the argparse tokenizer and
the environment variable names.
"""

from typing import Tuple

from ..constants import ENV_PREFIX, TEST_NAMES, TOPOLOGIES
from ..models import OptionSpec


def define_schema() -> Tuple[OptionSpec, ...]:
    """
    Return the ordered set of accepted flags.

    Order only affects how the flags are listed in the help message.
    """
    return (
        OptionSpec(
            "n", "testName", True,
            f"Name of the test, valid entries are: {', '.join(TEST_NAMES)}",
            metavar="NAME",
        ),
        OptionSpec(
            "H", "hostNames", True,
            "List of comma separated hostnames",
            metavar="HOSTS",
        ),
        OptionSpec(
            "T", "topology", True,
            f"Topology of the test, {' or '.join(TOPOLOGIES)}",
            metavar="TOPOLOGY",
        ),
        OptionSpec(
            "I", "instances", True,
            "Number of parallel instances of the test",
            metavar="N",
        ),
        OptionSpec(
            "m", "mSize", True,
            "Message size; suffixes k,m,g are base 10 and K,M,G are base 2",
            metavar="SIZE",
        ),
        OptionSpec(
            "M", "regionSize", True,
            "Region size; suffixes k,m,g are base 10 and K,M,G are base 2",
            metavar="SIZE",
        ),
        OptionSpec(
            "i", "inFlight", True,
            "Max operations in flight",
            metavar="N",
        ),
        OptionSpec(
            "P", "poll", True,
            "Poll (1) or block (0) for completion notifications",
            metavar="0|1",
        ),
        OptionSpec(
            "p", "port", True,
            "<int,int> Starting port number, master,slaves",
            metavar="MASTER,SLAVE",
        ),
        OptionSpec(
            "v", "verbose", False,
            "Enable verbose logging (DEBUG level)",
        ),
        OptionSpec(
            "h", "help", False,
            "Show this message and exit",
        ),
    )


def env_var_for(option: OptionSpec) -> str:
    """Environment variable that supplies a default for a value-taking flag."""
    return f"{ENV_PREFIX}{option.long.upper()}"
