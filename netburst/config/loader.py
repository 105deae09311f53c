"""
Environment-aware configuration loader.

This module layers environment variables under the command-line flags.
Loading order (lowest to highest priority):

1. Configuration defaults
2. .env.local file (values never override the real environment)
3. OS environment variables named NETBURST_<LONG FLAG NAME>, e.g.
   NETBURST_TESTNAME=write or NETBURST_MSIZE=4K
4. Command-line flags
"""

import logging
import os
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv

from ..constants import ENV_FILE
from ..models import Configuration, ParseResult
from .parser import ConfigParser
from .schema import env_var_for

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads a Configuration from the environment and command-line flags."""

    @staticmethod
    def from_environment(
        parser: ConfigParser,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Configuration:
        """
        Build a Configuration from NETBURST_* environment variables.

        Each variable goes through the same validation as its flag, so a
        bad value is reported with the variable name.

        Args:
            parser: Parser whose schema and handlers are used
            environ: Mapping to read instead of os.environ

        Returns:
            Configuration with environment values applied over the defaults

        Raises:
            ParseError: If an environment value is invalid
        """
        environ = os.environ if environ is None else environ
        config = Configuration()
        for option in parser.schema:
            if option.short == "h":
                continue
            env_var = env_var_for(option)
            raw = environ.get(env_var)
            if raw is None or not raw.strip():
                continue
            parser.apply_value(config, option, raw, source=env_var)
            logger.debug(f"Loaded {env_var} from environment")
        return config

    @staticmethod
    def load(
        args: Optional[Sequence[str]] = None,
        environ: Optional[Mapping[str, str]] = None,
        parser: Optional[ConfigParser] = None,
        env_file: Optional[str] = ENV_FILE,
    ) -> ParseResult:
        """
        Load configuration from all sources with precedence handling.

        Args:
            args: Command-line arguments (defaults to sys.argv[1:])
            environ: Mapping to read instead of os.environ; .env.local is
                only consulted when this is None
            parser: Parser to use (a default one is created if omitted)
            env_file: Dotenv file to load, or None to skip it

        Returns:
            ParseResult from parsing args over the environment configuration

        Raises:
            ParseError: If an environment value or flag is invalid
        """
        parser = parser or ConfigParser()
        if environ is None and env_file:
            _load_from_dotenv_file(env_file)
        # Environment values are only validated when help was not requested
        return parser.parse(
            args,
            base_factory=lambda: ConfigLoader.from_environment(parser, environ),
        )


def _load_from_dotenv_file(path: str) -> None:
    """Load values from a dotenv file if it exists."""
    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path} file")
    else:
        logger.debug(f"{path} file not found, skipping")
