"""
Schema-driven configuration parser.

This module turns a sequence of command-line arguments into a validated
Configuration. Tokenizing is delegated to argparse; each recognized flag is
then dispatched through a table of handlers keyed by its short name, so
the flag logic stays next to the schema instead of in one long procedure.
"""

import argparse
import logging
import re
from typing import Callable, Dict, Iterable, Optional, Sequence, Union

from pydantic import ValidationError

from ..constants import PROGRAM_NAME, TEST_NAMES, TOPOLOGIES
from ..core.display import show_configuration
from ..models import (
    Configuration,
    OptionSpec,
    ParseError,
    ParseErrorKind,
    ParseResult,
    TestKind,
    Topology,
)
from ..utils.sizes import (
    SizeSuffixError,
    get_matching_index,
    parse_decimal_int,
    size_str_to_bytes,
)
from .schema import define_schema

logger = logging.getLogger(__name__)

Handler = Callable[[Configuration, Union[str, bool]], None]

_ARGUMENT_MESSAGE = re.compile(r"argument (?P<flag>[^/:\s]+)(?:/\S+)?: (?P<detail>.*)")


class _ArgumentSyntaxError(Exception):
    pass


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise _ArgumentSyntaxError(message)


def _syntax_error(message: str) -> ParseError:
    """Classify an argparse error message."""
    if message.startswith("unrecognized arguments:"):
        unknown = message.split(":", 1)[1].split()
        return ParseError(
            ParseErrorKind.UNKNOWN_FLAG,
            f"unrecognized option '{unknown[0]}'" if unknown else message,
            flag=unknown[0] if unknown else None,
        )

    match = _ARGUMENT_MESSAGE.match(message)
    if match and "expected one argument" in match.group("detail"):
        return ParseError(ParseErrorKind.MISSING_VALUE, "missing argument", flag=match.group("flag"))
    if match:
        return ParseError(ParseErrorKind.UNKNOWN_FLAG, match.group("detail"), flag=match.group("flag"))
    return ParseError(ParseErrorKind.UNKNOWN_FLAG, message)


class ConfigParser:
    """Parses NetBurst command-line flags into a Configuration."""

    def __init__(self, schema: Optional[Iterable[OptionSpec]] = None, prog: str = PROGRAM_NAME):
        self.schema = tuple(schema) if schema is not None else define_schema()
        _check_unique(self.schema)

        self._handlers: Dict[str, Handler] = {
            "n": self._apply_test_name,
            "H": self._apply_host_names,
            "T": self._apply_topology,
            "I": self._apply_instances,
            "m": self._apply_message_size,
            "M": self._apply_region_size,
            "i": self._apply_in_flight,
            "P": self._apply_poll,
            "p": self._apply_port,
            "v": self._apply_verbose,
        }
        unhandled = [
            option.short_flag
            for option in self.schema
            if option.short != "h" and option.short not in self._handlers
        ]
        if unhandled:
            raise ValueError(f"No handler for options: {', '.join(unhandled)}")

        self._arg_parser = self._build_arg_parser(prog)

    def _build_arg_parser(self, prog: str) -> argparse.ArgumentParser:
        parser = _RaisingArgumentParser(
            prog=prog,
            description="NetBurst RDMA network micro-benchmark configuration.",
            epilog="""
Examples:
  netburst -n write -m 4K -M 1M -i 16 -P 1
  netburst -H host1,host2,host3 -T pairs -p 7000,7001
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
            allow_abbrev=False,
        )
        for option in self.schema:
            if option.takes_value:
                parser.add_argument(
                    option.short_flag,
                    option.long_flag,
                    dest=option.long,
                    metavar=option.metavar,
                    help=option.help,
                )
            else:
                parser.add_argument(
                    option.short_flag,
                    option.long_flag,
                    dest=option.long,
                    action="store_true",
                    help=option.help,
                )
        return parser

    def format_help(self) -> str:
        """Return the usage message rendered by argparse."""
        return self._arg_parser.format_help()

    def print_help(self, file=None) -> None:
        """Print the usage message to file (stdout by default)."""
        self._arg_parser.print_help(file)

    def parse(
        self,
        args: Optional[Sequence[str]] = None,
        base: Optional[Configuration] = None,
        base_factory: Optional[Callable[[], Configuration]] = None,
    ) -> ParseResult:
        """
        Parse command-line arguments into a Configuration.

        Args:
            args: Arguments without the program name (defaults to sys.argv[1:])
            base: Configuration to start from instead of the defaults; it is
                copied, never modified
            base_factory: Builds the starting Configuration; only called once
                the arguments are known not to request help

        Returns:
            ParseResult holding the configuration, or help_requested=True
            when -h/--help was given

        Raises:
            ParseError: If a flag is unknown, lacks a value, or has an invalid value
        """
        try:
            namespace = self._arg_parser.parse_args(args)
        except _ArgumentSyntaxError as e:
            raise _syntax_error(str(e)) from e

        if getattr(namespace, "help", False):
            logger.debug("Help requested, skipping remaining flags")
            return ParseResult(configuration=None, help_requested=True)

        if base_factory is not None:
            base = base_factory()
        config = base.model_copy(deep=True) if base is not None else Configuration()
        for option in self.schema:
            if option.short == "h":
                continue
            value = getattr(namespace, option.long)
            if value is None or value is False:
                continue
            self.apply_value(config, option, value)

        if not config.region_covers_message:
            logger.warning(
                f"Region size {config.region_size} is smaller than message size "
                f"{config.message_size}"
            )

        show_configuration(config)
        return ParseResult(configuration=config)

    def apply_value(
        self,
        config: Configuration,
        option: OptionSpec,
        value: Union[str, bool],
        source: Optional[str] = None,
    ) -> None:
        """
        Validate one flag value and assign it into config.

        Args:
            config: Configuration to update in place
            option: The flag being applied
            value: Raw string for value-taking flags, True for switches
            source: Name reported in errors (defaults to the short flag)

        Raises:
            ParseError: If the value is invalid for the flag
        """
        source = source or option.short_flag
        handler = self._handlers[option.short]
        try:
            handler(config, value)
        except ParseError as e:
            if e.flag is None:
                e.flag = source
            raise
        except ValidationError as e:
            detail = e.errors()[0]["msg"] if e.errors() else str(e)
            raise ParseError(
                ParseErrorKind.OUT_OF_RANGE, f"{detail} (got '{value}')", flag=source
            ) from e
        except OverflowError as e:
            raise ParseError(ParseErrorKind.NUMERIC_OVERFLOW, str(e), flag=source) from e
        except SizeSuffixError as e:
            raise ParseError(ParseErrorKind.MALFORMED_SIZE_SUFFIX, str(e), flag=source) from e
        except ValueError as e:
            raise ParseError(ParseErrorKind.MALFORMED_NUMBER, str(e), flag=source) from e

        logger.debug(f"Applied {source} = {value!r}")

    # Flag handlers

    def _apply_test_name(self, config: Configuration, value: str) -> None:
        config.test_kind = TestKind(TEST_NAMES[_match_choice(TEST_NAMES, value)])

    def _apply_host_names(self, config: Configuration, value: str) -> None:
        if not value.strip():
            config.host_names = []
            return
        config.host_names = [name.strip() for name in value.split(",")]

    def _apply_topology(self, config: Configuration, value: str) -> None:
        config.topology = Topology(TOPOLOGIES[_match_choice(TOPOLOGIES, value)])

    def _apply_instances(self, config: Configuration, value: str) -> None:
        config.instances = parse_decimal_int(value)

    def _apply_message_size(self, config: Configuration, value: str) -> None:
        config.message_size = size_str_to_bytes(value)

    def _apply_region_size(self, config: Configuration, value: str) -> None:
        config.region_size = size_str_to_bytes(value)

    def _apply_in_flight(self, config: Configuration, value: str) -> None:
        config.in_flight = size_str_to_bytes(value)

    def _apply_poll(self, config: Configuration, value: str) -> None:
        config.poll = size_str_to_bytes(value) != 0

    def _apply_port(self, config: Configuration, value: str) -> None:
        fields = value.strip().split(",")
        if len(fields) != 2:
            raise ParseError(
                ParseErrorKind.MALFORMED_PAIR,
                f"expected MASTER,SLAVE but got '{value}'",
            )
        master, slave = (field.strip() for field in fields)
        # An empty field keeps the current port
        if master:
            config.port_master = parse_decimal_int(master)
        if slave:
            config.port_slave = parse_decimal_int(slave)

    def _apply_verbose(self, config: Configuration, value: Union[str, bool]) -> None:
        if isinstance(value, bool):
            config.verbose = value
            return
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            config.verbose = True
        elif lowered in ("0", "false", "no", "off"):
            config.verbose = False
        else:
            raise ParseError(ParseErrorKind.INVALID_CHOICE, f"invalid boolean value: '{value}'")


def _match_choice(candidates: Sequence[str], value: str) -> int:
    try:
        return get_matching_index(candidates, value.strip())
    except ValueError as e:
        raise ParseError(ParseErrorKind.INVALID_CHOICE, str(e)) from e


def _check_unique(schema: Sequence[OptionSpec]) -> None:
    seen = set()
    for option in schema:
        for flag in (option.short_flag, option.long_flag):
            if flag in seen:
                raise ValueError(f"Duplicate option flag in schema: {flag}")
            seen.add(flag)
