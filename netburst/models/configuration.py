#!/usr/bin/env python3
"""
Benchmark Configuration Model

This module defines the typed configuration record that the parser fills
in and downstream benchmark engines consume. Assignment is validated, so
every field stays within its domain while flags are applied one by one.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..constants import (
    DEFAULT_IN_FLIGHT,
    DEFAULT_INSTANCES,
    DEFAULT_MESSAGE_SIZE,
    DEFAULT_PORT_MASTER,
    DEFAULT_PORT_SLAVE,
    DEFAULT_REGION_SIZE,
    MAX_PORT,
    TEST_NAMES,
    TOPOLOGIES,
)


class TestKind(str, Enum):
    """Data-transfer operation exercised by the benchmark."""

    READ = TEST_NAMES[0]
    WRITE = TEST_NAMES[1]


class Topology(str, Enum):
    """Peer-connection pattern for a benchmark run."""

    ALL_TO_ALL = TOPOLOGIES[0]
    PAIRS = TOPOLOGIES[1]


class Configuration(BaseModel):
    """
    Populated benchmark configuration.

    Created with defaults, then updated in place as each recognized flag
    is applied. Treat it as read-only once parsing has finished.
    """

    test_kind: TestKind = Field(TestKind.READ, description="Name of the test")
    host_names: Optional[List[str]] = Field(None, description="Participating hosts")
    topology: Topology = Field(Topology.ALL_TO_ALL, description="Topology of the test")
    instances: int = Field(DEFAULT_INSTANCES, gt=0, description="Parallel test instances")
    message_size: int = Field(DEFAULT_MESSAGE_SIZE, gt=0, description="Message size in bytes")
    region_size: int = Field(DEFAULT_REGION_SIZE, gt=0, description="Region size in bytes")
    in_flight: int = Field(DEFAULT_IN_FLIGHT, gt=0, description="Max operations in flight")
    poll: bool = Field(False, description="Poll for completions instead of blocking")
    port_master: int = Field(DEFAULT_PORT_MASTER, gt=0, le=MAX_PORT, description="Master port")
    port_slave: int = Field(DEFAULT_PORT_SLAVE, gt=0, le=MAX_PORT, description="Slave port")
    verbose: bool = Field(False, description="Verbose logging")

    @property
    def region_covers_message(self) -> bool:
        """Whether the remote region is large enough to hold one message."""
        return self.region_size >= self.message_size

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the configuration to a plain dictionary.

        Returns:
            Dictionary with enum members rendered as their string values
        """
        return self.model_dump(mode="json")

    model_config = {
        "validate_assignment": True,
        "extra": "forbid",
    }
