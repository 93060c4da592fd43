"""Host-side Open Interface client for the iRobot Create 2."""

from create_host.core.errors import (
    OIError,
    ConfigurationError,
    EncodingError,
    WriteError,
    OpcodeWriteError,
    PayloadWriteError,
)
from create_host.core.pack import pack
from create_host.core.settings import LogSettings, SerialSettings
from create_host.transport.serial_transport import BAUD_RATES, SerialTransport

__version__ = "0.1.0"
