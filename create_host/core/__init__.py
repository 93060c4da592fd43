from .errors import (
    OIError,
    ConfigurationError,
    EncodingError,
    WriteError,
    OpcodeWriteError,
    PayloadWriteError,
)
from .pack import pack
