from __future__ import annotations

import logging
import operator
from typing import Optional, Union

import numpy as np
import serial

from create_host.core.errors import (
    ConfigurationError,
    EncodingError,
    OpcodeWriteError,
    PayloadWriteError,
)
from create_host.core.settings import SerialSettings

logger = logging.getLogger(__name__)

BAUD_RATES = (115200, 19200)

BytesLike = Union[bytes, bytearray, memoryview]


class SerialTransport:
    """
    Open Interface transport for the iRobot Create 2 (and compatible Roombas).

    Every command goes out as [opcode][argument bytes], written as two
    separate transport writes. Responses are read back raw; the caller knows
    how many bytes a given command answers with.

    'port' is something like:
      - Linux USB:   /dev/ttyUSB0
      - macOS USB:   /dev/tty.usbserial-XXXX
      - Windows:     COM3, COM5, ...

    Not safe for concurrent use: issue one command, read its response, then
    issue the next.
    """

    def __init__(self, port: str, settings: Optional[SerialSettings] = None) -> None:
        self.port = port
        self.settings = settings or SerialSettings(port=port)
        self._ser: Optional[serial.Serial] = None

    @classmethod
    def from_settings(cls, settings: SerialSettings) -> "SerialTransport":
        return cls(settings.port, settings)

    @property
    def is_open(self) -> bool:
        return self._ser is not None and bool(getattr(self._ser, "is_open", True))

    # ---- lifecycle ----

    def open(self, baudrate: Optional[int] = None) -> None:
        """
        Configure and open the serial port. Only 115200 and 19200 are valid;
        anything else is rejected before the port is touched.
        """
        baud = self.settings.baudrate if baudrate is None else baudrate
        if baud not in BAUD_RATES:
            raise ConfigurationError(
                f"invalid baud rate: {baud}. Must be one of "
                + ", ".join(str(b) for b in BAUD_RATES)
            )

        if self._ser is not None:
            self.close()

        s = self.settings
        try:
            ser = serial.Serial(
                port=self.port,
                baudrate=baud,
                bytesize=s.bytesize,
                parity=s.parity,
                stopbits=s.stopbits,
                xonxoff=s.xonxoff,
                rtscts=s.rtscts,
                timeout=s.timeout,
                write_timeout=s.write_timeout,
            )
        except (serial.SerialException, OSError):
            logger.warning("failed to open serial port: %s", self.port)
            raise

        self._ser = ser
        logger.info("opened serial port: %s", self.port)

    def close(self) -> None:
        if self._ser is None:
            return
        try:
            if self._ser.is_open:
                self._ser.close()
        finally:
            self._ser = None
            logger.info("closed serial port: %s", self.port)

    def __enter__(self) -> "SerialTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- I/O ----

    def _stream(self) -> serial.Serial:
        if self._ser is None:
            raise RuntimeError("Serial not open")
        return self._ser

    def write(self, opcode: int, payload: BytesLike = b"") -> None:
        """
        Write the opcode byte, then the payload. A short write on either
        step fails the whole call; nothing is retried.
        """
        opcode = _opcode_byte(opcode)
        data = _payload_bytes(payload)
        ser = self._stream()

        logger.info("Writing opcode: %d, data %s", opcode, list(data))

        try:
            n = ser.write(bytes([opcode]))
        except (serial.SerialException, OSError) as e:
            raise OpcodeWriteError(
                f"failed writing opcode {opcode} to serial interface: {e}", opcode
            ) from e
        if n != 1:
            raise OpcodeWriteError(
                f"failed writing opcode {opcode} to serial interface", opcode
            )

        if not data:
            return

        try:
            n = ser.write(data)
        except (serial.SerialException, OSError) as e:
            raise PayloadWriteError(
                f"failed writing command to serial interface: {list(data)}: {e}", data
            ) from e
        if n != len(data):
            raise PayloadWriteError(
                f"failed writing command to serial interface: {list(data)} "
                f"({n} of {len(data)} bytes written)",
                data,
            )

    def write_byte(self, opcode: int) -> None:
        self.write(opcode, b"")

    def read(self, buffer: Union[bytearray, memoryview]) -> int:
        """
        Read into `buffer` and return the count the port reports.

        Waits for at least one byte (bounded by settings.timeout), then takes
        only what is already buffered. A 16-byte buffer holding a 2-byte
        sensor reply returns 2 instead of waiting for 14 more.
        """
        ser = self._stream()
        view = memoryview(buffer)
        if len(view) == 0:
            return ser.readinto(view)
        n = min(len(view), max(1, ser.in_waiting))
        return ser.readinto(view[:n])


def _opcode_byte(opcode) -> int:
    if isinstance(opcode, (bool, np.bool_)):
        raise EncodingError(f"opcode must be a single byte (0-255), got {opcode!r}")
    try:
        value = operator.index(opcode)
    except TypeError:
        raise EncodingError(f"opcode must be a single byte (0-255), got {opcode!r}") from None
    if not 0 <= value <= 0xFF:
        raise EncodingError(f"opcode must be a single byte (0-255), got {opcode!r}")
    return value


def _payload_bytes(payload) -> bytes:
    # Anything wider than a byte has to go through pack() for its byte order.
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    if isinstance(payload, memoryview) and payload.itemsize == 1:
        return payload.tobytes()
    raise EncodingError(
        f"payload must be bytes, bytearray or a byte memoryview, got {type(payload).__name__}; "
        "use pack() for numeric arguments"
    )
