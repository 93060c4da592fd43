from .serial_transport import BAUD_RATES, SerialTransport
