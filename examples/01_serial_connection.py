#!/usr/bin/env python3
"""
Example 01: Serial Connection

Demonstrates:
- Finding available serial ports
- Opening the Create 2 OI port at 115200 baud
- Sending raw opcodes (Start, Safe) and a packed argument
- Reading a one-byte sensor response

Prerequisites:
- iRobot Create 2 connected via the USB-to-serial cable
- pip install -e .

Usage:
    python 01_serial_connection.py
    python 01_serial_connection.py /dev/ttyUSB0  # specify port
"""
import sys
import time
from pathlib import Path

import numpy as np

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from create_host import SerialSettings, SerialTransport, pack
from create_host.logger.logger import Logger


def find_serial_ports():
    """List available serial ports."""
    import serial.tools.list_ports

    ports = serial.tools.list_ports.comports()
    usb_ports = []

    print("Available serial ports:")
    for port in ports:
        is_usb = any(x in port.description.lower() for x in ["usb", "uart", "serial", "ftdi"])
        marker = " <-- likely Create cable" if is_usb else ""
        print(f"  {port.device}: {port.description}{marker}")
        if is_usb:
            usb_ports.append(port.device)

    return usb_ports


def main():
    if len(sys.argv) > 1:
        port = sys.argv[1]
    else:
        ports = find_serial_ports()
        if not ports:
            print("\nNo USB serial ports found. Connect the robot and try again.")
            return
        port = ports[0]
        print(f"\nUsing first detected port: {port}")

    Logger("create_example.log", console=True)

    settings = SerialSettings(port=port, baudrate=115200, timeout=1.0)
    with SerialTransport.from_settings(settings) as robot:
        robot.open()

        robot.write_byte(128)   # Start
        robot.write_byte(131)   # Safe
        time.sleep(0.1)

        # Sensors (142), packet 35 = OI mode
        robot.write(142, pack([np.uint8(35)]))
        buf = bytearray(1)
        n = robot.read(buf)
        if n:
            print(f"OI mode: {buf[0]}")
        else:
            print("No response within timeout")

        robot.write_byte(173)   # Stop


if __name__ == "__main__":
    main()
