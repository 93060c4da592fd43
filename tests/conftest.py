# tests/conftest.py

import os

import pytest
import serial

from fakes.fake_serial import FakeSerial
from create_host.core.settings import SerialSettings
from create_host.transport.serial_transport import SerialTransport


# ============== Fixtures ==============

@pytest.fixture
def fake_serial_cls(monkeypatch):
    """Replace serial.Serial so open() never touches a real port."""
    FakeSerial.instances.clear()
    monkeypatch.setattr(serial, "Serial", FakeSerial)
    return FakeSerial


@pytest.fixture
def stream():
    return FakeSerial(port="/dev/ttyFAKE", baudrate=115200)


@pytest.fixture
def transport(stream):
    """Transport wired to a FakeSerial without going through open()."""
    t = SerialTransport("/dev/ttyFAKE")
    t._ser = stream
    return t


# ============== Pytest Configuration ==============

def pytest_addoption(parser):
    parser.addoption("--oi-port", action="store", default=os.getenv("OI_PORT", ""))
    parser.addoption("--oi-baud", action="store", type=int, default=int(os.getenv("OI_BAUD", "115200")))
    parser.addoption("--run-hil", action="store_true", default=False, help="Run HIL tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "hil: hardware-in-the-loop tests (requires a Create 2 connected)")


def pytest_collection_modifyitems(config, items):
    """Skip HIL tests unless --run-hil is specified."""
    if not config.getoption("--run-hil"):
        skip_hil = pytest.mark.skip(reason="Need --run-hil option to run HIL tests")
        for item in items:
            if "hil" in item.keywords:
                item.add_marker(skip_hil)


# ============== HIL Fixtures ==============

@pytest.fixture
def robot(request):
    """Open transport to a real robot. Closed on teardown."""
    port = request.config.getoption("--oi-port")
    if not port:
        pytest.skip("Need --oi-port (or OI_PORT) for HIL tests")
    t = SerialTransport.from_settings(
        SerialSettings(port=port, baudrate=request.config.getoption("--oi-baud"), timeout=1.0)
    )
    t.open()
    try:
        yield t
    finally:
        t.close()
