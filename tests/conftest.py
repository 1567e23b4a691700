# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for the serial stream tests."""

import pytest
import serial


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--port",
        action="store",
        default="loop://",
        help="pyserial URL of a looped-back port for stream tests (default: loop://)",
    )


@pytest.fixture(scope="session")
def port_url(request):
    """Get the serial port URL from command line."""
    return request.config.getoption("--port")


@pytest.fixture
def serial_port(port_url):
    """
    Open the looped-back serial port.

    Anything written to the port must come back on read, so use pyserial's
    loop:// (the default) or a physical port with TX wired to RX.
    """
    port = serial.serial_for_url(port_url, timeout=0.2)
    port.reset_input_buffer()
    yield port
    port.close()
