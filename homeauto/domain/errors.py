from __future__ import annotations


class HomeAutomationError(Exception):
    """Base class for every error raised by homeauto."""


class InvalidChoice(HomeAutomationError):
    """Unrecognized menu option or malformed numeric input. Not fatal."""


class InitializationError(HomeAutomationError):
    """A driver could not be set up. The caller decides whether to retry or abort."""


class HardwareFault(HomeAutomationError):
    """An actuator or bus driver failed while talking to the hardware."""


class ReadFailure(HomeAutomationError):
    """A sensor could not produce a reading. No value is fabricated."""
