# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by tagflag.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
standard `except Exception` blocks in caller code.

Signals:
- HelpSignal: Help text was rendered and parsing stopped.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in tagflag.

    These are not errors. They interrupt parsing when the user asked for
    something other than a normal run.
    """


class HelpSignal(FlowSignal):
    """Raised after the help screen has been rendered."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
