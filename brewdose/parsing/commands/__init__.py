"""
Dose frame codec for networked dispensers.

This sub-package builds CRC-checked binary frames for single dosing commands
and parses them back.
"""
from brewdose.parsing.commands.builder import (
    DoseFrame,
    build_dose_command,
    parse_dose_command,
    COMMAND_MARKER,
    DOSE_OPCODE,
    FRAME_LENGTH,
)

__all__ = [
    "DoseFrame",
    "build_dose_command",
    "parse_dose_command",
    "COMMAND_MARKER",
    "DOSE_OPCODE",
    "FRAME_LENGTH",
]
