"""
Dose frame builder and parser for networked dispensers.

Frames have the structure:
``[0x0D] [length] [0xD0] [ingredient] [grams hi] [grams lo] [temperature] [CRC16]``
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brewdose.core.binary import crc16_ccitt, u16_be
from brewdose.domain.cups import INGREDIENTS_BY_CODE, Ingredient

# Frame marker and opcode.
COMMAND_MARKER = 0x0D
DOSE_OPCODE = 0xD0

# marker + length + opcode + ingredient + grams(2) + temperature + crc(2)
FRAME_LENGTH = 9


@dataclass(frozen=True)
class DoseFrame:
    """
    A decoded dose frame.

    Attributes:
        ingredient: The ingredient role.
        grams: Quantity in grams.
        temperature: Water temperature in Celsius, 0 for other ingredients.
        crc_ok: Whether the CRC-16 checksum validated.
        raw_hex: The full frame as a hex string.
    """
    ingredient: Ingredient
    grams: int
    temperature: int = 0
    crc_ok: bool = False
    raw_hex: str = ""


def build_dose_command(ingredient: Ingredient, grams: int, temperature: int = 0) -> str:
    """
    Build a complete dose frame as a hex string.

    Args:
        ingredient: The ingredient to dose.
        grams: Quantity in grams, 0..65535.
        temperature: Water temperature in Celsius, 0..255.

    Returns:
        The frame as a hexadecimal string, ready to POST to a dispenser.
    """
    if temperature < 0 or temperature > 0xFF:
        raise ValueError(f"temperature {temperature} does not fit in one byte")
    payload = bytes([DOSE_OPCODE, ingredient.code]) + u16_be(grams) + bytes([temperature])
    frame_without_crc = bytes([COMMAND_MARKER, FRAME_LENGTH]) + payload
    return (frame_without_crc + crc16_ccitt(frame_without_crc)).hex()


def parse_dose_command(hex_str: str) -> Optional[DoseFrame]:
    """
    Decode a hex dose frame.

    Returns:
        A ``DoseFrame`` if the data is a dose frame for a known ingredient,
        otherwise ``None``.
    """
    try:
        raw = bytes.fromhex(hex_str)
    except (TypeError, ValueError):
        return None

    # Exactly one frame, and its length byte must agree.
    if len(raw) != FRAME_LENGTH or raw[1] != FRAME_LENGTH:
        return None
    if raw[0] != COMMAND_MARKER or raw[2] != DOSE_OPCODE:
        return None

    ingredient = INGREDIENTS_BY_CODE.get(raw[3])
    if ingredient is None:
        return None

    return DoseFrame(
        ingredient=ingredient,
        grams=(raw[4] << 8) | raw[5],
        temperature=raw[6],
        crc_ok=crc16_ccitt(raw[:-2]) == raw[-2:],
        raw_hex=raw.hex(),
    )
