from __future__ import annotations


CRC16_POLY = 0x1021
CRC16_INIT = 0x1D0F


def crc16_ccitt(data: bytes) -> bytes:
    crc = CRC16_INIT
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ CRC16_POLY
            else:
                crc <<= 1
    return (crc & 0xFFFF).to_bytes(2, byteorder="big")


def u16_be(value: int) -> bytes:
    if value < 0 or value > 0xFFFF:
        raise ValueError(f"value {value} does not fit in 16 bits")
    return value.to_bytes(2, byteorder="big")
