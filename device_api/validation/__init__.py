from .validator import validate_device, decode_body

__all__ = ["validate_device", "decode_body"]
