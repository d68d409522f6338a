"""
B64HEX - Base64 <-> hexadecimal text converter

One engine behind two commands: ``b64hex`` turns classic or URL-safe Base64
into hex, ``hexb64`` turns hex into Base64. The functions below expose the
same conversions for use as a library.
"""

from .main import *
from .version import __version__

# ============================================================================
# CONVERSIONS (text -> text)
# ============================================================================

def b64_to_hex(string: str, upper: bool = False):
    """
    Decode Base64 (classic, else URL-safe) and render it as hex.

    Args:
        string: Base64 text, whitespace allowed
        upper: Emit uppercase hex digits

    Raises:
        ValueError: If the input is not valid Base64 in either alphabet
    """
    hex_case = b64hex.HexCase.UPPER if upper else b64hex.HexCase.LOWER
    return b64hex.b64_to_hex(b64hex.normalize_input(string), hex_case)


def hex_to_b64(string: str, urlsafe: bool = False):
    """
    Parse hex and render it as padded Base64.

    Args:
        string: Hex text, optional 0x prefix, any case, whitespace allowed
        urlsafe: Use the URL-safe alphabet (- and _)

    Raises:
        ValueError: Empty input, odd length or a non-hex pair
    """
    return b64hex.hex_to_b64(string, urlsafe=urlsafe)


# ============================================================================
# CODECS (text <-> bytes)
# ============================================================================

def parse_hex(string: str): return b64hex.parse_hex(string)
def bytes_to_hex(data: bytes, upper: bool = False):
    return b64hex.bytes_to_hex(data, b64hex.HexCase.UPPER if upper else b64hex.HexCase.LOWER)
def b64decode_any(string: str): return b64hex.b64decode_any(string)
def b64encode(data: bytes, urlsafe: bool = False): return b64hex.b64encode(data, urlsafe=urlsafe)
def normalize_input(string: str): return b64hex.normalize_input(string)
def mode_from_program(program: str): return b64hex.mode_from_program(program)
