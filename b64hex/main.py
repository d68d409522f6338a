# B64HEX CONVERSION ENGINE ->

import re as _re_module


class b64hex:
    import base64
    import binascii
    import enum
    import pathlib
    import string
    import sys
    import typing
    import colorama
    re = _re_module

    ENGINE_VERSION = "1.0.0"
    B64_TO_HEX_PROG = "b64hex"
    HEX_TO_B64_PROG = "hexb64"
    DEFAULT_PROG = HEX_TO_B64_PROG  # used when argv[0] is missing
    HEX_PREFIXES = ("0x", "0X")
    HEX_DIGITS = frozenset(string.hexdigits)
    B64_CLASSIC_PATTERN = re.compile(r"[A-Za-z0-9+/]*={0,2}")
    B64_URLSAFE_PATTERN = re.compile(r"[A-Za-z0-9\-_]*={0,2}")
    B64_URLSAFE_ALTCHARS = b"-_"
    # str.isspace() counts the C0 information separators; they are not whitespace here
    NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")
    FLAG_TOKENS = frozenset(("-low", "-up", "-url", "-h", "--help", "--version"))
    ERROR_COLOR = colorama.Fore.RED

    class Mode(enum.Enum):
        B64_TO_HEX = "b64hex"
        HEX_TO_B64 = "hexb64"

    class HexCase(enum.Enum):
        LOWER = "lower"
        UPPER = "upper"

    class UnknownModeError(ValueError):
        def __init__(self, name: str):
            self.name = name
            super().__init__(
                f"Unknown mode for executable name: {name}\n"
                f"Use hardlinks named '{b64hex.B64_TO_HEX_PROG}' or '{b64hex.HEX_TO_B64_PROG}'."
            )

    # MODE SELECTION
    @staticmethod
    def mode_from_program(program: "b64hex.typing.Optional[str]") -> "b64hex.Mode":
        """
        Pick the conversion direction from the name the program was invoked as.

        Only the basename counts, so ``/usr/local/bin/b64hex`` selects the same
        mode as ``b64hex``. An empty or missing name falls back to ``hexb64``.

        Raises:
            b64hex.UnknownModeError: the name is neither ``b64hex`` nor ``hexb64``
        """
        name = b64hex.pathlib.Path(program).name if program else ""
        if not name:
            name = b64hex.DEFAULT_PROG
        if name == b64hex.B64_TO_HEX_PROG:
            return b64hex.Mode.B64_TO_HEX
        if name == b64hex.HEX_TO_B64_PROG:
            return b64hex.Mode.HEX_TO_B64
        raise b64hex.UnknownModeError(name)

    # INPUT
    @staticmethod
    def read_stdin(stream: "b64hex.typing.Optional[b64hex.typing.TextIO]" = None) -> str:
        if stream is None:
            stream = b64hex.sys.stdin
        return stream.read()

    @staticmethod
    def _is_whitespace(ch: str) -> bool:
        return ch.isspace() and ch not in b64hex.NOT_WHITESPACE

    @staticmethod
    def _trim(text: str) -> str:
        start, end = 0, len(text)
        while start < end and b64hex._is_whitespace(text[start]):
            start += 1
        while end > start and b64hex._is_whitespace(text[end - 1]):
            end -= 1
        return text[start:end]

    @staticmethod
    def normalize_input(raw: str) -> str:
        return "".join(ch for ch in raw if not b64hex._is_whitespace(ch))

    # HEX
    @staticmethod
    def parse_hex(text: str) -> bytes:
        """
        Parse hex text into bytes.

        Accepts an optional leading ``0x``/``0X``, either letter case and
        whitespace anywhere. Odd-length input is rejected, never zero-padded.
        """
        s = b64hex._trim(text)
        if s.startswith(b64hex.HEX_PREFIXES):
            s = s[2:]
        s = b64hex.normalize_input(s)
        if not s:
            raise ValueError("Empty hex string")
        if len(s) % 2 != 0:
            raise ValueError("Hex string must have even length")
        out = bytearray()
        for i in range(0, len(s), 2):
            pair = s[i:i + 2]
            if not b64hex.HEX_DIGITS.issuperset(pair):
                raise ValueError(f"Invalid hex pair '{pair}'")
            out.append(int(pair, 16))
        return bytes(out)

    @staticmethod
    def bytes_to_hex(data: bytes, hex_case: "b64hex.HexCase" = None) -> str:
        if hex_case is None:
            hex_case = b64hex.HexCase.LOWER
        text = bytes(data).hex()
        return text.upper() if hex_case is b64hex.HexCase.UPPER else text

    # BASE64
    @staticmethod
    def _b64decode_variant(text: str, pattern, altchars: "b64hex.typing.Optional[bytes]") -> bytes:
        if not pattern.fullmatch(text):
            raise b64hex.binascii.Error("Only base64 data is allowed")
        if len(text) % 4:
            raise b64hex.binascii.Error("Incorrect padding")
        data = b64hex.base64.b64decode(text, altchars=altchars, validate=True)
        # non-zero pad bits in the last symbol make the encoding non-canonical
        if b64hex.base64.b64encode(data, altchars=altchars).decode("ascii") != text:
            raise b64hex.binascii.Error("Invalid last symbol")
        return data

    @staticmethod
    def b64decode_any(text: str) -> bytes:
        """
        Decode classic Base64, falling back to the URL-safe alphabet.

        Both variants require canonical ``=`` padding and zero pad bits in the
        last symbol. When both attempts fail only the URL-safe error is reported.
        """
        try:
            return b64hex._b64decode_variant(text, b64hex.B64_CLASSIC_PATTERN, None)
        except b64hex.binascii.Error:
            pass
        try:
            return b64hex._b64decode_variant(
                text, b64hex.B64_URLSAFE_PATTERN, b64hex.B64_URLSAFE_ALTCHARS
            )
        except b64hex.binascii.Error as exc:
            raise ValueError(f"Failed to decode as classic or URL-safe base64: {exc}") from exc

    @staticmethod
    def b64encode(data: bytes, urlsafe: bool = False) -> str:
        if urlsafe:
            return b64hex.base64.urlsafe_b64encode(data).decode("ascii")
        return b64hex.base64.b64encode(data).decode("ascii")

    # CONVERSIONS
    @staticmethod
    def b64_to_hex(text: str, hex_case: "b64hex.HexCase" = None) -> str:
        return b64hex.bytes_to_hex(b64hex.b64decode_any(text), hex_case)

    @staticmethod
    def hex_to_b64(text: str, urlsafe: bool = False) -> str:
        return b64hex.b64encode(b64hex.parse_hex(text), urlsafe=urlsafe)

    @staticmethod
    def _paint(text: str, color: str, stream=None) -> str:
        stream = stream or b64hex.sys.stderr
        if getattr(stream, "isatty", lambda: False)():
            return f"{color}{text}{b64hex.colorama.Style.RESET_ALL}"
        return text

    @staticmethod
    def _report(message: str) -> None:
        stream = b64hex.sys.stderr
        print(b64hex._paint(message, b64hex.ERROR_COLOR, stream), file=stream)


# B64HEX  - Base64 (classic or URL-safe) -> hex, lower or upper case
# HEXB64  - hex (0x prefix allowed) -> Base64, classic or URL-safe

# HOW TO USE: link or alias the tool as "b64hex" or "hexb64", then run NAME [flags] [data]


def _build_parser(mode: "b64hex.Mode"):
    import argparse

    if mode is b64hex.Mode.B64_TO_HEX:
        prog = b64hex.B64_TO_HEX_PROG
        usage = "%(prog)s [-low|-up] [data]"
        data_help = "Base64 input (classic or URL-safe). If omitted, read from stdin."
    else:
        prog = b64hex.HEX_TO_B64_PROG
        usage = "%(prog)s [-url] [data]"
        data_help = "Hex input (0x prefix allowed, any case). If omitted, read from stdin."
    hex_mode = mode is b64hex.Mode.B64_TO_HEX

    parser = argparse.ArgumentParser(
        prog=prog,
        usage=usage,
        description="Convert between Base64 and hexadecimal text",
        allow_abbrev=False,
    )
    # Flags are matched as literals in every mode; the other mode's flags are inert.
    parser.add_argument(
        "-low",
        dest="hex_case",
        action="store_const",
        const=b64hex.HexCase.LOWER,
        help="Hex output lowercase (default)" if hex_mode else argparse.SUPPRESS
    )
    parser.add_argument(
        "-up",
        dest="hex_case",
        action="store_const",
        const=b64hex.HexCase.UPPER,
        help="Hex output uppercase" if hex_mode else argparse.SUPPRESS
    )
    parser.add_argument(
        "-url",
        dest="urlsafe",
        action="store_true",
        help=argparse.SUPPRESS if hex_mode else "Use URL-safe base64 output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {b64hex.ENGINE_VERSION}"
    )
    parser.add_argument(
        "data",
        nargs="?",
        default=None,
        help=data_help
    )
    parser.set_defaults(hex_case=b64hex.HexCase.LOWER, urlsafe=False)
    return parser


def cli(argv=None) -> int:
    b64hex.colorama.just_fix_windows_console()

    argv = list(b64hex.sys.argv if argv is None else argv)
    program = argv[0] if argv else ""
    try:
        mode = b64hex.mode_from_program(program)
    except b64hex.UnknownModeError as exc:
        b64hex._report(str(exc))
        return 1

    parser = _build_parser(mode)
    # Any "-" token other than a literal flag is rejected, "--" included.
    for token in argv[1:]:
        if token.startswith("-") and token not in b64hex.FLAG_TOKENS:
            parser.error(f"unrecognized arguments: {token}")
    args = parser.parse_args(argv[1:])

    if args.data is not None:
        raw = args.data
    else:
        try:
            raw = b64hex.read_stdin()
        except (OSError, UnicodeDecodeError) as exc:
            b64hex._report(f"Failed to read stdin: {exc}")
            return 1

    data = b64hex.normalize_input(raw)
    if not data:
        b64hex._report("No input data provided.")
        parser.print_help(b64hex.sys.stderr)
        return 1

    try:
        if mode is b64hex.Mode.B64_TO_HEX:
            result = b64hex.b64_to_hex(data, args.hex_case)
        else:
            result = b64hex.hex_to_b64(data, urlsafe=args.urlsafe)
    except ValueError as exc:
        b64hex._report(f"Error: {exc}")
        return 1

    print(result)
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
