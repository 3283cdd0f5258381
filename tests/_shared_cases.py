"""Centralized YCF source cases used across scanner/outline tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class YcfCase:
    name: str
    source: str
    # No advisory diagnostics expected.
    scans_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


SCANNER_CASES: tuple[YcfCase, ...] = (
    YcfCase(name="empty_document", source=""),
    YcfCase(name="single_pair", source="a = 1\n"),
    YcfCase(name="nested_map_with_dotted_key", source='key = { a.b = "x\\n" }'),
    YcfCase(
        name="server_config",
        source=_dedent(
            """
            // service settings
            server.host = "localhost"
            server = {
                port = 8080
                tls.enabled = true
                ciphers = ["aes" "chacha"] // preferred first
            }
            limits = { max = 0x1_F min = -1.5e-3 mask = 0b1010 mode = 0o755 }
            fallback = null
            """
        ),
    ),
    YcfCase(
        name="arrays_of_maps",
        source=_dedent(
            """
            items = [
                { name = "a" }
                { name = "b" tags = [] }
            ]
            """
        ),
    ),
    YcfCase(
        name="string_escapes",
        source=r'text = "tab\t nul\0 quote\" slash\\ byte\x41 smile\u{1F600}"' + "\n",
    ),
    YcfCase(name="unicode_content", source='greeting = "héllo 😀" // ünïcode\n'),
    YcfCase(name="comma_separated_array", source="a = [1, 2, 3]\n", scans_cleanly=False),
    YcfCase(name="invalid_escape", source='a = "bad \\q escape"\n', scans_cleanly=False),
    YcfCase(name="unterminated_string", source='a = "never closed\nb = 2\n', scans_cleanly=False),
    YcfCase(name="unterminated_map", source="a = { b = [1 2", scans_cleanly=False),
    YcfCase(name="stray_characters", source="a = 1 ; b = @2\n", scans_cleanly=False),
)
