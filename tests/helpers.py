"""Test doubles and builders shared across the test suite."""

import json

import httpx

SAMPLE_PDF_TEXT = "Information security policy"


def reply_body(text: str) -> dict:
    """A well-formed generateContent response body."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeEndpoint:
    """Scripted generateContent endpoint for httpx.MockTransport.

    Each script entry is either a ``(status, body)`` tuple or an exception
    to raise. The last entry repeats once the script runs out.
    """

    def __init__(self, script: list[tuple[int, dict | str] | Exception]) -> None:
        self._script = script
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def prompts(self) -> list[str]:
        return [
            json.loads(request.content)["contents"][0]["parts"][0]["text"]
            for request in self.requests
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self._script[min(len(self.requests), len(self._script)) - 1]
        if isinstance(entry, Exception):
            raise entry
        status_code, body = entry
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def build_text_pdf(text: str) -> bytes:
    """Assemble a one-page PDF showing ``text`` in Helvetica."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>"
        ),
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


