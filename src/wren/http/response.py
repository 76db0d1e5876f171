"""HTTP-shaped response handed back to the host."""

from dataclasses import dataclass

PLAIN_TEXT = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """A finished response: status, content type, extra headers, bytes.

    ``content_type`` is the full header value (``text/html; charset=utf-8``);
    ``mimetype`` is the bare type hosts use for platform-level type hints.
    """

    body: bytes = b""
    status: int = 200
    content_type: str = PLAIN_TEXT
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def mimetype(self) -> str:
        """Content type without parameters (``text/html``)."""
        return self.content_type.split(";", 1)[0].strip()

    def header(self, name: str) -> str | None:
        """Return the first value of header *name* (case-insensitive).

        ``Content-Type`` is answered from ``content_type``.
        """
        lowered = name.lower()
        if lowered == "content-type":
            return self.content_type
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")
