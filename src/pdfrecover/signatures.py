from dataclasses import dataclass

@dataclass(frozen=True)
class FileSignature:
    name: str
    ext: str
    header: bytes
    footer: bytes
    version_window: int = 8                # bytes read at a header to parse the version

    @property
    def footer_len(self) -> int:
        return len(self.footer)

# PDF: "%PDF-1.x" ... "%%EOF". A document may carry several %%EOF markers
# (incremental updates), each one closing a readable revision.
PDF = FileSignature(
    name="pdf",
    ext="pdf",
    header=b"%PDF-",
    footer=b"%%EOF",
)
