"""
Save the assembled document to disk.

The package is serialized in memory, its zip members are rewritten with a
fixed timestamp so that identical input produces identical bytes, and the
result is written to a temporary file that replaces the destination only once
it is complete.
"""

import io
import os
import stat
import tempfile
import zipfile
from pathlib import Path
from typing import Union

from docx.document import Document as DocumentObject

from ..exceptions import WriteError

# Earliest timestamp representable in a zip header
_FIXED_ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


def save_document(document: DocumentObject, destination: Union[str, Path]) -> Path:
    """
    Write a document to ``destination``, overwriting any existing file.

    Args:
        document: python-docx Document to save
        destination: Output file path

    Returns:
        The destination path

    Raises:
        WriteError: If the destination cannot be created or written
    """
    destination = Path(destination)
    payload = _normalize_package(_serialize(document))

    directory = destination.parent
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='wb', dir=directory, prefix=f".{destination.name}.", suffix='.tmp', delete=False
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_path, _output_mode(destination))
        os.replace(tmp_path, destination)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise WriteError(f"Failed to write {destination}: {e}", path=str(destination)) from e

    return destination


def _serialize(document: DocumentObject) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _output_mode(destination: Path) -> int:
    """Permission bits for the output: those of the file being replaced, else 0666 minus the umask."""
    if destination.is_file():
        return stat.S_IMODE(destination.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _normalize_package(data: bytes) -> bytes:
    """Rewrite zip members with a fixed timestamp and permissions, keeping their order."""
    output = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(data)) as source, \
            zipfile.ZipFile(output, 'w', zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            member = zipfile.ZipInfo(info.filename, date_time=_FIXED_ZIP_TIMESTAMP)
            member.compress_type = zipfile.ZIP_DEFLATED
            member.external_attr = 0o644 << 16
            target.writestr(member, source.read(info.filename))
    return output.getvalue()
