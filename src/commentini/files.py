"""Reading and writing Documents from and to files and strings."""

from io import StringIO
from pathlib import Path
from charset_normalizer import from_bytes as read_from_bytes
from .args import Parameters
from .interface import Document
from .reader import IniReader
from .writer import IniWriter


def _decode(raw: bytes) -> str:
    """Decode bytes of unknown encoding (best guess of charset_normalizer)."""
    if (best := read_from_bytes(raw).best()) is None:
        # no plausible encoding found, let utf-8 decoding report the problem
        return raw.decode("utf-8")
    return str(best)


def loads(text: str, parameters: Parameters | None = None, **kwargs) -> Document:
    """Read a Document from a string.

    Args:
        text (str): The ini content.
        parameters (Parameters | None, optional): Parameters for reading.
            Defaults to None.
        **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.

    Returns:
        Document: The read document.
    """
    with IniReader(StringIO(text, newline=None), parameters, **kwargs) as reader:
        return reader.parse()


def dumps(document: Document, parameters: Parameters | None = None, **kwargs) -> str:
    """Write a Document to a string.

    Args:
        document (Document): The document to write.
        parameters (Parameters | None, optional): Parameters for writing.
            Defaults to None.
        **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.

    Returns:
        str: The ini content.
    """
    sink = StringIO()
    IniWriter(sink, parameters, **kwargs).write(document)
    return sink.getvalue()


def read_ini(
    path: str | Path,
    encoding: str | None = None,
    parameters: Parameters | None = None,
    **kwargs,
) -> Document:
    """Read an INI file.

    Args:
        path (str | Path): Path to the INI file.
        encoding (str | None, optional): Encoding of the file. If None, the encoding
            will be guessed. Defaults to None.
        parameters (Parameters | None, optional): Parameters for reading.
            Defaults to None.
        **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.

    Returns:
        Document: The read document.
    """
    path = Path(path)
    if encoding is None:
        stream = StringIO(_decode(path.read_bytes()), newline=None)
    else:
        stream = open(path, encoding=encoding)
    with stream:
        return IniReader(stream, parameters, **kwargs).parse()


def export(
    document: Document,
    path: str | Path,
    encoding: str = "utf-8",
    parameters: Parameters | None = None,
    **kwargs,
) -> None:
    """Export a Document to a file (the file is overwritten).

    Args:
        document (Document): The document to export.
        path (str | Path): Path to the file to export to.
        encoding (str, optional): Encoding of the file. Defaults to "utf-8".
        parameters (Parameters | None, optional): Parameters for writing.
            Defaults to None.
        **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.
    """
    with open(path, "w", encoding=encoding, newline="") as sink:
        IniWriter(sink, parameters, **kwargs).write(document)
