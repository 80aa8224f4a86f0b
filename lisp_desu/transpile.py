"""Whole-file transpile API: read the source, render it, write it once."""

from pathlib import Path
from typing import Optional, Union

from .render import render

DEFAULT_EXTENSION = ".py"

PathLike = Union[str, Path]


class TranspileError(RuntimeError):
    pass


class TranspileIOError(TranspileError):
    pass


def transpile(src: str) -> str:
    """Render S-expression source text into call-expression text."""
    return render(src)


def default_output_path(input_path: PathLike) -> Path:
    """Input file stem with DEFAULT_EXTENSION, in the current directory."""
    return Path(Path(input_path).stem + DEFAULT_EXTENSION)


def read_source(path: PathLike) -> str:
    """Read a whole source file as UTF-8, wrapping failures in TranspileIOError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TranspileIOError(f"cannot read {path}: {exc}") from exc


def transpile_file(input_path: PathLike, output_path: Optional[PathLike] = None) -> str:
    """Transpile input_path into output_path and return the rendered text.

    Args:
        input_path: Source file, read whole as UTF-8
        output_path: Destination; defaults to default_output_path(input_path)

    Parse errors propagate before the output file is created. Read and
    write failures raise TranspileIOError.
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path is not None else default_output_path(input_path)

    out = transpile(read_source(input_path))

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(out)
            f.flush()
    except OSError as exc:
        raise TranspileIOError(f"cannot write {output_path}: {exc}") from exc

    return out
