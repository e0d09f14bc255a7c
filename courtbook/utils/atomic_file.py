from __future__ import annotations
import io, json, os, tempfile

__all__ = ["atomic_write_text", "write_json_atomic", "read_json"]


def atomic_write_text(path: str, text: str, encoding: str = "utf-8") -> None:
    """
    Escritura atómica por reemplazo: escribe en un archivo temporal del mismo
    directorio, hace fsync y luego os.replace(). Un lector nunca ve un archivo a medias.
    """
    d = os.path.dirname(path) or "."
    os.makedirs(d, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp-", dir=d)
    try:
        with io.open(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)


def write_json_atomic(path: str, obj, ensure_ascii: bool = False, indent: int | None = 2) -> None:
    """
    Serializa a JSON y escribe de forma atómica.
    """
    s = json.dumps(obj, ensure_ascii=ensure_ascii, indent=indent)
    atomic_write_text(path, s)


def read_json(path: str, default=None):
    """
    Lee un JSON completo; si el archivo no existe devuelve ``default``.
    Errores de parseo se propagan (json.JSONDecodeError).
    """
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
