"""Write KML documents to numbered output files."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from loguru import logger

from xctransfer.errors import WriteError

KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

_DIGITS = re.compile(r"[0-9]+")


def _suffix_number(path: Path, prefix: str) -> int:
    """Numeric suffix of '<prefix>-<N>.kml', or 0 when it is not a number."""
    suffix = path.stem[len(prefix) + 1:]
    if not _DIGITS.fullmatch(suffix):
        return 0
    return int(suffix)


def next_output_path(output_dir: str | Path, prefix: str = "xctransfer") -> Path:
    """Return the first unused '<prefix>-<N>.kml' path in *output_dir*.

    N is one more than the largest numeric suffix already present, so
    earlier exports are never overwritten. Starts at 1.
    """
    output_dir = Path(output_dir)
    counter = 0
    for existing in output_dir.glob(f"{prefix}-*.kml"):
        counter = max(counter, _suffix_number(existing, prefix))
    return output_dir / f"{prefix}-{counter + 1}.kml"


def wrap_kml(document: ET.Element) -> ET.Element:
    """Wrap a Document element in the ``kml`` root element."""
    kml = ET.Element("kml")
    kml.set("xmlns", KML_NAMESPACE)
    kml.append(document)
    return kml


def write_kml(root: ET.Element, path: str | Path) -> Path:
    """Write *root* as 2-space indented UTF-8 KML.

    A file that fails mid-write is left in place.

    Raises:
        WriteError: The file cannot be created or written.
    """
    path = Path(path)
    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    try:
        with open(path, "wb") as fh:
            tree.write(fh, encoding="utf-8", xml_declaration=True)
            fh.write(b"\n")
    except OSError as e:
        raise WriteError(f"Cannot write {path}: {e}") from e
    logger.debug(f"Wrote {path}")
    return path
