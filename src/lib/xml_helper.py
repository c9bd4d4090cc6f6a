"""XML read/write helpers built on ElementTree.

TIER 1: May import from core only.

Cordova config.xml files use the W3C widgets namespace as the default
namespace; lookups here match a tag with or without that namespace.
Comments survive a read/write round trip.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from core.errors import XmlError

WIDGETS_NS = "http://www.w3.org/ns/widgets"
CORDOVA_NS = "http://cordova.apache.org/ns/1.0"
ANDROID_NS = "http://schemas.android.com/apk/res/android"

ET.register_namespace("", WIDGETS_NS)
ET.register_namespace("cdv", CORDOVA_NS)
ET.register_namespace("android", ANDROID_NS)


def read_xml(path: Path) -> ET.ElementTree:
    """Parse an XML file.

    Args:
        path: File to read.

    Returns:
        Parsed tree.

    Raises:
        XmlError: If the file is missing, unreadable or not well-formed.
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        return ET.parse(path, parser=parser)
    except (OSError, ET.ParseError) as e:
        raise XmlError(f"Cannot read {path.name}: {e}") from e


def write_xml(tree: ET.ElementTree, path: Path) -> None:
    """Write a tree back to disk with an XML declaration.

    Raises:
        XmlError: If the file cannot be written.
    """
    ET.indent(tree)
    try:
        tree.write(path, encoding="utf-8", xml_declaration=True)
    except OSError as e:
        raise XmlError(f"Cannot write {path.name}: {e}") from e


def namespace_of(element: ET.Element) -> str:
    """Return the namespace URI of an element, or "" if it has none."""
    if element.tag.startswith("{"):
        return element.tag[1:].split("}", 1)[0]
    return ""


def local_name(tag: str) -> str:
    """Strip the namespace from a tag."""
    return tag.rsplit("}", 1)[-1]


def qualify(tag: str, namespace: str) -> str:
    """Put a tag into a namespace (no-op for an empty namespace)."""
    return f"{{{namespace}}}{tag}" if namespace else tag


def find_child(parent: ET.Element, tag: str) -> ET.Element | None:
    """Find the first direct child with the given local name."""
    for child in parent:
        if isinstance(child.tag, str) and local_name(child.tag) == tag:
            return child
    return None


def remove_children(parent: ET.Element, tag: str) -> int:
    """Remove every direct child with the given local name.

    Returns:
        Number of removed children.
    """
    matches = [c for c in parent if isinstance(c.tag, str) and local_name(c.tag) == tag]
    for child in matches:
        parent.remove(child)
    return len(matches)


def read_app_name(project_root: Path) -> str | None:
    """Read the <name> of the app from the project's config.xml.

    Returns:
        App name, or None if config.xml or <name> is missing.
    """
    try:
        root = read_xml(project_root / "config.xml").getroot()
    except XmlError:
        return None

    name = find_child(root, "name")
    if name is None or not (name.text or "").strip():
        return None
    return name.text.strip()
