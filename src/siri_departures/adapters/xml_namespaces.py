"""Namespace handling shared by the NeTEx and SIRI XML adapters."""

import xml.etree.ElementTree as ET


def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag ("{ns}Quay" -> "Quay")."""
    return tag.rpartition("}")[2]


def strip_namespaces(root: ET.Element) -> None:
    """Rewrite every tag below root to its local name, in place."""
    for element in root.iter():
        # Comments and processing instructions have non-string tags
        if isinstance(element.tag, str):
            element.tag = local_name(element.tag)
