"""Namespace helpers used across the form engine."""
from rdflib.namespace import DCTERMS, RDF, RDFS, XSD

RDF_TYPE = str(RDF.type)
RDFS_LABEL = str(RDFS.label)
RDFS_COMMENT = str(RDFS.comment)
DCTERMS_DESCRIPTION = str(DCTERMS.description)
XSD_NS = str(XSD)

# Local names (after the XSD namespace) mapped to a field kind.
XSD_NUMERIC_TYPES = frozenset({"integer", "decimal", "double", "float"})
XSD_DATE_TYPES = frozenset({"date", "dateTime"})

__all__ = [
    "RDF_TYPE",
    "RDFS_LABEL",
    "RDFS_COMMENT",
    "DCTERMS_DESCRIPTION",
    "XSD_NS",
    "XSD_NUMERIC_TYPES",
    "XSD_DATE_TYPES",
]
