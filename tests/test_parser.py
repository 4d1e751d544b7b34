"""Tests for Turtle parsing into ordered statements."""

import unittest

import rdflib
from rdflib import BNode, Literal, URIRef
from rdflib.namespace import RDF, XSD

from rdf_form.errors import TurtleParseError
from rdf_form.inference import classify
from rdf_form.parser import parse_turtle

TURTLE = """
@prefix ex: <http://example.org/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:Paris a ex:City ;
    ex:zeta "last-declared-first" ;
    ex:alpha "second" ;
    ex:population "2148000"^^xsd:integer ;
    ex:name "Paris"@fr, "Paris"@en ;
    ex:mayor [ ex:name "Anne" ] .
ex:Paris ex:zeta "duplicate-of-nothing" .
"""


class ParseTurtleTests(unittest.TestCase):
    def test_statements_keep_document_order(self) -> None:
        statements = parse_turtle(TURTLE)
        paris = [st for st in statements if st.subject == URIRef("http://example.org/Paris")]

        predicates = [str(st.predicate).rsplit("/", 1)[-1] for st in paris]
        self.assertEqual(
            ["22-rdf-syntax-ns#type", "zeta", "alpha", "population", "name", "name", "mayor", "zeta"],
            predicates,
        )

    def test_literal_metadata_is_kept(self) -> None:
        statements = parse_turtle(TURTLE)
        objects = {str(st.predicate): st.object for st in statements}

        population = objects["http://example.org/population"]
        self.assertIsInstance(population, Literal)
        self.assertEqual(XSD.integer, population.datatype)
        self.assertEqual(RDF.type, next(st.predicate for st in statements))

    def test_literals_keep_their_lexical_form(self) -> None:
        statements = parse_turtle(
            "@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .\n"
            "<http://example.org/a> <http://example.org/flag> \"1\"^^xsd:boolean ;\n"
            "    <http://example.org/count> \"+5\"^^xsd:integer ;\n"
            "    <http://example.org/size> \"1e3\"^^xsd:double .\n"
        )
        objects = {str(st.predicate): st.object for st in statements}

        self.assertEqual("1", str(objects["http://example.org/flag"]))
        self.assertEqual("+5", str(objects["http://example.org/count"]))
        self.assertEqual("1e3", str(objects["http://example.org/size"]))

        field = classify("http://example.org/flag", objects["http://example.org/flag"])
        self.assertEqual("boolean", field.kind)
        self.assertIs(False, field.value)

    def test_literal_normalization_setting_is_restored(self) -> None:
        before = rdflib.NORMALIZE_LITERALS
        parse_turtle(TURTLE)
        with self.assertRaises(TurtleParseError):
            parse_turtle("ex:Paris a ex:City")

        self.assertEqual(before, rdflib.NORMALIZE_LITERALS)

    def test_blank_nodes_survive(self) -> None:
        statements = parse_turtle(TURTLE)

        self.assertTrue(any(isinstance(st.subject, BNode) for st in statements))

    def test_duplicates_are_reported_once(self) -> None:
        statements = parse_turtle(
            "<http://example.org/a> <http://example.org/p> 1 .\n"
            "<http://example.org/a> <http://example.org/p> 1 .\n"
        )

        self.assertEqual(1, len(statements))

    def test_relative_iris_use_base(self) -> None:
        statements = parse_turtle("<Paris> <name> \"Paris\" .", base="http://example.org/")

        self.assertEqual(URIRef("http://example.org/Paris"), statements[0].subject)

    def test_empty_document(self) -> None:
        self.assertEqual([], parse_turtle(""))

    def test_malformed_turtle_raises(self) -> None:
        with self.assertRaises(TurtleParseError):
            parse_turtle("ex:Paris a ex:City")

    def test_parse_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_turtle("<http://example.org/a> <http://example.org/p> .")


if __name__ == "__main__":
    unittest.main()
