"""Tests for the configuration-bound form engine."""

import unittest

from rdflib import Literal, Namespace
from rdflib.namespace import RDF, RDFS, XSD

from rdf_form.config import EngineConfig
from rdf_form.engine import FormEngine
from rdf_form.structures import Statement

EX = Namespace("http://example.org/")

STATEMENTS = [
    Statement(EX.Paris, RDF.type, EX.City),
    Statement(EX.City, RDFS.label, Literal("Ville", lang="fr")),
    Statement(EX.City, RDFS.label, Literal("City", lang="en")),
    Statement(EX.Paris, EX.abstract, Literal("a" * 130)),
    Statement(EX.Paris, EX.founded, Literal("0052-01-01", datatype=XSD.date)),
]


class FormEngineTests(unittest.TestCase):
    def test_engines_with_different_preferences_coexist(self) -> None:
        french = FormEngine(EngineConfig(languages=("fr", "en"), textarea_threshold=120))
        english = FormEngine(EngineConfig(languages=("en",), textarea_threshold=140))

        fr_model = french.describe(STATEMENTS, str(EX.Paris))
        en_model = english.describe(STATEMENTS, str(EX.Paris))

        self.assertEqual("Ville", fr_model.types[0].label)
        self.assertEqual("City", en_model.types[0].label)
        self.assertEqual("textarea", fr_model.fields[str(EX.abstract)].kind)
        self.assertEqual("string", en_model.fields[str(EX.abstract)].kind)

    def test_exclude_rdf_type_default_and_override(self) -> None:
        engine = FormEngine(EngineConfig(exclude_rdf_type=True))

        self.assertNotIn(str(RDF.type), engine.build_fields(STATEMENTS, str(EX.Paris)))
        self.assertIn(
            str(RDF.type),
            engine.build_fields(STATEMENTS, str(EX.Paris), exclude_rdf_type=False),
        )

    def test_describe_empty(self) -> None:
        model = FormEngine().describe([], str(EX.Paris))

        self.assertEqual({}, model.fields)
        self.assertEqual([], model.types)
        self.assertTrue(model.is_empty)

    def test_classify_uses_threshold(self) -> None:
        engine = FormEngine(EngineConfig(textarea_threshold=5))

        self.assertEqual("textarea", engine.classify(str(EX.note), Literal("abcdef")).kind)

    def test_pick_best_literal_uses_languages(self) -> None:
        engine = FormEngine(EngineConfig(languages=("EN",)))

        self.assertEqual(("en",), engine.languages)
        self.assertEqual(
            "City",
            engine.pick_best_literal([Literal("Ville", lang="fr"), Literal("City", lang="en")]),
        )

    def test_new_store_starts_from_fields(self) -> None:
        engine = FormEngine()
        fields = engine.build_fields(STATEMENTS, str(EX.Paris))

        store = engine.new_store(fields)

        self.assertEqual("0052-01-01", store.get(str(EX.founded)).value)


if __name__ == "__main__":
    unittest.main()
