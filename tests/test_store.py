import json
import tempfile
import unittest
from pathlib import Path

from minicross.core.exceptions import ValidationError
from minicross.core.models import Layout
from minicross.engine.fallback import build_fallback_layout
from minicross.engine.generator import CrosswordGenerator, GenerationResult, GeneratorConfig
from minicross.io.layout_store import LayoutStore


class LayoutStoreTests(unittest.TestCase):
    def test_saves_and_loads_generated_layout(self) -> None:
        config = GeneratorConfig(seed=4)
        result = CrosswordGenerator(config).generate(["CAT:Feline", "CAR:Vehicle", "ART:Painting"], 3)
        with tempfile.TemporaryDirectory() as tmpdir:
            store = LayoutStore(tmpdir)
            doc_id = store.save(result, config)
            doc = json.loads((Path(tmpdir) / f"{doc_id}.json").read_text(encoding="utf-8"))
            loaded = store.load(doc_id)

        self.assertEqual(doc["status"], "generated")
        self.assertEqual(doc["attempts"], result.attempts)
        self.assertEqual(doc["layout"]["gridSize"], 7)
        self.assertEqual(doc["stats"]["words"], 3)
        self.assertEqual(doc["stats"]["letter_cells"] + doc["stats"]["blocked_cells"], 49)
        self.assertEqual(loaded, result.layout)
        self.assertEqual(loaded.clues, result.layout.clues)

    def test_marks_fallback_documents(self) -> None:
        config = GeneratorConfig(max_attempts=1)
        result = GenerationResult(layout=build_fallback_layout(), attempts=1, used_fallback=True)
        with tempfile.TemporaryDirectory() as tmpdir:
            store = LayoutStore(tmpdir)
            doc_id = store.save(result, config)
            doc = json.loads((Path(tmpdir) / f"{doc_id}.json").read_text(encoding="utf-8"))
        self.assertEqual(doc["status"], "fallback")

    def test_refuses_invalid_layout(self) -> None:
        record = build_fallback_layout().to_record()
        record["grid"][0][0] = "Q"
        broken = Layout.from_record(record)
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ValidationError):
                LayoutStore(tmpdir).save(
                    GenerationResult(layout=broken, attempts=1), GeneratorConfig()
                )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
