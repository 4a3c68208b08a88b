import json
import tempfile
import unittest
from pathlib import Path

from pipeline.manifest import ManifestError, read_manifest


class TestReadManifest(unittest.TestCase):
    def _write(self, root: Path, payload) -> Path:
        path = root / "package.json"
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return path

    def test_framework_packages_are_removed(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(
                Path(td),
                {
                    "dependencies": {
                        "react": "18.2.0",
                        "react-native": "0.73.2",
                        "lodash": "^4.17.21",
                        "@react-navigation/native": "6.1.9",
                    },
                    "devDependencies": {"jest": "29.0.0"},
                },
            )

            info = read_manifest(path)

            self.assertEqual("0.73.2", info.framework_version)
            self.assertEqual(
                {"lodash": "^4.17.21", "@react-navigation/native": "6.1.9"},
                info.dependencies,
            )
            self.assertEqual(("lodash", "@react-navigation/native"), info.dependency_names)
            self.assertEqual(path, info.path)

    def test_missing_framework_is_a_descriptive_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(Path(td), {"dependencies": {"lodash": "^4.17.21"}})
            with self.assertRaisesRegex(ManifestError, "not a React Native project"):
                read_manifest(path)

    def test_missing_dependencies_block(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(Path(td), {"name": "web-app"})
            with self.assertRaises(ManifestError):
                read_manifest(path)

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(Path(td), "{not json")
            with self.assertRaisesRegex(ManifestError, "not valid JSON"):
                read_manifest(path)

    def test_non_object_json(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(Path(td), "[]")
            with self.assertRaises(ManifestError):
                read_manifest(path)

    def test_missing_file_propagates_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                read_manifest(Path(td) / "package.json")


if __name__ == "__main__":
    unittest.main()
