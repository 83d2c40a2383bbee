from __future__ import annotations

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml

from hashcheck.config import ConfigError, dump_example_config, load_config
from hashcheck.config.loader import CHUNK_SIZE_ENV


class ConfigLoaderTests(unittest.TestCase):
    def test_load_config_defaults(self) -> None:
        with patch.dict(os.environ, {CHUNK_SIZE_ENV: ""}, clear=False):
            config = load_config()

        self.assertEqual(config.hashing.algorithm, "sha256")
        self.assertEqual(config.hashing.chunk_size, 8192)
        self.assertEqual(config.hashing.manifest_extension, ".sha256")
        self.assertEqual(config.logging.level, "WARNING")
        self.assertIsNone(config.logging.log_path)

    def test_load_config_applies_overrides(self) -> None:
        overrides = {
            "hashing.chunk_size": 1024,
            "logging": {"level": "debug"},
        }

        with patch.dict(os.environ, {CHUNK_SIZE_ENV: ""}, clear=False):
            config = load_config(overrides=overrides)

        self.assertEqual(config.hashing.chunk_size, 1024)
        self.assertEqual(config.logging.level, "DEBUG")
        self.assertEqual(config.hashing.manifest_extension, ".sha256")

    def test_user_file_merges_over_defaults(self) -> None:
        with TemporaryDirectory() as tmpdir:
            user = Path(tmpdir) / "hashcheck.toml"
            user.write_text('[hashing]\nmanifest_extension = ".sum"\n', encoding="utf-8")

            with patch.dict(os.environ, {CHUNK_SIZE_ENV: ""}, clear=False):
                config = load_config(user)

        self.assertEqual(config.hashing.manifest_extension, ".sum")
        self.assertEqual(config.hashing.chunk_size, 8192)

    def test_env_chunk_size_wins(self) -> None:
        with patch.dict(os.environ, {CHUNK_SIZE_ENV: "65536"}, clear=False):
            config = load_config(overrides={"hashing.chunk_size": 16})

        self.assertEqual(config.hashing.chunk_size, 65536)

    def test_invalid_values_raise_config_error(self) -> None:
        with patch.dict(os.environ, {CHUNK_SIZE_ENV: ""}, clear=False):
            with self.assertRaises(ConfigError):
                load_config(overrides={"hashing.chunk_size": 0})
            with self.assertRaises(ConfigError):
                load_config(overrides={"hashing.algorithm": "md5"})
            with self.assertRaises(ConfigError):
                load_config(overrides={"hashing.manifest_extension": "sha256"})

    def test_missing_or_malformed_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                load_config(Path(tmpdir) / "absent.yaml")

            broken = Path(tmpdir) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(broken)

            listing = Path(tmpdir) / "list.yaml"
            listing.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(listing)

    def test_unreadable_config_raises_config_error(self) -> None:
        with TemporaryDirectory() as tmpdir:
            as_directory = Path(tmpdir) / "conf.yaml"
            as_directory.mkdir()
            with self.assertRaises(ConfigError):
                load_config(as_directory)

            latin = Path(tmpdir) / "latin.yaml"
            latin.write_bytes(b"hashing:\n  manifest_extension: .s\xe9\n")
            with self.assertRaises(ConfigError):
                load_config(latin)

    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["hashing"]["chunk_size"], 8192)
        self.assertIn("logging", data)

    def test_dump_example_config_json(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "nested" / "example.json"
            dump_example_config(dest)
            data = json.loads(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["hashing"]["algorithm"], "sha256")

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()
