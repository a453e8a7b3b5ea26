"""Integration tests for the full extraction run.

A synthetic game-data source stands in for the ``minecraft-data`` package, so
these tests exercise loading, normalization, extraction and file output
without the real data tables.
"""

import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from mcdata_extractor import DataDependencyError
from mcdata_extractor.data.provider import GameData
from mcdata_extractor.export.export_manager import OUTPUT_FILES
from mcdata_extractor.main import MinecraftDataExtractor, main


@pytest.fixture
def output_dir(tmp_path):
    """Output directory that does not exist yet."""
    return tmp_path / "nested" / "minecraft_data_output"


@pytest.fixture
def missing_config(tmp_path):
    return tmp_path / "missing.yaml"


@pytest.mark.integration
class TestExtractionPipeline:
    """End-to-end runs of MinecraftDataExtractor."""

    @pytest.fixture
    def extractor(self, missing_config, output_dir, game_data):
        loader = Mock(return_value=game_data)
        return MinecraftDataExtractor(
            missing_config,
            overrides={"output_dir": output_dir},
            loader=loader,
            console=Console(record=True, width=80),
        )

    def test_run_writes_every_file(self, extractor, output_dir):
        """Test that all eight category files are written to a fresh directory."""
        counts = extractor.run()

        assert output_dir.is_dir()
        assert sorted(p.name for p in output_dir.iterdir()) == sorted(OUTPUT_FILES)
        assert counts == {
            "crafting_recipes.json": 3,
            "effects.json": 2,
            "items.json": 9,
            "foods.json": 1,
            "brewing_ingredients.json": 2,
            "biomes.json": 2,
            "enchantments.json": 2,
            "entities.json": 1,
        }
        extractor.loader.assert_called_once_with("1.21.8", "pc")

    def test_crafting_recipes_file(self, extractor, output_dir):
        """Test the deduplicated, generalized recipe output."""
        extractor.run()

        recipes = json.loads((output_dir / "crafting_recipes.json").read_text(encoding="utf-8"))
        assert recipes == [
            {
                "resultingItem": {"item": "oak_planks", "itemCount": 4},
                "type": "shaped",
                "pattern": [["logs", "empty"], ["empty", "empty"]],
            },
            {
                "resultingItem": {"item": "crafting_table", "itemCount": 1},
                "type": "shaped",
                "pattern": [["planks", "planks"], ["planks", "planks"]],
            },
            {
                "resultingItem": {"item": "sugar", "itemCount": 1},
                "type": "shapeless",
                "ingredients": ["stick"],
            },
        ]

    def test_foods_file(self, extractor, output_dir):
        extractor.run()

        foods = json.loads((output_dir / "foods.json").read_text(encoding="utf-8"))
        assert foods == [{"name": "apple", "hungerBarsRestored": 2.0, "saturation": 2.4}]

    def test_summary_is_printed(self, extractor):
        """Test the per-category summary table."""
        extractor.run()

        summary = extractor.console.export_text()
        assert "Crafting Recipes" in summary
        assert "Brewing Ingredients" in summary
        assert "Entities" in summary

    def test_cli_overrides_config(self, missing_config, output_dir, game_data):
        loader = Mock(return_value=game_data)
        extractor = MinecraftDataExtractor(
            missing_config,
            overrides={"version": "1.20.1", "edition": "bedrock", "output_dir": output_dir},
            loader=loader,
            console=Console(record=True),
        )
        extractor.run()

        loader.assert_called_once_with("1.20.1", "bedrock")


@pytest.mark.integration
class TestCommandLine:
    """Exit codes and error reporting of main()."""

    def test_success_exit_code(self, missing_config, output_dir, game_data):
        with patch("mcdata_extractor.main.load_game_data", return_value=game_data):
            code = main(["--config", str(missing_config), "--output-dir", str(output_dir)])

        assert code == 0
        assert (output_dir / "entities.json").exists()

    def test_missing_dependency_exit_code(self, missing_config, output_dir, capsys):
        """Test that a missing data package prints the install hint and exits 1."""
        with patch.dict(sys.modules, {"minecraft_data": None}):
            code = main(["--config", str(missing_config), "--output-dir", str(output_dir)])

        assert code == 1
        err = capsys.readouterr().err
        assert "pip install minecraft-data" in err
        assert "Traceback" not in err
        assert not output_dir.exists()

    def test_unexpected_error_prints_trace(self, missing_config, output_dir, capsys):
        """Test that other failures print the message and a traceback."""
        broken = GameData(version="1.21.8", recipes={"1": [{"ingredients": [None]}]})
        with patch("mcdata_extractor.main.load_game_data", return_value=broken):
            code = main(["--config", str(missing_config), "--output-dir", str(output_dir)])

        assert code == 1
        err = capsys.readouterr().err
        assert "no item name" in err
        assert "Traceback" in err

    def test_malformed_recipes_table_prints_trace(self, missing_config, output_dir, capsys):
        """Test that a recipes table of the wrong shape fails with a traceback."""
        source = SimpleNamespace(version="1.21.8", items=[], recipes=[{"inShape": [[1]]}])
        package = Mock(return_value=source)
        with patch.dict(sys.modules, {"minecraft_data": package}):
            code = main(["--config", str(missing_config), "--output-dir", str(output_dir)])

        assert code == 1
        package.assert_called_once_with("1.21.8", "pc")
        err = capsys.readouterr().err
        assert "recipes table must be a mapping" in err
        assert "Traceback" in err
        assert not output_dir.exists()

    def test_write_failure_aborts(self, missing_config, tmp_path, game_data):
        """Test that an unusable output path fails the run."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with patch("mcdata_extractor.main.load_game_data", return_value=game_data):
            code = main(["--config", str(missing_config), "--output-dir", str(blocker / "out")])

        assert code == 1

    def test_data_dependency_error_from_loader(self, missing_config, output_dir, capsys):
        with patch("mcdata_extractor.main.load_game_data",
                   side_effect=DataDependencyError("no data for version '0.0'")):
            code = main(["--config", str(missing_config), "--mc-version", "0.0",
                         "--output-dir", str(output_dir)])

        assert code == 1
        assert "no data for version" in capsys.readouterr().err

    def test_invalid_argument(self):
        with pytest.raises(SystemExit):
            main(["--edition", "console"])


def test_module_entry_point_exists():
    """Test that ``python -m mcdata_extractor`` has an entry module."""
    import mcdata_extractor.__main__ as entry
    assert entry.main is main
    assert Path(entry.__file__).name == "__main__.py"
