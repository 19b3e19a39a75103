"""Tests for the Linguist facade."""

from pathlib import Path, PurePosixPath

import pytest

from codelingo.config.models import ClassifierConfig, Config, DefinitionsConfig
from codelingo.errors import MalformedDefinitionError
from codelingo.knowledge.base import KnowledgeBase
from codelingo.linguist import Linguist
from codelingo.models.results import NoMatchReason, StrategyName


class TestIdentifyFile:
    """Test Linguist.identify_file."""

    def test_bytes_content(self, linguist: Linguist) -> None:
        """Byte content is identified."""
        result = linguist.identify_file("src/main.py", b"print(1)\n")
        assert result.language == "Python"
        assert result.strategy == StrategyName.EXTENSION

    def test_text_content(self, linguist: Linguist) -> None:
        """Text content is encoded before identification."""
        result = linguist.identify_file("bin/tool", "#!/usr/bin/env ruby\nputs 1\n")
        assert result.language == "Ruby"
        assert result.strategy == StrategyName.SHEBANG

    def test_pure_path(self, linguist: Linguist) -> None:
        """PurePath arguments are accepted."""
        result = linguist.identify_file(PurePosixPath("app/Dockerfile"), b"FROM alpine\n")
        assert result.path == "app/Dockerfile"
        assert result.language == "Dockerfile"

    def test_vendored_files_are_identified(self, linguist: Linguist) -> None:
        """Exclusion rules do not affect single file identification."""
        result = linguist.identify_file("node_modules/lib/index.js", b"module.exports = 1;\n")
        assert result.language == "JavaScript"

    def test_binary(self, linguist: Linguist) -> None:
        """Binary content gives a NoMatch."""
        result = linguist.identify_file("blob.py", b"\x00\x01\x02binary")
        assert result.reason == NoMatchReason.BINARY


class TestClassifierConfig:
    """Test classifier enablement."""

    def test_enabled_by_default(self, linguist: Linguist) -> None:
        """Bundled definitions carry training data."""
        assert linguist.classifier is not None

    def test_disabled_leaves_ambiguity(self, bundled_knowledge_base: KnowledgeBase) -> None:
        """Without the classifier, unresolved candidates are reported."""
        config = Config(classifier=ClassifierConfig(enabled=False))
        linguist = Linguist(bundled_knowledge_base, config)

        result = linguist.identify_file("script.m", b"x = 1;\ny = x + 2;\n")

        assert linguist.classifier is None
        assert result.reason == NoMatchReason.AMBIGUOUS
        assert result.candidates == ["MATLAB", "Mercury", "Objective-C"]

    def test_enabled_resolves_ambiguity(self, linguist: Linguist) -> None:
        """The classifier picks one of the remaining candidates."""
        result = linguist.identify_file("script.m", b"x = 1;\ny = x + 2;\n")
        assert result.strategy == StrategyName.CLASSIFIER
        assert result.language in {"MATLAB", "Mercury", "Objective-C"}


class TestIsVendored:
    """Test Linguist.is_vendored."""

    @pytest.mark.parametrize(
        "path",
        ["node_modules/react/index.js", "dist/app.js", "docs/index.md", "assets/app.min.js"],
    )
    def test_excluded(self, linguist: Linguist, path: str) -> None:
        """Vendored, generated and documentation paths are excluded."""
        assert linguist.is_vendored(path)

    @pytest.mark.parametrize("path", ["src/app.js", "lib/util.py", "cmd/main.go"])
    def test_counted(self, linguist: Linguist, path: str) -> None:
        """Ordinary source paths are counted."""
        assert not linguist.is_vendored(path)


class TestAnalyzeTree:
    """Test Linguist.analyze_tree."""

    def test_in_memory_tree(self, linguist: Linguist) -> None:
        """A mapping lookup works as a content provider."""
        files = {
            "src/app.py": b"import os\nprint(os.getcwd())\n",
            "src/lib.rs": b"fn main() {}\n",
            "node_modules/x/index.js": b"module.exports = {};\n",
        }
        report = linguist.analyze_tree(files, files.get)

        assert set(report.languages) == {"Python", "Rust"}
        assert report.excluded.files == 1
        assert report.primary_language == "Python"


class TestFromConfig:
    """Test building from configuration."""

    def test_default_definitions(self) -> None:
        """Without a directory the bundled definitions are used."""
        linguist = Linguist.from_config()
        assert "Python" in linguist.knowledge_base

    def test_custom_definitions(self, tmp_path: Path) -> None:
        """Definitions are loaded from the configured directory."""
        (tmp_path / "languages.yml").write_text(
            "Zig:\n  type: programming\n  extensions: ['.zig']\n"
        )
        config = Config(definitions=DefinitionsConfig(directory=tmp_path))

        linguist = Linguist.from_config(config)

        assert len(linguist.knowledge_base) == 1
        assert linguist.classifier is None
        assert linguist.identify_file("main.zig", b"const std = @import(\"std\");").language == "Zig"
        assert linguist.identify_file("main.py", b"print(1)").reason == NoMatchReason.UNKNOWN

    def test_malformed_definitions(self, tmp_path: Path) -> None:
        """Invalid definitions fail the build."""
        (tmp_path / "languages.yml").write_text("Zig:\n  type: spaceship\n")
        config = Config(definitions=DefinitionsConfig(directory=tmp_path))

        with pytest.raises(MalformedDefinitionError):
            Linguist.from_config(config)
