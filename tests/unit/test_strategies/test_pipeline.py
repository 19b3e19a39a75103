"""Tests for StrategyPipeline."""

import pytest

from codelingo.classifier.bayes import Classifier
from codelingo.knowledge.base import KnowledgeBase
from codelingo.knowledge.builder import build_knowledge_base
from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import NoMatchReason, StrategyName
from codelingo.strategies.pipeline import StrategyPipeline


def _file(path: str, content: str | bytes = "") -> FileInfo:
    data = content.encode() if isinstance(content, str) else content
    return FileInfo.from_bytes(path, data, max_bytes=50 * 1024)


@pytest.fixture
def pipeline(knowledge_base: KnowledgeBase) -> StrategyPipeline:
    """Pipeline with the classifier enabled."""
    return StrategyPipeline(knowledge_base, Classifier(knowledge_base))


class TestShortCircuit:
    """Test that the most authoritative strategy decides."""

    def test_filename_is_authoritative(self, pipeline: StrategyPipeline) -> None:
        """A declared filename wins over extension and shebang."""
        result = pipeline.identify(_file("Dockerfile", "#!/usr/bin/env python3\n"))
        assert result.language == "Dockerfile"
        assert result.strategy == StrategyName.FILENAME

    def test_filename_wins_for_binary_content(self, pipeline: StrategyPipeline) -> None:
        """Filename matches are not affected by binary content."""
        result = pipeline.identify(_file("Rakefile", b"\x00\x01"))
        assert result.language == "Ruby"

    def test_shebang(self, pipeline: StrategyPipeline) -> None:
        """Interpreters decide files without an extension."""
        result = pipeline.identify(_file("bin/tool", "#!/usr/bin/env ruby\nputs 1\n"))
        assert result.language == "Ruby"
        assert result.strategy == StrategyName.SHEBANG

    def test_shebang_before_extension(self, pipeline: StrategyPipeline) -> None:
        """A shebang decides before the extension is consulted."""
        result = pipeline.identify(_file("tool.rb", "#!/usr/bin/python3\nprint(1)\n"))
        assert result.language == "Python"
        assert result.strategy == StrategyName.SHEBANG

    def test_single_extension(self, pipeline: StrategyPipeline) -> None:
        """An extension owned by one language decides."""
        result = pipeline.identify(_file("main.py", "print('hello')\n"))
        assert result.language == "Python"
        assert result.strategy == StrategyName.EXTENSION

    def test_modeline(self, pipeline: StrategyPipeline) -> None:
        """A modeline decides among shared-extension candidates."""
        result = pipeline.identify(_file("a.h", "// vim: set ft=cpp:\nint x;\n"))
        assert result.language == "C++"
        assert result.strategy == StrategyName.MODELINE

    def test_modeline_without_extension(self, pipeline: StrategyPipeline) -> None:
        """Modelines also decide files without a known extension."""
        result = pipeline.identify(_file("notes", "# -*- mode: ruby -*-\nputs 1\n"))
        assert result.language == "Ruby"
        assert result.strategy == StrategyName.MODELINE

    def test_heuristics(self, pipeline: StrategyPipeline) -> None:
        """Heuristics decide shared extensions."""
        result = pipeline.identify(_file("Foo.h", "@interface Foo : NSObject\n@end\n"))
        assert result.language == "Objective-C"
        assert result.strategy == StrategyName.HEURISTICS


class TestNoMatch:
    """Test NoMatch outcomes."""

    def test_unknown_extension(self, pipeline: StrategyPipeline) -> None:
        """Nothing recognized yields NoMatch(unknown), never a guess."""
        result = pipeline.identify(_file("data.xyz", "hello world\n"))
        assert result.is_match is False
        assert result.reason == NoMatchReason.UNKNOWN
        assert result.candidates == []

    def test_binary_content(self, pipeline: StrategyPipeline) -> None:
        """Binary content yields NoMatch(binary)."""
        result = pipeline.identify(_file("main.py", b"\x7fELF\x00\x00"))
        assert result.reason == NoMatchReason.BINARY

    def test_ambiguous_without_classifier(self, knowledge_base: KnowledgeBase) -> None:
        """Without a classifier the remaining candidates are reported."""
        pipeline = StrategyPipeline(knowledge_base)
        result = pipeline.identify(_file("a.h", "int x;\n"))
        assert result.reason == NoMatchReason.AMBIGUOUS
        assert result.candidates == ["C", "C++", "Objective-C"]

    def test_ambiguous_without_models(self, knowledge_base: KnowledgeBase) -> None:
        """Candidates without classifier models stay ambiguous."""
        pipeline = StrategyPipeline(knowledge_base, Classifier(knowledge_base))
        ruby_or_python = CandidateSet(
            [*knowledge_base.by_extension(".rb"), *knowledge_base.by_extension(".py")]
        )
        assert pipeline.classifier is not None
        assert pipeline.classifier.classify("x = 1", ruby_or_python) is None

    def test_single_language_knowledge_base(self) -> None:
        """With one known language, unrelated files are still unknown."""
        knowledge_base = build_knowledge_base(
            {"languages": {"Zig": {"type": "programming", "extensions": [".zig"]}}}
        )
        pipeline = StrategyPipeline(knowledge_base)

        unknown = pipeline.identify(_file("main.py", "print(1)\n"))
        assert unknown.language is None
        assert unknown.reason == NoMatchReason.UNKNOWN

        matched = pipeline.identify(_file("main.zig", "const x = 1;\n"))
        assert matched.language == "Zig"
        assert matched.strategy == StrategyName.EXTENSION


class TestClassifierFallback:
    """Test the statistical fallback."""

    def test_classifier_decides_remaining_candidates(self, pipeline: StrategyPipeline) -> None:
        """The classifier picks among the candidates left by the rules."""
        result = pipeline.identify(_file("main.h", "int main(void) { return 0; }\n"))
        assert result.language == "C"
        assert result.strategy == StrategyName.CLASSIFIER

    def test_deterministic(self, pipeline: StrategyPipeline) -> None:
        """Identical input gives identical output."""
        file = _file("main.h", "int value;\nstd::string name;\n")
        assert pipeline.identify(file) == pipeline.identify(file)


class TestBundledScenarios:
    """End-to-end scenarios over the bundled definitions."""

    @pytest.fixture
    def bundled(self, bundled_knowledge_base: KnowledgeBase) -> StrategyPipeline:
        return StrategyPipeline(bundled_knowledge_base, Classifier(bundled_knowledge_base))

    @pytest.mark.parametrize(
        ("path", "content", "language", "strategy"),
        [
            ("main.py", "print('hello')\n", "Python", StrategyName.EXTENSION),
            ("Foo.h", "@interface Foo : NSObject\n@end\n", "Objective-C", StrategyName.HEURISTICS),
            ("bin/deploy", "#!/usr/bin/env ruby\nputs 1\n", "Ruby", StrategyName.SHEBANG),
            ("Dockerfile", "FROM python:3.12\n", "Dockerfile", StrategyName.FILENAME),
            ("Makefile", "all:\n\tcc main.c\n", "Makefile", StrategyName.FILENAME),
            ("list.h", "#include <vector>\nstd::vector<int> v;\n", "C++", StrategyName.HEURISTICS),
            ("util.h", "int add(int a, int b);\n", "C", StrategyName.HEURISTICS),
            ("main.pl", "use strict;\nmy $x = 1;\n", "Perl", StrategyName.HEURISTICS),
            ("family.pl", "parent(tom, bob).\nfoo(X) :- parent(X, _).\n", "Prolog",
             StrategyName.HEURISTICS),
            ("app_de.ts", '<?xml version="1.0"?>\n<TS version="2.1">\n', "XML",
             StrategyName.HEURISTICS),
            ("app.ts", "const x: number = 1;\n", "TypeScript", StrategyName.HEURISTICS),
            ("plot.m", "% plot data\nplot(x, y);\n", "MATLAB", StrategyName.HEURISTICS),
            ("run", "#!/bin/sh\nexec python3 \"$0\" \"$@\"\n", "Python", StrategyName.SHEBANG),
            ("types.d.ts", "declare const x: number;\n", "TypeScript", StrategyName.HEURISTICS),
        ],
    )
    def test_scenarios(
        self,
        bundled: StrategyPipeline,
        path: str,
        content: str,
        language: str,
        strategy: StrategyName,
    ) -> None:
        """Files are identified by the expected stage."""
        result = bundled.identify(_file(path, content))
        assert result.language == language
        assert result.strategy == strategy

    def test_unknown_extension(self, bundled: StrategyPipeline) -> None:
        """Unrecognized files are reported under unknown."""
        result = bundled.identify(_file("notes.zzz", "nothing to see\n"))
        assert result.reason == NoMatchReason.UNKNOWN

    def test_classifier_only_sees_candidates(self, bundled: StrategyPipeline) -> None:
        """The classifier never returns a language outside the candidates."""
        result = bundled.identify(_file("solve.m", "x = 1;\ny = x + 2;\n"))
        assert result.strategy == StrategyName.CLASSIFIER
        assert result.language in {"MATLAB", "Mercury", "Objective-C"}

    def test_heuristic_order_determinism(self, bundled: StrategyPipeline) -> None:
        """Content matching several rules resolves to the first rule's language."""
        content = "#import <Foundation/Foundation.h>\n#include <vector>\n"
        first = bundled.identify(_file("mixed.h", content))
        second = bundled.identify(_file("mixed.h", content))
        assert first.language == "Objective-C"
        assert first == second
