import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import gts.compiler
from gts.compiler import SpeechPipeline, speak_go_file, speak_go_source
from gts.config.options import SpeechOptions
from gts.exceptions import ErrorCode, GoSpeechError, InternalSpeakerError
from gts.parser.core.classes import File
from gts.speech.sinks import RecordingSink
from gts.utils import ArtifactEncoder

HELLO_SOURCE = """package main

import "fmt"

func main() {
	fmt.Println("hello")
}
"""

HELLO_UTTERANCES = [
    "package main",
    "imports",
    "fumt",
    "declarations",
    "function main",
    "taking  no parameters",
    "and returning  no values",
    "function body",
    "fumt",
    "dot",
    "print line",
    "of",
    '"hello"',
    "end function main",
]


@pytest.fixture
def create_files(tmp_path):
    """A factory fixture to create source files in a temporary directory."""

    def _create_files(file_dict):
        for name, content in file_dict.items():
            file_path = tmp_path / name
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content)
        return tmp_path

    return _create_files


def test_speak_go_source_end_to_end():
    sink = RecordingSink()
    transcript = speak_go_source(HELLO_SOURCE, sink=sink)
    assert sink.utterances == HELLO_UTTERANCES
    assert transcript == HELLO_UTTERANCES


def test_skip_imports_option():
    sink = RecordingSink()
    speak_go_source(HELLO_SOURCE, sink=sink, options=SpeechOptions(skip_imports=True))
    assert sink.utterances[:2] == ["package main", "declarations"]


def test_speak_go_file(create_files):
    root = create_files({"hello.go": HELLO_SOURCE})
    sink = RecordingSink()
    assert speak_go_file(str(root / "hello.go"), sink=sink) == HELLO_UTTERANCES


def test_missing_file_is_announced(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    sink = RecordingSink()

    assert speak_go_file("missing.go", sink=sink) is None
    assert sink.utterances == ["I can't find the file named missing dot go"]
    assert "File missing.go does not exist" in capsys.readouterr().err


def test_syntax_error_stops_before_speaking():
    sink = RecordingSink()
    with pytest.raises(GoSpeechError) as excinfo:
        speak_go_source("package main\nfunc 1() {}\n", sink=sink)

    assert excinfo.value.code == ErrorCode.SYNTAX_UNEXPECTED_TOKEN
    assert sink.utterances == []


def test_stop_after_ast_returns_the_tree():
    sink = RecordingSink()
    result = speak_go_source(HELLO_SOURCE, sink=sink, stop_after_stage="ast")
    assert isinstance(result, File)
    assert sink.utterances == []


@pytest.mark.parametrize("stage", ["ast", "utterances"])
def test_stage_artifacts_are_saved(create_files, stage):
    root = create_files({"hello.go": HELLO_SOURCE})
    speak_go_file(str(root / "hello.go"), sink=RecordingSink(), dump_stages=[stage], stop_after_stage=stage)

    artifact_path = root / f"hello.{stage}.json"
    assert artifact_path.exists()
    artifact = json.loads(artifact_path.read_text())
    if stage == "ast":
        assert artifact["node_type"] == "file"
        assert artifact["imports"][0]["path"] == "fmt"
    else:
        assert artifact == HELLO_UTTERANCES


def test_utterances_reach_the_sink_while_speaking():
    seen_before_finish = []

    class WatchingSink(RecordingSink):
        def emit(self, utterance):
            super().emit(utterance)
            seen_before_finish.append(len(pipeline.results))

    sink = WatchingSink()
    pipeline = SpeechPipeline(HELLO_SOURCE, None, sink)
    pipeline.run()

    # Every utterance arrived while only the "ast" stage had finished.
    assert seen_before_finish == [1] * len(HELLO_UTTERANCES)


def test_unexpected_failure_is_wrapped(monkeypatch):
    def broken_speak_file(*args, **kwargs):
        raise ValueError("boom")

    monkeypatch.setattr(gts.compiler, "speak_file", broken_speak_file)
    with pytest.raises(InternalSpeakerError):
        speak_go_source(HELLO_SOURCE, sink=RecordingSink())


def test_artifact_encoder_dumps_tree_nodes():
    tree = speak_go_source(HELLO_SOURCE, sink=RecordingSink(), stop_after_stage="ast")

    encoded = json.loads(json.dumps({"tree": tree}, cls=ArtifactEncoder))
    assert encoded["tree"]["package"]["name"] == "main"

    with pytest.raises(TypeError):
        json.dumps({"tokens": {"a"}}, cls=ArtifactEncoder)


def test_statements_without_a_phrase_are_skipped():
    source = """package main

func main() {
	switch x {
	case 1:
		c <- x
	}
loop:
	for {
		break loop
	}
}
"""
    sink = RecordingSink()
    speak_go_source(source, sink=sink)

    assert sink.utterances == [
        "package main",
        "imports",
        "declarations",
        "function main",
        "taking  no parameters",
        "and returning  no values",
        "function body",
        "end function main",
    ]
