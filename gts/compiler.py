import json
import os
import sys
from typing import Any, Dict, List, Optional

from gts.config.options import SpeechOptions
from gts.parser.core.classes import File
from gts.parser.core.parser import parse_go_source
from gts.speech.core.phonetics import speakable_filename
from gts.speech.core.speaker import speak_file
from gts.speech.sinks import RecordingSink, UtteranceSink, build_sink

from .exceptions import ErrorCode, GoSpeechError, InternalSpeakerError
from .utils import ArtifactEncoder, TerminalColors


class SpeechPipeline:
    """
    Orchestrates one render pass from Go source text to spoken utterances.
    Stage "ast" parses the source, stage "utterances" speaks the tree and
    yields the transcript of everything that was handed to the sink.
    """

    def __init__(
        self,
        source_content: str,
        file_path: Optional[str],
        sink: UtteranceSink,
        options: Optional[SpeechOptions] = None,
        dump_stages: List[str] = [],
        stop_after_stage: Optional[str] = None,
    ):
        self.source_content = source_content
        self.file_path = os.path.abspath(file_path) if file_path else "<stdin>"
        self.sink = sink
        self.options = options or SpeechOptions()
        self.dump_stages = dump_stages
        self.stop_after_stage = stop_after_stage
        self.artifacts: Dict[str, Any] = {}
        self.results: List[Any] = []

    def run(self) -> Any:
        """
        Executes the pipeline stage by stage.
        The artifact from each stage is passed as input to the next.
        """
        try:
            # --- Stage 1: Parsing ---
            self._run_simple_stage("ast", parse_go_source, self.source_content, self.file_path)
            if self.stop_after_stage == "ast":
                return self.results[-1]

            # --- Stage 2: Speaking ---
            self._run_simple_stage("utterances", self._speak, self.results[-1])
            return self.results[-1]

        except GoSpeechError as e:
            raise e
        except Exception as e:
            import traceback

            traceback.print_exc()
            raise InternalSpeakerError(f"An unexpected internal error occurred: {e}") from e

    def _speak(self, file: File) -> List[str]:
        # The recorder forwards each utterance before keeping it, so speech is not delayed.
        recorder = RecordingSink(forward_to=self.sink)
        speak_file(file, recorder, self.options)
        return recorder.utterances

    def _run_simple_stage(self, name: str, func, *args, **kwargs) -> Any:
        """Runs a single function as a stage, storing and returning its result."""
        result = func(*args, **kwargs)
        self.artifacts[name] = result
        self.results.append(result)
        if name in self.dump_stages:
            self.save_artifact(name, result)
        return result

    def save_artifact(self, name: str, data: Any):
        """Saves an intermediate artifact to a JSON file next to the source."""

        if self.file_path == "<stdin>":
            base_name = "stdin_output"
        else:
            base_name = os.path.splitext(self.file_path)[0]

        output_path = f"{base_name}.{name}.json"

        print(f"--- Saving artifact '{name}' to {output_path} ---")

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=False, cls=ArtifactEncoder)
        except OSError as e:
            print(f"Error: Could not save artifact '{name}': {e}")


def speak_go_source(
    script_content: str,
    file_path: Optional[str] = None,
    sink: Optional[UtteranceSink] = None,
    options: Optional[SpeechOptions] = None,
    dump_stages: List[str] = [],
    stop_after_stage: Optional[str] = None,
):
    """High-level entry point: parses Go source text and speaks it."""
    options = options or SpeechOptions()
    sink = sink or build_sink(options)
    pipeline = SpeechPipeline(script_content, file_path, sink, options, dump_stages, stop_after_stage)
    return pipeline.run()


def speak_go_file(
    filename: str,
    sink: Optional[UtteranceSink] = None,
    options: Optional[SpeechOptions] = None,
    dump_stages: List[str] = [],
    stop_after_stage: Optional[str] = None,
):
    """
    Speaks a Go file from disk. A missing file is announced out loud, reported
    on stderr, and yields None without parsing anything.
    """
    options = options or SpeechOptions()
    sink = sink or build_sink(options)

    if not os.path.isfile(filename):
        sink.emit("I can't find the file named " + speakable_filename(filename))
        error = GoSpeechError(code=ErrorCode.SOURCE_FILE_NOT_FOUND, path=filename)
        print(f"{TerminalColors.RED}{error}{TerminalColors.RESET}", file=sys.stderr)
        return None

    with open(filename, "r", encoding="utf-8") as f:
        script_content = f.read()

    return speak_go_source(script_content, filename, sink, options, dump_stages, stop_after_stage)
