"""
Utterance sinks: the consumers of the utterance stream produced by the speakers.

A sink receives each utterance as soon as the traversal produces it. The
speakers never look at what a sink does with it, so "quiet" mode and the
choice of speech command live entirely here.
"""

import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from gts.config.options import SpeechOptions
from gts.exceptions import ErrorCode
from gts.utils import TerminalColors


class UtteranceSink(ABC):
    """Interface for anything that consumes utterances in render order."""

    @abstractmethod
    def emit(self, utterance: str) -> None:
        """Consume one utterance.

        Args:
            utterance: The text to be spoken.
        """
        pass


class SayCommandSink(UtteranceSink):
    """
    Speaks each utterance by running an external text-to-speech command
    (macOS `say` by default) and waiting for it to finish.
    A failed run is reported and counted; it never stops the caller.
    """

    def __init__(
        self,
        command: str = "say",
        voice: Optional[str] = None,
        rate: Optional[int] = None,
        quiet: bool = False,
        verbose: bool = False,
    ):
        self.command = command
        self.voice = voice
        self.rate = rate
        self.quiet = quiet
        self.verbose = verbose
        self.failures = 0

    def build_command(self, utterance: str) -> List[str]:
        cmd = [self.command]
        if self.voice:
            cmd += ["-v", self.voice]
        if self.rate:
            cmd += ["-r", str(self.rate)]
        cmd.append(utterance)
        return cmd

    def emit(self, utterance: str) -> None:
        if self.quiet or not utterance:
            return

        if self.verbose:
            print(f"Saying: {utterance}")

        try:
            subprocess.run(self.build_command(utterance), check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            self.failures += 1
            message = ErrorCode.SPEECH_COMMAND_FAILED.value.format(command=self.command, error=e)
            print(f"{TerminalColors.YELLOW}{message}{TerminalColors.RESET}", file=sys.stderr)


class RecordingSink(UtteranceSink):
    """
    Keeps every utterance in order. When given another sink it forwards each
    utterance to it first, so recording never delays the real output.
    """

    def __init__(self, forward_to: Optional[UtteranceSink] = None):
        self.forward_to = forward_to
        self.utterances: List[str] = []

    def emit(self, utterance: str) -> None:
        if self.forward_to is not None:
            self.forward_to.emit(utterance)
        self.utterances.append(utterance)


def build_sink(options: SpeechOptions) -> UtteranceSink:
    """Creates the audio sink described by the run-time options."""
    return SayCommandSink(
        command=options.command,
        voice=options.voice,
        rate=options.rate,
        quiet=options.quiet,
        verbose=options.verbose,
    )
