from typing import Optional

from gts.config.options import SpeechOptions
from gts.parser.core.classes import File
from gts.speech.sinks import UtteranceSink

from .declaration_speaker import DeclarationSpeaker
from .expression_speaker import ExpressionSpeaker
from .file_speaker import FileSpeaker
from .statement_speaker import StatementSpeaker


class GoSpeaker:
    """
    Wires the expression, statement, declaration and file speakers around a
    single sink. One instance speaks any number of files; it keeps no state
    between them.
    """

    def __init__(self, sink: UtteranceSink, options: Optional[SpeechOptions] = None):
        self.sink = sink
        self.options = options or SpeechOptions()
        self.expressions = ExpressionSpeaker(sink)
        self.statements = StatementSpeaker(sink, self.expressions)
        self.declarations = DeclarationSpeaker(sink, self.expressions, self.statements)
        self.files = FileSpeaker(sink, self.options, self.declarations)

    def speak_file(self, file: File):
        self.files.speak(file)


def speak_file(file: File, sink: UtteranceSink, options: Optional[SpeechOptions] = None):
    """Renders one parsed file to the sink."""
    GoSpeaker(sink, options).speak_file(file)
