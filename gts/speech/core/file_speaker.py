from typing import Optional

from gts.config.options import SpeechOptions
from gts.parser.core.classes import File, ImportSpec
from gts.speech.sinks import UtteranceSink

from .base_speaker import BaseSpeaker
from .declaration_speaker import DeclarationSpeaker
from .phonetics import phoneticize


class FileSpeaker(BaseSpeaker):
    """Speaks a whole file: package name, imports, then every declaration in order."""

    def __init__(
        self,
        sink: UtteranceSink,
        options: Optional[SpeechOptions] = None,
        declarations: Optional[DeclarationSpeaker] = None,
    ):
        super().__init__(sink)
        self.options = options or SpeechOptions()
        self.declarations = declarations or DeclarationSpeaker(sink)

    def _speak_file(self, node: File):
        self.say(f"package {node.package.name}")

        if not self.options.skip_imports:
            self.say("imports")
            for spec in node.imports:
                self.say(self.import_phrase(spec))

        self.say("declarations")
        for declaration in node.declarations:
            self.declarations.speak(declaration)

    @staticmethod
    def import_phrase(spec: ImportSpec) -> str:
        phrase = phoneticize(spec.path)
        if spec.alias is not None:
            phrase += " as " + phoneticize(spec.alias.name)
        return phrase
