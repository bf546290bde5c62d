from typing import Optional

from gts.parser.core.classes import *
from gts.speech.sinks import UtteranceSink

from .base_speaker import BaseSpeaker
from .expression_speaker import ExpressionSpeaker
from .phonetics import phoneticize
from .statement_speaker import StatementSpeaker

# Label said before a value spec, by declaration kind: (singular, plural)
VALUE_SPEC_LABELS = {
    "const": ("constant", "constants"),
    "var": ("var", "vars"),
}


class DeclarationSpeaker(BaseSpeaker):
    """Speaks top-level declarations: functions, constants, variables and types."""

    def __init__(
        self,
        sink: UtteranceSink,
        expressions: Optional[ExpressionSpeaker] = None,
        statements: Optional[StatementSpeaker] = None,
    ):
        super().__init__(sink)
        self.expressions = expressions or ExpressionSpeaker(sink)
        self.statements = statements or StatementSpeaker(sink, self.expressions)

    def _speak_func_decl(self, node: FuncDecl):
        name = phoneticize(node.name.name)
        self.say(f"function {name}")
        self.speak_field_list(node.params, "taking ", "parameter")
        self.speak_field_list(node.results, "and returning ", "value")
        if node.body is not None:
            self.statements.speak_block(node.body, "function body", f"end function {name}")

    def _speak_gen_decl(self, node: GenDecl):
        for spec in node.specs:
            if isinstance(spec, ValueSpec):
                self.speak_value_spec(spec, *VALUE_SPEC_LABELS.get(node.kind, VALUE_SPEC_LABELS["var"]))
            else:
                self.speak_type_spec(spec)

    def speak_type_spec(self, spec: TypeSpec):
        self.say("type")
        self.say(phoneticize(spec.name.name))
        self.say("is")
        self.expressions.speak(spec.type)

    def speak_value_spec(self, spec: ValueSpec, label: str, plural_label: str):
        """
        Speaks the label once, then every name with its declared type. Values are
        paired with names when the counts match, otherwise they follow all names.
        """
        self.say(plural_label if len(spec.names) > 1 else label)

        paired = len(spec.values) == len(spec.names)
        for i, name in enumerate(spec.names):
            self.expressions.speak(name)
            self.say("of type")
            self.expressions.speak(spec.type)
            if paired:
                self.say("equals")
                self.expressions.speak(spec.values[i])

        if spec.values and not paired:
            self.say("equals")
            for value in spec.values:
                self.expressions.speak(value)

    def speak_field_list(self, fields: Optional[FieldList], lead: str, noun: str):
        """
        Announces how many entries a parameter or result list has, then speaks
        each field as its names followed by "as" (or "all as") and the type.
        `lead` carries its own trailing space.
        """
        count = fields.num_fields() if fields is not None else 0
        if count == 0:
            self.say(lead + " no " + noun + "s")
        elif count == 1:
            self.say(f"{lead}1 {noun}")
        else:
            self.say(f"{lead}{count} {noun}s")

        if fields is None:
            return
        for field in fields.fields:
            for name in field.names:
                self.say(phoneticize(name.name))
            self.say("all as" if len(field.names) > 1 else "as ")
            self.expressions.speak(field.type)
