from gts.config.config import BINARY_OPERATOR_SPEECH, UNARY_OPERATOR_SPEECH
from gts.parser.core.classes import *

from .base_speaker import BaseSpeaker
from .phonetics import phoneticize


class ExpressionSpeaker(BaseSpeaker):
    """
    Speaks expressions (including type expressions) in natural reading order:
    left to right, outer node before its children.
    """

    def _speak_identifier(self, node: Identifier):
        self.say(phoneticize(node.name))

    def _speak_basic_lit(self, node: BasicLit):
        # Literals are read exactly as written.
        self.say(node.value)

    def _speak_array_type(self, node: ArrayType):
        # The length itself is never read out.
        self.say("slice of" if node.length is None else "array of")
        self.speak(node.element)

    def _speak_pointer_type(self, node: PointerType):
        self.say("pointer to")
        self.speak(node.pointee)

    def _speak_map_type(self, node: MapType):
        self.say("map with")
        self.speak(node.key)
        self.say("key and")
        self.speak(node.value)
        self.say("value")

    def _speak_selector_expr(self, node: SelectorExpr):
        self.speak(node.base)
        self.say("dot")
        self.speak(node.selector)

    def _speak_binary_expr(self, node: BinaryExpr):
        self.speak(node.left)
        self.say(BINARY_OPERATOR_SPEECH.get(node.op, ""))
        self.speak(node.right)

    def _speak_unary_expr(self, node: UnaryExpr):
        self.say(UNARY_OPERATOR_SPEECH.get(node.op, ""))
        self.speak(node.operand)

    def _speak_paren_expr(self, node: ParenExpr):
        self.say("left paren")
        self.speak(node.inner)
        self.say("right paren")

    def _speak_call_expr(self, node: CallExpr):
        if not node.args:
            self.say("call")
        self.speak(node.callee)
        if node.args:
            self.say("of")

        spread_announced = False
        for i, arg in enumerate(node.args):
            if i > 0:
                self.say("comma")
            if node.ellipsis is not None and i >= node.ellipsis and not spread_announced:
                self.say("ellipsis")
                spread_announced = True
            self.speak(arg)
