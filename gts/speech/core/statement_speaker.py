from typing import Optional

from gts.parser.core.classes import *
from gts.speech.sinks import UtteranceSink

from .base_speaker import BaseSpeaker
from .expression_speaker import ExpressionSpeaker


class StatementSpeaker(BaseSpeaker):
    """
    Speaks statements and blocks. Statement kinds without phrasing rules
    (for loops, inc/dec, go, defer, branches, local declarations) are silent.
    """

    def __init__(self, sink: UtteranceSink, expressions: Optional[ExpressionSpeaker] = None):
        super().__init__(sink)
        self.expressions = expressions or ExpressionSpeaker(sink)

    def speak_block(self, block: BlockStmt, start_phrase: str, end_phrase: str):
        """Speaks a block between two phrases; an empty phrase is skipped."""
        self.say(start_phrase)
        for statement in block.statements:
            self.speak(statement)
        self.say(end_phrase)

    def _speak_block_stmt(self, node: BlockStmt):
        self.speak_block(node, "begin block", "end block")

    def _speak_if_stmt(self, node: IfStmt):
        self.say("if")
        if node.init is not None:
            self.say("with initializer")
            self.speak(node.init)
            self.say("when")
        self.expressions.speak(node.condition)

        # "end if" is said once, after the last branch of the chain.
        has_else = node.else_branch is not None
        self.speak_block(node.body, "then", "" if has_else else "end if")

        if isinstance(node.else_branch, BlockStmt):
            self.speak_block(node.else_branch, "else", "end if")
        elif has_else:
            self.speak(node.else_branch)

    def _speak_range_stmt(self, node: RangeStmt):
        self.say("range over")
        self.expressions.speak(node.source)
        self.say("with")
        if node.key is not None:
            self.say("key")
            self.expressions.speak(node.key)
            if node.value is not None:
                self.say("and")
        if node.value is not None:
            self.say("value")
            self.expressions.speak(node.value)
        self.speak_block(node.body, "range body", "end range")

    def _speak_return_stmt(self, node: ReturnStmt):
        self.say("return")
        for i, result in enumerate(node.results):
            if i > 0:
                self.say("also")
            self.expressions.speak(result)

    def _speak_assign_stmt(self, node: AssignStmt):
        self.say("let")
        if len(node.lhs) == len(node.rhs) and len(node.lhs) > 1:
            for target, value in zip(node.lhs, node.rhs):
                self.expressions.speak(target)
                self.say("equal")
                self.expressions.speak(value)
            return

        for i, target in enumerate(node.lhs):
            if i > 0:
                self.say("and")
            self.expressions.speak(target)
        self.say("equal")
        for value in node.rhs:
            self.expressions.speak(value)

    def _speak_expr_stmt(self, node: ExprStmt):
        self.expressions.speak(node.expression)
