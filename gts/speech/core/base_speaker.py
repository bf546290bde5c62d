from typing import Any, Callable

from gts.speech.sinks import UtteranceSink


class BaseSpeaker:
    """
    Shared plumbing for the speakers: immediate emission to the sink and
    dispatch on a node's `node_type` tag to a `_speak_<node_type>` method.
    """

    def __init__(self, sink: UtteranceSink):
        self.sink = sink

    def say(self, utterance: str):
        """Hands one utterance to the sink. Empty phrases are not utterances."""
        if utterance:
            self.sink.emit(utterance)

    def speak(self, node: Any):
        if node is None:
            return
        self._handler_for(node)(node)

    def _handler_for(self, node: Any) -> Callable[[Any], None]:
        return getattr(self, f"_speak_{getattr(node, 'node_type', None)}", self._speak_unhandled)

    def _speak_unhandled(self, node: Any):
        # Variants without phrasing rules are skipped silently.
        return None
