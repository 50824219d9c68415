"""
Mock completion client for testing without an LLM.

Returns predefined responses in sequence; exception instances in the
sequence are raised instead of returned.
"""

from paletteguard.domain.interfaces import CompletionClientInterface


class MockCompletionClient(CompletionClientInterface):
    """Returns predefined responses for testing."""

    def __init__(self, responses: list[str | Exception] | None = None):
        """
        Args:
            responses: Responses to return (or exceptions to raise) in sequence
        """
        self._responses = list(responses or [])
        self._call_count = 0
        self.calls: list[tuple[str, str]] = []

    def complete(self, model_id: str, prompt: str) -> str:
        """Return the next predefined response."""
        self.calls.append((model_id, prompt))
        if self._call_count >= len(self._responses):
            raise RuntimeError("MockCompletionClient exhausted responses")

        response = self._responses[self._call_count]
        self._call_count += 1
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        """Number of times complete() has been called."""
        return len(self.calls)

    @property
    def models(self) -> list[str]:
        """Model ids in call order."""
        return [model for model, _ in self.calls]

    def reset(self) -> None:
        """Reset the call history to reuse responses."""
        self._call_count = 0
        self.calls.clear()
