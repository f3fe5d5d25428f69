"""Test doubles shared across test modules."""


class FakeClient:
    """Stands in for GeminiClient; replays canned responses in order.

    The last response is repeated once the list is exhausted.
    """

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if not self.responses:
            return None
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]
