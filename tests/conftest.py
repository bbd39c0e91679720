import pytest

from subtrans.models import Subtitle, TimeCode


class FakeOracle:
    """Oracle that returns scripted replies and records every prompt.

    A reply may be a string, an exception to raise, or a callable taking the
    prompt.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(prompt)
        return reply


def make_sub(index, text, start_s=None, end_s=None):
    start_s = index if start_s is None else start_s
    end_s = start_s + 1 if end_s is None else end_s
    return Subtitle(
        index=index,
        start=TimeCode.from_parts(seconds=start_s),
        end=TimeCode.from_parts(seconds=end_s),
        text=text,
    )


def upper_reply(prompt):
    """Answer every [index] line of the prompt with its text upper-cased."""
    answers = []
    for line in prompt.splitlines():
        if line.startswith("[") and "] " in line:
            marker, text = line.split("] ", 1)
            if marker[1:].isdigit():
                answers.append(f"{marker}] {text.upper()}")
    return "\n".join(answers)


SAMPLE_SRT = """1
00:00:01,000 --> 00:00:02,000
Hello

2
00:00:03,000 --> 00:00:04,000
World
"""


@pytest.fixture
def sample_srt(tmp_path):
    path = tmp_path / "movie.srt"
    path.write_text(SAMPLE_SRT, encoding="utf-8")
    return path
